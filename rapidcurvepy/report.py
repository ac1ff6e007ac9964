from dataclasses import dataclass
from typing import Iterable, List

from rapidcurvepy.cad_types import Vector
from rapidcurvepy.constants import EVAL_PARAMETER, EVAL_PARAMETER_LABEL, NUMBER_FORMAT
from rapidcurvepy.curves import Curve3D


@dataclass(frozen=True, eq=False)
class CurveEvaluation:
    """Position and derivative of one curve at parameter t"""

    curve: Curve3D
    t: float
    point: Vector
    derivative: Vector

    def to_json(self):
        return {
            "kind": self.curve.kind.value,
            "t": self.t,
            "point": self.point.to_json(),
            "derivative": self.derivative.to_json(),
        }


def evaluate_curves(
    curves: Iterable[Curve3D], t: float = EVAL_PARAMETER
) -> List[CurveEvaluation]:
    """Evaluate every curve at `t`, keeping the input order."""
    return [
        CurveEvaluation(curve, t, curve.evaluate(t), curve.derivative(t))
        for curve in curves
    ]


def format_triple(vector: Vector) -> str:
    return "(" + ", ".join(NUMBER_FORMAT.format(c) for c in vector.as_tuple()) + ")"


def format_evaluation(evaluation: CurveEvaluation) -> str:
    return (
        f"Curve Type: {evaluation.curve.describe()}\n"
        f"Point (x, y, z): {format_triple(evaluation.point)}\n"
        f"Derivative (dx, dy, dz): {format_triple(evaluation.derivative)}\n"
    )


def format_report(
    evaluations: Iterable[CurveEvaluation], t_label: str = EVAL_PARAMETER_LABEL
) -> str:
    """
    Render the evaluation report.

    Args:
        evaluations: Evaluations in generation order
        t_label: Human-readable name of the parameter value used in the header

    Returns:
        The header line followed by one block per curve, blocks separated by
        a blank line
    """
    lines = [f"Coordinates and Derivatives at t={t_label}:"]
    for evaluation in evaluations:
        lines.append(format_evaluation(evaluation))
    return "\n".join(lines) + "\n"
