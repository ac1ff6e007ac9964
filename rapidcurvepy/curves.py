"""3D parametric curves.

The curve set is closed: `Circle`, `Ellipse` and `Helix`. Each variant is an
immutable dataclass tagged with a `CurveKind` and provides closed-form
position and first derivative with respect to the parameter `t`.

Construction validates the geometric parameters and raises
`InvalidParameterError` when one of them is not strictly positive.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Iterable, Tuple, Type, Union

import numpy as np

from rapidcurvepy.cad_types import Vector
from rapidcurvepy.constants import NUMBER_FORMAT, TWO_PI
from rapidcurvepy.errors import InvalidParameterError

ArrayOrFloat = Union[float, np.ndarray]


class CurveKind(str, Enum):
    CIRCLE = "Circle"
    ELLIPSE = "Ellipse"
    HELIX = "Helix"


def _fmt(value: float) -> str:
    return NUMBER_FORMAT.format(value)


def _require_positive(kind: CurveKind, message: str, **params: float) -> None:
    for value in params.values():
        if isinstance(value, bool) or not (math.isfinite(value) and value > 0):
            raise InvalidParameterError(message, curve_kind=kind.value, parameters=params)


class Curve3D(ABC):
    """Abstract base class for a 3D parametric curve.

    Contract:
    - `evaluate(t)` returns the point on the curve at parameter `t`.
    - `derivative(t)` returns the exact tangent vector d/dt of `evaluate`.
    - `characteristic_radius()` is the scalar used to order curves.
    """

    kind: ClassVar[CurveKind]

    @abstractmethod
    def _position(self, t: ArrayOrFloat) -> Tuple[ArrayOrFloat, ArrayOrFloat, ArrayOrFloat]:
        """Coordinates at `t`; must accept scalars and numpy arrays."""

    @abstractmethod
    def _tangent(self, t: float) -> Tuple[float, float, float]:
        pass

    @abstractmethod
    def characteristic_radius(self) -> float:
        pass

    @abstractmethod
    def describe(self) -> str:
        """Variant name followed by its descriptive fields."""

    def evaluate(self, t: float) -> Vector:
        return Vector(*self._position(float(t)))

    def derivative(self, t: float) -> Vector:
        return Vector(*self._tangent(float(t)))

    def sample(self, t_values: Iterable[float]) -> np.ndarray:
        """Evaluate the curve at many parameters.

        Args:
            t_values: Parameter values

        Returns:
            Array of shape (n, 3) with one point per parameter value
        """
        if not isinstance(t_values, np.ndarray):
            t_values = list(t_values)
        t = np.atleast_1d(np.asarray(t_values, dtype=float))
        return np.column_stack(self._position(t))


@dataclass(frozen=True)
class Circle(Curve3D):
    """A circle of the given radius centered at the origin in the XY plane."""

    radius: float

    kind: ClassVar[CurveKind] = CurveKind.CIRCLE

    def __post_init__(self) -> None:
        _require_positive(self.kind, "Circle radius must be positive.", radius=self.radius)
        object.__setattr__(self, "radius", float(self.radius))

    def _position(self, t):
        return self.radius * np.cos(t), self.radius * np.sin(t), 0.0 * t

    def _tangent(self, t):
        return -self.radius * math.sin(t), self.radius * math.cos(t), 0.0

    def characteristic_radius(self) -> float:
        return self.radius

    def describe(self) -> str:
        return f"Circle, Radius: {_fmt(self.radius)}"


@dataclass(frozen=True)
class Ellipse(Curve3D):
    """An axis-aligned ellipse in the XY plane.

    `major_radius` lies along X and `minor_radius` along Y. Their relative
    size is not checked.
    """

    major_radius: float
    minor_radius: float

    kind: ClassVar[CurveKind] = CurveKind.ELLIPSE

    def __post_init__(self) -> None:
        _require_positive(
            self.kind,
            "Ellipse radii must be positive.",
            major_radius=self.major_radius,
            minor_radius=self.minor_radius,
        )
        object.__setattr__(self, "major_radius", float(self.major_radius))
        object.__setattr__(self, "minor_radius", float(self.minor_radius))

    def _position(self, t):
        return self.major_radius * np.cos(t), self.minor_radius * np.sin(t), 0.0 * t

    def _tangent(self, t):
        return -self.major_radius * math.sin(t), self.minor_radius * math.cos(t), 0.0

    def characteristic_radius(self) -> float:
        return self.major_radius

    def describe(self) -> str:
        return f"Ellipse, Major Radius: {_fmt(self.major_radius)}"


@dataclass(frozen=True)
class Helix(Curve3D):
    """A helix around the Z axis rising `step` per full turn."""

    radius: float
    step: float

    kind: ClassVar[CurveKind] = CurveKind.HELIX

    def __post_init__(self) -> None:
        _require_positive(
            self.kind,
            "Helix radius and step must be positive.",
            radius=self.radius,
            step=self.step,
        )
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "step", float(self.step))

    def _position(self, t):
        return self.radius * np.cos(t), self.radius * np.sin(t), self.step * t / TWO_PI

    def _tangent(self, t):
        return -self.radius * math.sin(t), self.radius * math.cos(t), self.step / TWO_PI

    def characteristic_radius(self) -> float:
        return self.radius

    def describe(self) -> str:
        return f"Helix, Radius: {_fmt(self.radius)}, Step: {_fmt(self.step)}"


CURVE_TYPES: Dict[CurveKind, Type[Curve3D]] = {
    CurveKind.CIRCLE: Circle,
    CurveKind.ELLIPSE: Ellipse,
    CurveKind.HELIX: Helix,
}


def make_curve(kind: Union[CurveKind, str], **params: float) -> Curve3D:
    """Build a curve of the given kind.

    Args:
        kind: Curve kind or its name ("Circle", "Ellipse", "Helix")
        **params: Constructor fields of the variant, e.g. ``radius=2.0``

    Returns:
        The constructed curve

    Raises:
        ValueError: If the kind is unknown
        InvalidParameterError: If a geometric parameter is not strictly positive
    """
    try:
        curve_kind = CurveKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown curve kind: {kind}. "
            f"Supported kinds: {', '.join(k.value for k in CurveKind)}"
        ) from None
    return CURVE_TYPES[curve_kind](**params)
