"""
Optional 3D rendering of curves with matplotlib.

Install with: pip install rapidcurvepy[viz]
"""

from typing import Iterable, Optional

import numpy as np

from rapidcurvepy.constants import HELIX_TURNS, SAMPLES_PER_CURVE, TWO_PI
from rapidcurvepy.curves import Curve3D, CurveKind

CURVE_COLORS = {
    CurveKind.CIRCLE: "tab:blue",
    CurveKind.ELLIPSE: "tab:orange",
    CurveKind.HELIX: "tab:green",
}


def parameter_range(curve: Curve3D, num_points: int = SAMPLES_PER_CURVE) -> np.ndarray:
    """Parameter values covering one closed loop, or several turns for a helix."""
    turns = HELIX_TURNS if curve.kind is CurveKind.HELIX else 1
    return np.linspace(0.0, turns * TWO_PI, num_points)


def plot_curves(
    curves: Iterable[Curve3D],
    file_name: Optional[str] = None,
    num_points: int = SAMPLES_PER_CURVE,
    width: int = 800,
    height: int = 600,
) -> None:
    """
    Plot curves in a 3D axes.

    Args:
        curves: Curves to draw
        file_name: Path to save the PNG file. If None, displays in a UI window instead.
        num_points: Samples per curve
        width: Image width in pixels (default: 800)
        height: Image height in pixels (default: 600)

    Raises:
        ValueError: If there are no curves to draw
        ImportError: If matplotlib is not installed
    """
    curves = list(curves)
    if not curves:
        raise ValueError("No curves to display")

    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for curve rendering. Install with: pip install matplotlib"
        )

    fig = plt.figure(figsize=(width / 100, height / 100), dpi=100)
    ax = fig.add_subplot(projection="3d")

    for i, curve in enumerate(curves):
        points = curve.sample(parameter_range(curve, num_points))
        ax.plot(
            points[:, 0],
            points[:, 1],
            points[:, 2],
            color=CURVE_COLORS[curve.kind],
            label=f"{i}: {curve.describe()}",
        )

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.legend(fontsize="small")

    if file_name is None:
        plt.show()
    else:
        fig.savefig(file_name)
    plt.close(fig)
