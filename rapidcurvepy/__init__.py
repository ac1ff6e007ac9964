"""
rapidcurvepy - closed-form 3D parametric curves.

Circles, ellipses and helices with exact position and derivative, a random
curve generator and a parallel circle-radius aggregation.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

from .aggregate import (
    CircleSummary,
    filter_circles,
    parallel_sum_radii,
    sort_by_radius,
    summarize_circles,
)
from .app import main, run
from .cad_types import Vector
from .collection import CurveCollection
from .curves import Circle, Curve3D, CurveKind, Ellipse, Helix, make_curve
from .errors import InvalidParameterError
from .generator import GeneratorConfig, generate_curves
from .report import CurveEvaluation, evaluate_curves

__all__ = [
    # Curves
    "Curve3D",
    "CurveKind",
    "Circle",
    "Ellipse",
    "Helix",
    "make_curve",
    "InvalidParameterError",
    # Geometry types
    "Vector",
    # Pipeline
    "CurveCollection",
    "GeneratorConfig",
    "generate_curves",
    "CurveEvaluation",
    "evaluate_curves",
    "CircleSummary",
    "filter_circles",
    "sort_by_radius",
    "parallel_sum_radii",
    "summarize_circles",
    "run",
    "main",
]
