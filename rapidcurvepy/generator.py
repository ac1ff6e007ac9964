"""
Random curve generation.

Each curve draws a radius-like value, a step-like value (only used by helices)
and a variant, in that order, from a numpy random Generator.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from rapidcurvepy.collection import CurveCollection
from rapidcurvepy.constants import (
    ELLIPSE_MINOR_RATIO,
    N_CURVES,
    RADIUS_RANGE,
    STEP_RANGE,
)
from rapidcurvepy.curves import Circle, Curve3D, CurveKind, Ellipse, Helix

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Parameters of the random curve generator"""

    count: int = N_CURVES
    radius_range: Tuple[float, float] = RADIUS_RANGE  # [low, high)
    step_range: Tuple[float, float] = STEP_RANGE  # [low, high)
    ellipse_minor_ratio: float = ELLIPSE_MINOR_RATIO
    seed: Optional[int] = None  # None = seed from the wall clock

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source, seeded from the wall clock when no seed is given."""
    if seed is None:
        seed = time.time_ns()
    return np.random.default_rng(seed)


def random_curve(
    rng: np.random.Generator, config: Optional[GeneratorConfig] = None
) -> Curve3D:
    """Draw a single random curve."""
    config = config or GeneratorConfig()
    radius = float(rng.uniform(*config.radius_range))
    step = float(rng.uniform(*config.step_range))
    kinds = list(CurveKind)
    kind = kinds[int(rng.integers(len(kinds)))]

    if kind is CurveKind.CIRCLE:
        return Circle(radius)
    elif kind is CurveKind.ELLIPSE:
        return Ellipse(radius, radius * config.ellipse_minor_ratio)
    else:
        return Helix(radius, step)


def generate_curves(
    config: Optional[GeneratorConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> CurveCollection:
    """
    Generate a collection of randomly parameterized curves.

    Args:
        config: Generator parameters (default: 5 curves, radius in [1, 11),
            step in [1, 6))
        rng: Random source. If None, one is created from `config.seed`.

    Returns:
        CurveCollection owning the generated curves in generation order

    Raises:
        InvalidParameterError: If the configured ranges yield a non-positive
            geometric parameter
    """
    config = config or GeneratorConfig()
    if rng is None:
        rng = make_rng(config.seed)

    collection = CurveCollection()
    for _ in range(config.count):
        collection.register_curve(random_curve(rng, config))

    logger.info(f"Generated {collection.curve_count()} curves")
    return collection
