"""
Circle aggregation: filter the circles out of a collection, order them by
radius and sum their radii.

The sum is computed fork-join style: the radii are split into disjoint slices,
each slice is summed by a worker thread and the partial sums are merged once
every worker has finished.
"""

import logging
import operator
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import reduce
from typing import List, Sequence, Tuple

import numpy as np

from rapidcurvepy.collection import CircleView, CurveCollection
from rapidcurvepy.constants import NUM_WORKERS, NUMBER_FORMAT
from rapidcurvepy.curves import CurveKind

logger = logging.getLogger(__name__)


def filter_circles(collection: CurveCollection) -> CircleView:
    """Indices of the circles in `collection`, in generation order."""
    return collection.indices_of(CurveKind.CIRCLE)


def sort_by_radius(collection: CurveCollection, view: CircleView) -> CircleView:
    """Reorder a view ascending by characteristic radius."""
    return tuple(
        sorted(view, key=lambda i: collection[i].characteristic_radius())
    )


def _partial_sum(chunk: np.ndarray) -> float:
    return float(np.sum(chunk))


def parallel_sum_radii(radii: Sequence[float], num_workers: int = NUM_WORKERS) -> float:
    """
    Sum radii over disjoint slices in worker threads.

    Args:
        radii: Radius values; only read
        num_workers: Number of worker threads (0 = auto-detect)

    Returns:
        Total of all radii, 0.0 for an empty input
    """
    if num_workers < 0:
        raise ValueError(f"num_workers must be non-negative, got {num_workers}")
    values = np.asarray(radii, dtype=float)
    if values.size == 0:
        return 0.0

    if num_workers == 0:
        num_workers = os.cpu_count() or 1
    n_chunks = min(num_workers, values.size)
    chunks = np.array_split(values, n_chunks)

    with ThreadPoolExecutor(max_workers=n_chunks) as executor:
        partials = list(executor.map(_partial_sum, chunks))

    logger.debug(f"Partial sums over {n_chunks} slices: {partials}")
    return reduce(operator.add, partials, 0.0)


@dataclass(frozen=True)
class CircleSummary:
    """Circles of a collection ordered by radius, with the sum of their radii"""

    view: CircleView
    radii: Tuple[float, ...]
    total_radius: float

    @property
    def count(self) -> int:
        return len(self.view)

    def to_json(self):
        return {
            "radii": list(self.radii),
            "total_radius": self.total_radius,
        }


def summarize_circles(
    collection: CurveCollection, num_workers: int = NUM_WORKERS
) -> CircleSummary:
    """Filter, sort and reduce the circles of a collection."""
    view = sort_by_radius(collection, filter_circles(collection))
    radii = collection.radii(view)
    total = parallel_sum_radii(radii, num_workers=num_workers)
    logger.info(f"Aggregated {len(view)} circles, total radius {total}")
    return CircleSummary(view=view, radii=tuple(float(r) for r in radii), total_radius=total)


def format_summary(summary: CircleSummary) -> str:
    lines: List[str] = ["Sorted Circles by Radius:"]
    for radius in summary.radii:
        lines.append(f"Circle, Radius: {NUMBER_FORMAT.format(radius)}")
    lines.append(f"Total Sum of Radii: {NUMBER_FORMAT.format(summary.total_radius)}")
    return "\n".join(lines) + "\n"
