from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from rapidcurvepy.curves import Curve3D, CurveKind

# Indices into a CurveCollection. Views never own curves.
CircleView = Tuple[int, ...]


class CurveCollection:
    """Owning container for the curves of one run, in generation order."""

    def __init__(self, curves: Optional[Iterable[Curve3D]] = None):
        self._curves: List[Curve3D] = []
        for curve in curves or ():
            self.register_curve(curve)

    def register_curve(self, curve: Curve3D) -> int:
        """Append a curve and return its index."""
        if not isinstance(curve, Curve3D):
            raise TypeError(f"Expected a Curve3D, got {type(curve).__name__}")
        self._curves.append(curve)
        return len(self._curves) - 1

    def get_curves(self) -> List[Curve3D]:
        """Get a copy of the curve list."""
        return self._curves.copy()

    def curve_count(self) -> int:
        return len(self._curves)

    def indices_of(self, kind: CurveKind) -> Tuple[int, ...]:
        """Indices of all curves of the given kind, in original order."""
        return tuple(i for i, curve in enumerate(self._curves) if curve.kind is kind)

    def resolve(self, view: Sequence[int]) -> List[Curve3D]:
        """Look up the curves referenced by a view."""
        return [self._curves[i] for i in view]

    def radii(self, view: Sequence[int]) -> np.ndarray:
        """Characteristic radii of the curves referenced by a view."""
        return np.array(
            [self._curves[i].characteristic_radius() for i in view], dtype=float
        )

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[Curve3D]:
        return iter(self._curves)

    def __getitem__(self, index: int) -> Curve3D:
        return self._curves[index]
