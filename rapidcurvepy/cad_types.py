from typing import Tuple

import numpy as np


class Vector(np.ndarray):
    """A 3D vector used for curve positions and tangents."""

    def __new__(cls, x: float, y: float, z: float = 0) -> "Vector":
        return np.asarray([x, y, z], dtype=float).view(cls)

    def __eq__(self, other: object) -> bool:
        other = np.asarray(other)
        if other.shape != self.shape:
            return False
        return bool(np.allclose(np.asarray(self), other))

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    def norm(self) -> float:
        return float(np.linalg.norm(self))

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    @property
    def z(self) -> float:
        return float(self[2])

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_json(self):
        return {
            "x": self.x,
            "y": self.y,
            "z": self.z,
        }

    @staticmethod
    def from_json(json_data):
        return Vector(json_data["x"], json_data["y"], json_data["z"])
