"""Floating point coordinate types the planners are generic over."""

import numpy as np


class CoordinateType:
    """Numeric contract for coordinates and edge weights.

    Wraps a numpy floating dtype and exposes the associated constants
    (``MAX``, ``EPSILON``, ``DEFAULT``) together with casting and uniform
    sampling in that precision.
    """

    def __init__(self, name: str, dtype):
        self.name = name
        self.dtype = np.dtype(dtype)
        if not np.issubdtype(self.dtype, np.floating):
            raise TypeError(f"Coordinate dtype must be floating, got {self.dtype}")
        info = np.finfo(self.dtype)
        self.MAX = float(info.max)
        self.EPSILON = float(info.eps)
        self.DEFAULT = 0.0

    def cast(self, value) -> float:
        return float(self.dtype.type(value))

    def sample(self, rng: np.random.Generator, low: float, high: float) -> float:
        value = self.dtype.type(rng.uniform(low, high))
        # Rounding into a narrower dtype can land on the excluded upper bound
        if low < high and value >= high:
            value = np.nextafter(self.dtype.type(high), self.dtype.type(low))
        return float(value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoordinateType):
            return NotImplemented
        return self.dtype == other.dtype

    def __hash__(self) -> int:
        return hash(self.dtype)

    def __repr__(self) -> str:
        return f"CoordinateType({self.name})"


Float64 = CoordinateType("float64", np.float64)
Float32 = CoordinateType("float32", np.float32)
