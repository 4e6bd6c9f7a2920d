"""Axis-aligned planning region."""

import logging
from typing import Optional

import numpy as np

from mopla.core.coordinate import CoordinateType, Float64
from mopla.core.space import Point

logger = logging.getLogger(__name__)


class Boundaries:
    """Rectangular region of interest with uniform configuration sampling.

    Membership is tested on closed intervals, samples are drawn from
    ``[lower, upper)`` on each axis. Inverted ranges are accepted as given.
    """

    def __init__(
        self,
        x_lower: float,
        x_upper: float,
        y_lower: float,
        y_upper: float,
        coord_type: CoordinateType = Float64,
        seed: Optional[int] = None
    ):
        self.coord_type = coord_type
        self.x_lower = coord_type.cast(x_lower)
        self.x_upper = coord_type.cast(x_upper)
        self.y_lower = coord_type.cast(y_lower)
        self.y_upper = coord_type.cast(y_upper)
        self.rng = np.random.default_rng(seed)

        if self.x_lower > self.x_upper or self.y_lower > self.y_upper:
            logger.warning(f"Boundaries have an inverted range: {self}")

    def contains(self, point: Point) -> bool:
        return (
            self.x_lower <= point.x <= self.x_upper
            and self.y_lower <= point.y <= self.y_upper
        )

    def sample(self) -> Point:
        x = self.coord_type.sample(self.rng, self.x_lower, self.x_upper)
        y = self.coord_type.sample(self.rng, self.y_lower, self.y_upper)
        return Point(x, y, self.coord_type)

    def __repr__(self) -> str:
        return (
            f"Boundaries(x=[{self.x_lower}, {self.x_upper}], "
            f"y=[{self.y_lower}, {self.y_upper}])"
        )
