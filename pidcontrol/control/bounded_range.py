"""Closed numeric interval used to bound the integral term."""
from __future__ import annotations

import math
from dataclasses import dataclass

from pidcontrol.errors import InvalidRangeError


@dataclass(frozen=True)
class BoundedRange:
    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise InvalidRangeError(self.minimum, self.maximum)

    @classmethod
    def unbounded(cls) -> "BoundedRange":
        return cls(-math.inf, math.inf)

    def clamp(self, value: float) -> float:
        if value < self.minimum:
            return self.minimum
        if value > self.maximum:
            return self.maximum
        return value
