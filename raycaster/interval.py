"""
Numeric intervals used to bound acceptable ray parameters.
"""

from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Interval:
    """A real interval [min, max].

    Callers are responsible for supplying min <= max.
    """

    min: float = -math.inf
    max: float = math.inf

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        """True if min <= x <= max."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """True if min < x < max (both bounds excluded)."""
        return self.min < x < self.max

    def with_max(self, new_max: float) -> Interval:
        """Return a copy of this interval with a new upper bound."""
        return Interval(self.min, new_max)
