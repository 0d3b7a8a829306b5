"""Closed ranges of ray parameters and colour intensities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    """A range of real numbers from min to max."""

    min: float
    max: float

    def surrounds(self, x: float) -> bool:
        """True when x lies strictly inside the interval."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        """Limit x to the interval."""
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x