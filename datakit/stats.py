"""Running statistics over a stream of samples."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Stats:
    """Sum, sum of squares, count, minimum and maximum of the samples seen."""

    sum: float = 0.0
    sumsq: float = 0.0
    n: int = 0
    min: float = 0.0
    max: float = 0.0

    def sample(self, s: float) -> None:
        """Add one sample."""
        self.sum += s
        self.sumsq += s * s
        if self.n == 0:
            self.min = s
            self.max = s
        else:
            self.min = min(self.min, s)
            self.max = max(self.max, s)
        self.n += 1

    def mean(self) -> float:
        """Arithmetic mean; NaN when there are no samples."""
        if self.n == 0:
            return math.nan
        return self.sum / self.n

    def stddev(self) -> float:
        """Sample standard deviation; NaN with fewer than two samples."""
        if self.n < 2:
            return math.nan
        variance = (self.sumsq - (self.sum * self.sum / self.n)) / (self.n - 1)
        if variance < 0:
            return math.nan
        return math.sqrt(variance)

    def dump(self, file: TextIO | None = None) -> None:
        """Write a one-line summary to ``file`` (standard error by default)."""
        out = sys.stderr if file is None else file
        out.write(
            f"sum: {self.sum:f}, sumsq: {self.sumsq:f}, n: {self.n}, "
            f"min: {self.min:f}, max: {self.max:f}, "
            f"mean: {self.mean():f}, stddev: {self.stddev():f}"
        )