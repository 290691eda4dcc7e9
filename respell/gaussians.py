"""Gaussian estimates combined as independent quantities."""

from __future__ import annotations

import math
from dataclasses import dataclass

_NEGATIVE_VARIANCE_TOLERANCE = 0.0001


@dataclass(frozen=True)
class Gaussian:
    """A normal distribution; both fields must be finite."""

    mean: float
    sigma: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.mean) and math.isfinite(self.sigma)):
            raise ValueError(f"non-finite gaussian: mean={self.mean}, sigma={self.sigma}")

    def add_indep(self, other: Gaussian) -> Gaussian:
        """The sum of two independent variables."""
        return Gaussian(self.mean + other.mean, math.hypot(self.sigma, other.sigma))

    def remove_indep(self, other: Gaussian) -> Gaussian:
        """Undo :meth:`add_indep`; raise if the variance would be clearly negative."""
        variance = self.sigma * self.sigma - other.sigma * other.sigma
        if variance < -_NEGATIVE_VARIANCE_TOLERANCE:
            raise ValueError("Negative variance")
        return Gaussian(self.mean - other.mean, math.sqrt(max(variance, 0.0)))

    def add_const(self, c: float) -> Gaussian:
        return Gaussian(self.mean + c, self.sigma)

    def scale(self, s: float) -> Gaussian:
        return Gaussian(self.mean * s, self.sigma * s)

    def shift(self, m: float) -> Gaussian:
        return Gaussian(self.mean + m, self.sigma)

    def restrict_above(self, c: float) -> Gaussian:
        """Mean and sigma of this distribution truncated to values above ``c``."""
        if not self.sigma > 0:
            raise ValueError("restricting requires a positive sigma")
        z = (c - self.mean) / self.sigma
        pdf_c = math.exp(-0.5 * z * z) / (self.sigma * math.sqrt(2.0 * math.pi))
        sf_c = 0.5 * math.erfc(z / math.sqrt(2.0))
        if sf_c == 0.0:
            raise ValueError("no probability mass above the cut-off")
        ratio = pdf_c / sf_c
        factor_sq = 1.0 + z * ratio - ratio * ratio
        if factor_sq < 0.0:
            raise ValueError("truncation produced a negative variance")
        return Gaussian(self.mean + ratio * self.sigma, self.sigma * math.sqrt(factor_sq))