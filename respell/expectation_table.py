"""Gaussian estimates of how much a candidate edit changes a weighted distance.

Words are considered in an introducing order. When an edit is introduced at
one word, the words before it are expected to get worse by the positive part
of a typical deviation. The words after it may get better or worse, but can
never fall below a distance of zero. All of these are treated as independent.
The introducing word's own change is known exactly.

As the edit is then tried on further words, each word's known change replaces
the gaussian it contributed. That gaussian is removed from the running
estimate, and the exact change is added as a shift.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import accumulate
from typing import Sequence

from respell.gaussians import Gaussian

_ZERO = Gaussian(0.0, 0.0)


@dataclass(frozen=True)
class ExpectationTable:
    """Prefix and suffix sums used to build and update edit estimates."""

    total_frequency: tuple[float, ...]
    root_total_squared_frequency: tuple[float, ...]
    unknown_edit_gaussians: tuple[Gaussian, ...]
    total_remaining_unknown_edit_gaussians: tuple[Gaussian, ...]
    expected_deviation_above_zero: Gaussian


def build_expectation_table(
    frequencies: Sequence[float],
    current_distances: Sequence[int],
    typical_sigma: float,
) -> ExpectationTable:
    """Build the table for words given in introducing order."""
    unknown_edit = Gaussian(0.0, typical_sigma)
    max_trunc = int(math.ceil(typical_sigma * 20.0 + 20.0))
    truncated = [unknown_edit.restrict_above(-float(k)) for k in range(max_trunc)]

    total_frequency = tuple(accumulate(frequencies))
    root_total_squared = tuple(
        math.sqrt(s) for s in accumulate(f * f for f in frequencies)
    )

    unknown: list[Gaussian] = []
    for f, distance in zip(frequencies, current_distances):
        if not 0 <= distance < len(truncated):
            raise ValueError(
                f"current distance {distance} is outside the supported range "
                f"0..{len(truncated) - 1}"
            )
        unknown.append(truncated[distance].scale(f))

    remaining = list(accumulate(reversed(unknown), Gaussian.add_indep, initial=_ZERO))[1:]
    remaining.reverse()

    return ExpectationTable(
        total_frequency=total_frequency,
        root_total_squared_frequency=root_total_squared,
        unknown_edit_gaussians=tuple(unknown),
        total_remaining_unknown_edit_gaussians=tuple(remaining),
        expected_deviation_above_zero=truncated[0],
    )


def _before(table: ExpectationTable, introducing_i: int) -> Gaussian:
    if introducing_i <= 0:
        return _ZERO
    z = table.expected_deviation_above_zero
    return Gaussian(
        z.mean * table.total_frequency[introducing_i - 1],
        z.sigma * table.root_total_squared_frequency[introducing_i - 1],
    )


def estimate_introduce_edit(
    frequencies: Sequence[float], table: ExpectationTable, introducing_i: int
) -> Gaussian:
    """Estimate an edit introduced at ``introducing_i`` before its own change is known."""
    if introducing_i < len(frequencies):
        after = table.total_remaining_unknown_edit_gaussians[introducing_i]
    else:
        after = _ZERO
    return _before(table, introducing_i).add_indep(after)


def introduce_edit(
    frequencies: Sequence[float],
    table: ExpectationTable,
    introducing_i: int,
    change: int,
) -> Gaussian:
    """Estimate an edit whose change at the introducing word is ``change``."""
    if introducing_i < len(frequencies) - 1:
        after = table.total_remaining_unknown_edit_gaussians[introducing_i + 1]
    else:
        after = _ZERO
    known = change * frequencies[introducing_i]
    return _before(table, introducing_i).add_indep(after).shift(known)


def update_edit(
    frequencies: Sequence[float],
    table: ExpectationTable,
    introduced_i: int,
    updated_i: int,
    change: int,
    working_expectation: Gaussian,
) -> Gaussian:
    """Replace the estimate for word ``updated_i`` with its known ``change``."""
    if updated_i < introduced_i:
        demix = table.expected_deviation_above_zero.scale(frequencies[updated_i])
    elif updated_i > introduced_i:
        demix = table.unknown_edit_gaussians[updated_i]
    else:
        raise ValueError("Not allowed to update at the introduced_i")
    shift = change * frequencies[updated_i]
    return working_expectation.remove_indep(demix).shift(shift)