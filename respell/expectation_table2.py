"""Sum-of-squares bounds on how much a candidate edit changes a weighted distance.

Words are considered in an introducing order. When an edit is introduced at
one word, every other word's change is unknown. Those before it can only get
worse. Those after it can get better only if their current distance is
nonzero. The introducing word's own change is known exactly.

The estimator keeps the exact weighted change seen so far, together with the
sums of squared frequencies of the words not yet examined. As each word is
tried, its frequency leaves the relevant sums and its exact change is added.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from itertools import accumulate
from typing import Sequence


@dataclass(frozen=True)
class Estimator:
    """Known weighted change plus the squared-frequency mass still unknown."""

    actual_weighted_change: float
    before_ss_freq: float
    after_ss_freq: float
    after_nonzero_ss_freq: float


@dataclass(frozen=True)
class ExpectationTable:
    """Prefix and suffix sums of squared frequencies in introducing order."""

    ss_frequency: tuple[float, ...]
    remaining_ss_frequency: tuple[float, ...]
    remaining_nonzero_ss_frequency: tuple[float, ...]


def _suffix_sums(values: Sequence[float]) -> tuple[float, ...]:
    sums = list(accumulate(reversed(values)))
    sums.reverse()
    return tuple(sums)


def build_expectation_table(
    frequencies: Sequence[float], current_distances: Sequence[int]
) -> ExpectationTable:
    """Build the table for words given in introducing order."""
    squares = [f * f for f in frequencies]
    nonzero_squares = [
        sq if distance > 0 else 0.0 for sq, distance in zip(squares, current_distances)
    ]
    return ExpectationTable(
        ss_frequency=tuple(accumulate(squares)),
        remaining_ss_frequency=_suffix_sums(squares),
        remaining_nonzero_ss_frequency=_suffix_sums(nonzero_squares),
    )


def _before_ss(table: ExpectationTable, i: int) -> float:
    return table.ss_frequency[i - 1] if i > 0 else 0.0


def estimate_introduce_edit(
    frequencies: Sequence[float], table: ExpectationTable, introducing_i: int
) -> Estimator:
    """Estimate an edit at ``introducing_i`` assuming it improves that word by one."""
    i = introducing_i
    is_last = i >= len(frequencies) - 1
    return Estimator(
        actual_weighted_change=-1.0 * frequencies[i],
        before_ss_freq=_before_ss(table, i),
        after_ss_freq=0.0 if is_last else table.remaining_ss_frequency[i + 1],
        after_nonzero_ss_freq=0.0 if is_last else table.remaining_nonzero_ss_frequency[i],
    )


def introduce_edit(
    frequencies: Sequence[float],
    table: ExpectationTable,
    introducing_i: int,
    change: int,
) -> Estimator:
    """Start an estimator for an edit whose change at the introducing word is known."""
    i = introducing_i
    is_last = i >= len(frequencies) - 1
    return Estimator(
        actual_weighted_change=change * frequencies[i],
        before_ss_freq=_before_ss(table, i),
        after_ss_freq=0.0 if is_last else table.remaining_ss_frequency[i + 1],
        after_nonzero_ss_freq=0.0 if is_last else table.remaining_nonzero_ss_frequency[i + 1],
    )


def update_edit(
    frequencies: Sequence[float],
    current_distances: Sequence[int],
    introduced_i: int,
    updated_i: int,
    change: int,
    working_expectation: Estimator,
) -> Estimator:
    """Account for the known ``change`` at word ``updated_i``."""
    if updated_i == introduced_i:
        return working_expectation
    f = frequencies[updated_i]
    ff = f * f
    e = working_expectation
    if updated_i < introduced_i:
        return replace(
            e,
            actual_weighted_change=e.actual_weighted_change + change * f,
            before_ss_freq=e.before_ss_freq - ff,
        )
    nonzero = current_distances[updated_i] > 0
    return replace(
        e,
        actual_weighted_change=e.actual_weighted_change + change * f,
        after_ss_freq=e.after_ss_freq - ff,
        after_nonzero_ss_freq=e.after_nonzero_ss_freq - ff if nonzero else e.after_nonzero_ss_freq,
    )


def calc_best_possible(estimator: Estimator, scale: float) -> float:
    """Optimistic bound: remaining improvable words improve by ``scale`` deviations."""
    return estimator.actual_weighted_change - scale * math.sqrt(
        max(estimator.after_nonzero_ss_freq, 0.0)
    )


def calc_worst_possible(estimator: Estimator, scale: float) -> float:
    """Pessimistic bound: all remaining words worsen by ``scale`` deviations."""
    return estimator.actual_weighted_change + scale * math.sqrt(
        max(estimator.before_ss_freq + estimator.after_ss_freq, 0.0)
    )