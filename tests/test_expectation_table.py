import pytest

from respell.expectation_table import (
    build_expectation_table,
    estimate_introduce_edit,
    introduce_edit,
    update_edit,
)

NUM_WORDS = 5


def _example():
    frequencies = [1.0, 0.5, 0.25, 0.125, 0.0625]
    current_distances = [0, 2, 1, 3, 1]
    introducing_order = [1, 3, 2, 4, 0]
    rev = [0] * NUM_WORDS
    for i, j in enumerate(introducing_order):
        rev[j] = i
    freqs = [frequencies[j] for j in introducing_order]
    dists = [current_distances[j] for j in introducing_order]
    table = build_expectation_table(freqs, dists, 1.0)
    return rev, freqs, dists, table


def test_build_expectation_table():
    _, _, _, table = _example()
    expected_totals = [0.5, 0.625, 0.875, 0.9375, 1.9375]
    assert len(table.total_frequency) == 5
    for got, want in zip(table.total_frequency, expected_totals):
        assert abs(got - want) < 0.01
    expected_means = [0.027, 0.000, 0.071, 0.017, 0.797]
    assert len(table.unknown_edit_gaussians) == 5
    for got, want in zip(table.unknown_edit_gaussians, expected_means):
        assert abs(got.mean - want) < 0.01


def test_introduce_edit_shift_by_change():
    _, freqs, _, table = _example()
    i1 = introduce_edit(freqs, table, 0, -1)
    i2 = introduce_edit(freqs, table, 0, -2)
    assert abs((i1.mean - freqs[0]) - i2.mean) < 0.01
    assert abs(i1.sigma - i2.sigma) < 0.01


def _run_to_zero(introduced_i):
    rev, freqs, _, table = _example()
    ex = introduce_edit(freqs, table, introduced_i, 0)
    for j in range(NUM_WORDS):
        i = rev[j]
        if i != introduced_i:
            ex = update_edit(freqs, table, introduced_i, i, 0, ex)
    return ex


def test_goes_to_zero_1():
    ex = _run_to_zero(0)
    assert abs(ex.mean) < 0.01
    assert abs(ex.sigma) < 0.01


@pytest.mark.parametrize("introduced_i", range(NUM_WORDS))
def test_goes_to_zero_2(introduced_i):
    ex = _run_to_zero(introduced_i)
    assert abs(ex.mean) < 0.01
    assert abs(ex.sigma) < 0.01


@pytest.mark.parametrize("i", range(NUM_WORDS))
def test_estimate_includes_word_itself(i):
    _, freqs, _, table = _example()
    est = estimate_introduce_edit(freqs, table, i)
    combined = introduce_edit(freqs, table, i, 0).add_indep(table.unknown_edit_gaussians[i])
    assert est.mean == pytest.approx(combined.mean)
    assert est.sigma == pytest.approx(combined.sigma)


def test_estimate_past_end_is_before_only():
    _, freqs, _, table = _example()
    est = estimate_introduce_edit(freqs, table, NUM_WORDS)
    z = table.expected_deviation_above_zero
    assert est.mean == pytest.approx(z.mean * table.total_frequency[-1])
    assert est.sigma == pytest.approx(z.sigma * table.root_total_squared_frequency[-1])


def test_update_with_known_change_shifts_mean():
    _, freqs, _, table = _example()
    ex = introduce_edit(freqs, table, 0, 0)
    zero = update_edit(freqs, table, 0, 2, 0, ex)
    worse = update_edit(freqs, table, 0, 2, 3, ex)
    assert worse.mean - zero.mean == pytest.approx(3 * freqs[2])
    assert worse.sigma == pytest.approx(zero.sigma)


def test_update_at_introduced_index_raises():
    _, freqs, _, table = _example()
    ex = introduce_edit(freqs, table, 1, 0)
    with pytest.raises(ValueError):
        update_edit(freqs, table, 1, 1, 0, ex)


def test_distance_too_large_raises():
    with pytest.raises(ValueError):
        build_expectation_table([1.0], [40], 1.0)


def test_remaining_is_suffix_sum():
    _, _, _, table = _example()
    remaining = table.total_remaining_unknown_edit_gaussians
    assert remaining[-1].mean == pytest.approx(table.unknown_edit_gaussians[-1].mean)
    assert remaining[0].mean == pytest.approx(
        sum(g.mean for g in table.unknown_edit_gaussians)
    )
    assert remaining[0].sigma ** 2 == pytest.approx(
        sum(g.sigma ** 2 for g in table.unknown_edit_gaussians)
    )