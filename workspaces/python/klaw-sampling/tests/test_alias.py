"""Tests for alias table construction and lookup."""

import math

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from klaw_sampling import (
    AliasTable,
    Err,
    InvalidSize,
    InvalidSizeError,
    InvalidWeights,
    InvalidWeightsError,
    Ok,
    build_table,
    try_build_table,
)
from tests.strategies import unit_floats, weight_vectors


def close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-12)


class TestConstructionExamples:
    """Tests for small hand-checked tables."""

    def test_equal_weights(self):
        """Four equal weights give a quarter each."""
        table = build_table([1, 1, 1, 1])
        assert len(table) == 4
        for i in range(4):
            assert close(table.prob_of(i), 0.25)

    def test_equal_weights_need_no_aliases(self):
        """Equal weights leave every row keeping itself."""
        table = build_table([2.0, 2.0, 2.0])
        assert table.cutoffs == (1.0, 1.0, 1.0)
        assert table.aliases == (0, 1, 2)

    def test_three_to_one(self):
        """Weights [3, 1] give 0.75 and 0.25."""
        table = build_table([3, 1])
        assert close(table.prob_of(0), 0.75)
        assert close(table.prob_of(1), 0.25)

    def test_three_to_one_components(self):
        """The light row keeps half its mass and aliases to the heavy one."""
        table = build_table([3.0, 1.0])
        assert table.component(1) == (0.5, 0)
        assert table.component(0) == (1.0, 0)

    def test_single_weight(self):
        """A one-row table always returns index 0."""
        table = build_table([0.3])
        assert table.component(0) == (1.0, 0)
        assert table.index_of(0, 0.999) == 0

    def test_accepts_any_iterable(self):
        """Generators are materialised once."""
        table = build_table(float(w) for w in (1, 2, 3))
        assert table.size == 3
        assert close(table.prob_of(2), 0.5)

    def test_from_weights_classmethod(self):
        """AliasTable.from_weights is build_table."""
        assert AliasTable.from_weights([3, 1]) == build_table([3, 1])

    def test_zero_weight_row_always_aliases(self):
        """A zero-weight row has cutoff 0 and points at a positive row."""
        table = build_table([0.0, 1.0])
        cutoff, alias = table.component(0)
        assert cutoff == 0.0
        assert alias == 1

    def test_huge_weights_do_not_overflow(self):
        """Weights whose sum overflows a float still build a valid table."""
        table = build_table([1e308, 1e308, 1e308])
        for p in table.probabilities():
            assert close(p, 1 / 3)

    def test_tiny_weights(self):
        """Very small weights are treated by their ratios alone."""
        table = build_table([1e-300, 3e-300])
        assert close(table.prob_of(0), 0.25)
        assert close(table.prob_of(1), 0.75)


class TestProbabilityFidelity:
    """Selection probabilities equal normalised weights."""

    @given(weight_vectors())
    @example([1.0])
    @example([0.0, 1.0])
    @example([1.0, 1.0, 0.0])
    @example([0.1] * 10)
    def test_prob_of_matches_weights(self, weights):
        """prob_of(i) == w_i / sum(w) for every i."""
        table = build_table(weights)
        total = math.fsum(weights)
        for i, w in enumerate(weights):
            assert close(table.prob_of(i), w / total)

    @given(weight_vectors())
    def test_probabilities_agrees_with_prob_of(self, weights):
        """The O(n) bulk computation matches the per-index one."""
        table = build_table(weights)
        bulk = table.probabilities()
        assert len(bulk) == len(weights)
        for i, p in enumerate(bulk):
            assert close(p, table.prob_of(i))

    @given(weight_vectors())
    def test_components_in_range(self, weights):
        """Cutoffs lie in [0, 1] and aliases in [0, n)."""
        table = build_table(weights)
        n = len(weights)
        assert all(0.0 <= c <= 1.0 for c in table.cutoffs)
        assert all(0 <= a < n for a in table.aliases)


class TestLookup:
    """Lookups return indices with positive weight."""

    @given(weight_vectors(), st.data())
    def test_index_of_sound(self, weights, data):
        """index_of returns an in-range index whose weight is positive."""
        table = build_table(weights)
        n = len(weights)
        i = data.draw(st.integers(min_value=0, max_value=n - 1))
        j = table.index_of(i, data.draw(unit_floats))
        assert 0 <= j < n
        assert weights[j] > 0

    @given(weight_vectors(max_size=30))
    def test_index_of_sound_every_row(self, weights):
        """Every row resolves soundly at the extremes of the unit interval."""
        table = build_table(weights)
        for i in range(len(weights)):
            for u in (0.0, 0.5, math.nextafter(1.0, 0.0)):
                assert weights[table.index_of(i, u)] > 0

    @given(weight_vectors(), unit_floats)
    def test_index_uniform_sound(self, weights, u):
        """The single-draw lookup is sound as well."""
        table = build_table(weights)
        j = table.index_uniform(u)
        assert 0 <= j < len(weights)
        assert weights[j] > 0

    def test_index_of_boundaries(self):
        """u below the cutoff keeps the row, u at or above takes the alias."""
        table = build_table([3.0, 1.0])
        assert table.index_of(1, 0.0) == 1
        assert table.index_of(1, 0.4999) == 1
        assert table.index_of(1, 0.5) == 0

    def test_index_uniform_splits_unit_interval(self):
        """Row is floor(n*u); the fraction is the cutoff draw."""
        table = build_table([3.0, 1.0])
        assert table.index_uniform(0.1) == 0
        assert table.index_uniform(0.6) == 1
        assert table.index_uniform(0.8) == 0

    def test_index_uniform_near_one(self):
        """u just below 1 resolves to the last row without overflowing."""
        table = build_table([1.0, 1.0, 1.0])
        assert table.index_uniform(math.nextafter(1.0, 0.0)) == 2

    @pytest.mark.parametrize('u', [0.0, 0.25, 0.5, 0.75, 0.999999])
    def test_degenerate_weights(self, u):
        """A single positive weight among zeros is always selected."""
        table = build_table([0.0, 0.0, 7.0, 0.0, 0.0])
        for i in range(5):
            assert table.index_of(i, u) == 2
        assert table.index_uniform(u) == 2


class TestTableIsValue:
    """Tables are immutable values."""

    def test_frozen(self):
        """Fields cannot be reassigned."""
        table = build_table([1, 2])
        with pytest.raises(AttributeError):
            table.cutoffs = (1.0, 1.0)  # type: ignore[misc]

    def test_equality_and_hash(self):
        """Identical weights build equal, hashable tables."""
        a = build_table([1, 2, 3])
        b = build_table([1, 2, 3])
        assert a == b
        assert hash(a) == hash(b)


class TestValidation:
    """Invalid inputs are rejected at construction."""

    def test_empty(self):
        """An empty weight vector is an invalid size."""
        with pytest.raises(InvalidSizeError) as exc_info:
            build_table([])
        assert exc_info.value.value == 0

    @pytest.mark.parametrize(
        ('weights', 'index'),
        [
            ([1.0, -0.5], 1),
            ([math.nan, 1.0], 0),
            ([1.0, 2.0, math.inf], 2),
            ([-math.inf], 0),
            ([10**400, 1], 0),
            ([1, -(10**400)], 1),
            ([1.0, 'heavy'], 1),
        ],
    )
    def test_bad_entry(self, weights, index):
        """Negative, non-finite and non-numeric weights report their index."""
        with pytest.raises(InvalidWeightsError) as exc_info:
            build_table(weights)
        assert exc_info.value.index == index

    def test_all_zero(self):
        """All-zero weights have no distribution."""
        with pytest.raises(InvalidWeightsError) as exc_info:
            build_table([0.0, 0.0, 0.0])
        assert exc_info.value.index is None

    def test_errors_are_value_errors(self):
        """Sampling errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            build_table([-1.0])


class TestTryBuildTable:
    """Result-returning construction."""

    def test_ok(self):
        """Valid weights give Ok(table)."""
        result = try_build_table([3, 1])
        assert isinstance(result, Ok)
        assert result.unwrap() == build_table([3, 1])

    def test_err_weights(self):
        """Invalid weights give Err(InvalidWeights)."""
        result = try_build_table([0, 0])
        assert result == Err(InvalidWeights('total weight must be positive'))

    def test_err_int_beyond_float_range(self):
        """An int too large for a float gives Err(InvalidWeights) naming its index."""
        result = try_build_table([10**400, 1])
        assert result == Err(InvalidWeights('weight must be finite', 0))

    def test_err_size(self):
        """An empty vector gives Err(InvalidSize)."""
        result = try_build_table([])
        assert result.is_err()
        assert isinstance(result.error, InvalidSize)

    def test_err_unwrap_reraises(self):
        """Unwrapping the Err raises the matching exception."""
        with pytest.raises(InvalidWeightsError):
            try_build_table([1.0, -1.0]).unwrap()
