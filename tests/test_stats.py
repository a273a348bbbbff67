"""
Unit tests for the statistical primitives.
"""

import math

import pytest

from qoe_engine.utils.stats import (
    fraction_above,
    fraction_below,
    percentile,
    ratio,
    safe_average,
    score_linear,
    to_seconds,
)


class TestRatio:
    """Tests for ratio()."""

    def test_simple_ratio(self):
        assert ratio(9, 10) == pytest.approx(0.9)

    def test_zero_denominator_is_missing(self):
        """No attempt means no statistic, not a zero ratio."""
        assert ratio(0, 0) is None
        assert ratio(5, 0) is None

    def test_none_operands(self):
        assert ratio(None, 10) is None
        assert ratio(3, None) is None

    def test_non_finite_operands(self):
        assert ratio(float("nan"), 10) is None
        assert ratio(1, float("inf")) is None

    def test_inconsistent_counters_are_not_clamped(self):
        """More completions than requests surfaces as a ratio above 1."""
        assert ratio(12, 10) == pytest.approx(1.2)


class TestSafeAverage:
    """Tests for safe_average()."""

    def test_average(self):
        assert safe_average([10, 20, 30]) == pytest.approx(20.0)

    def test_empty_is_missing(self):
        assert safe_average([]) is None
        assert safe_average(None) is None

    def test_non_finite_samples_are_ignored(self):
        assert safe_average([1.0, float("nan"), 3.0, float("inf"), None]) == pytest.approx(2.0)

    def test_only_non_finite_samples(self):
        assert safe_average([float("nan"), None]) is None

    def test_returns_python_float(self):
        assert type(safe_average([1, 2])) is float


class TestPercentile:
    """Tests for percentile() (linear interpolation between closest ranks)."""

    def test_median_of_odd_sequence(self):
        assert percentile([10, 20, 30, 40, 50], 0.5) == pytest.approx(30.0)

    def test_interpolates_between_ranks(self):
        # idx = 0.25 * (2 - 1) = 0.25 -> 10 + 0.25 * 10
        assert percentile([10, 20], 0.25) == pytest.approx(12.5)

    def test_p10_and_p90(self):
        samples = [40, 10, 30, 20]
        # sorted [10, 20, 30, 40]; idx 0.3 and 2.7
        assert percentile(samples, 0.1) == pytest.approx(13.0)
        assert percentile(samples, 0.9) == pytest.approx(37.0)

    def test_single_sample(self):
        assert percentile([7.5], 0.1) == pytest.approx(7.5)
        assert percentile([7.5], 0.9) == pytest.approx(7.5)

    def test_bounds(self):
        assert percentile([3, 1, 2], 0.0) == pytest.approx(1.0)
        assert percentile([3, 1, 2], 1.0) == pytest.approx(3.0)

    def test_empty_is_missing(self):
        assert percentile([], 0.5) is None

    @pytest.mark.parametrize("p", [-0.1, 1.5, 90])
    def test_fraction_out_of_range(self, p):
        with pytest.raises(ValueError, match="within"):
            percentile([1, 2, 3], p)


class TestScoreLinear:
    """Tests for the linear threshold scorer."""

    def test_higher_is_better_interpolation(self):
        # (0.9 - 0.85) / (1.0 - 0.85)
        assert score_linear(0.9, good=1.0, bad=0.85, higher_is_better=True) == pytest.approx(1 / 3)

    def test_lower_is_better_interpolation(self):
        assert score_linear(7.5, good=4.5, bad=12, higher_is_better=False) == pytest.approx(0.6)

    def test_good_and_bad_bounds(self):
        assert score_linear(4.3, good=4.3, bad=2.0, higher_is_better=True) == 1.0
        assert score_linear(2.0, good=4.3, bad=2.0, higher_is_better=True) == 0.0

    def test_clamped_beyond_bounds(self):
        assert score_linear(5.0, good=4.3, bad=2.0, higher_is_better=True) == 1.0
        assert score_linear(1.0, good=4.3, bad=2.0, higher_is_better=True) == 0.0
        assert score_linear(1 / 6, good=0.0, bad=0.1, higher_is_better=False) == 0.0
        assert score_linear(-1.0, good=0.0, bad=0.1, higher_is_better=False) == 1.0

    def test_degenerate_threshold(self):
        """good == bad acts as a pass/fail step."""
        assert score_linear(5, good=5, bad=5, higher_is_better=True) == 1.0
        assert score_linear(4, good=5, bad=5, higher_is_better=True) == 0.0
        assert score_linear(4, good=5, bad=5, higher_is_better=False) == 1.0
        assert score_linear(6, good=5, bad=5, higher_is_better=False) == 0.0


class TestFractions:
    """Tests for fraction_above() / fraction_below()."""

    def test_fraction_above_is_strict(self):
        assert fraction_above([5000, 10000, 12000, 20000], 10000) == pytest.approx(0.5)

    def test_fraction_below_is_strict(self):
        assert fraction_below([1.6, 1.5, 4.0, 1.0], 1.6) == pytest.approx(0.5)

    def test_empty_is_missing(self):
        assert fraction_above([], 1) is None
        assert fraction_below(None, 1) is None

    def test_non_finite_samples_do_not_count(self):
        assert fraction_above([float("nan"), 30, 10], 25) == pytest.approx(0.5)


class TestToSeconds:
    def test_conversion(self):
        assert to_seconds([1500, 250]) == [1.5, 0.25]

    def test_drops_missing_values(self):
        result = to_seconds([1000, None, float("nan")])
        assert result == [1.0]
        assert not any(math.isnan(v) for v in result)
