import logging
import math

import numpy as np
import pytest

from contprob.core.config import DEFAULT_CONFIG, AlgebraConfig
from contprob.core.errors import DegenerateSupport, InvalidArgument
from contprob.events.range import EmptyRange, SimpleRange, UnionRange, interval
from contprob.stats.uniform import Uniform


def test_desired_continuous_usage() -> None:
    x = Uniform(0.0, 1.0)
    assert x.probability_of(interval(0.0, 0.3)) == 0.3


@pytest.mark.parametrize(
    "lo, hi, expected",
    [
        (0.0, 80.0, 1.00),
        (-20.0, 20.0, 0.25),
        (0.0, 20.0, 0.25),
        (0.0, 100.0, 1.00),
    ],
)
def test_probabilities_on_zero_to_eighty(lo: float, hi: float, expected: float) -> None:
    assert Uniform(0.0, 80.0).probability_of(interval(lo, hi)) == expected


@pytest.mark.parametrize("c, d", [(0.0, 0.0), (1.0, 3.0), (2.5, 10.0), (0.0, 10.0)])
def test_sub_interval_probability_is_relative_length(c: float, d: float) -> None:
    a, b = 0.0, 10.0
    assert Uniform(a, b).probability_of(interval(c, d)) == pytest.approx((d - c) / (b - a))


def test_full_support_has_probability_one() -> None:
    assert Uniform(-3.0, 7.0).probability_of(interval(-3.0, 7.0)) == 1.0


@pytest.mark.parametrize("event", [interval(10.0, 20.0), interval(-5.0, -1.0), EmptyRange()])
def test_events_outside_the_support_have_probability_zero(event) -> None:
    assert Uniform(0.0, 5.0).probability_of(event) == 0.0


def test_strict_superset_of_support_clips_to_one() -> None:
    assert Uniform(0.0, 5.0).probability_of(interval(-1e9, 1e9)) == 1.0


def test_union_events_count_overlap_once() -> None:
    x = Uniform(0.0, 10.0)
    event = UnionRange(interval(1.0, 4.0), UnionRange(interval(3.0, 5.0), interval(8.0, 12.0)))
    assert x.probability_of(event) == pytest.approx(0.6)


def test_reversed_bounds_are_rejected() -> None:
    with pytest.raises(InvalidArgument, match="a <= b"):
        Uniform(2.0, 1.0)


def test_nan_bounds_are_rejected() -> None:
    with pytest.raises(InvalidArgument, match="NaN"):
        Uniform(math.nan, 1.0)


def test_support_is_a_simple_range() -> None:
    assert Uniform(1, 2).support == SimpleRange(1.0, 2.0)


def test_uniform_is_an_immutable_value() -> None:
    x = Uniform(0.0, 1.0)
    assert x == Uniform(0.0, 1.0, config=AlgebraConfig())
    assert hash(x) == hash(Uniform(0.0, 1.0))
    with pytest.raises(AttributeError):
        x.a = 3.0  # type: ignore[misc]


# ---- degenerate support ----


def test_degenerate_support_defaults_to_zero(caplog: pytest.LogCaptureFixture) -> None:
    x = Uniform(2.0, 2.0)
    with caplog.at_level(logging.WARNING, logger="contprob.stats.uniform"):
        assert x.probability_of(interval(0.0, 5.0)) == 0.0
    assert "Degenerate support" in caplog.text


def test_degenerate_support_can_raise() -> None:
    x = Uniform(2.0, 2.0, config=AlgebraConfig(degenerate_support="raise"))
    with pytest.raises(DegenerateSupport, match="zero length"):
        x.probability_of(interval(0.0, 5.0))
    with pytest.raises(ZeroDivisionError):
        x.probability_of(EmptyRange())


# ---- reference algebra ----


def test_reference_algebra_agrees_on_simple_events() -> None:
    x = Uniform(0.0, 80.0, config=AlgebraConfig(branch_mode="reference"))
    assert x.probability_of(interval(-20.0, 20.0)) == 0.25


# ---- sampling ----


def test_sample_uses_inverse_transform() -> None:
    x = Uniform(10.0, 20.0)
    assert x.sample(lambda: 0.0) == 10.0
    assert x.sample(lambda: 0.25) == 12.5


def test_rvs_draws_within_support() -> None:
    draws = Uniform(-1.0, 3.0).rvs(size=500, random_state=7)
    assert draws.shape == (500,)
    assert np.all((draws >= -1.0) & (draws <= 3.0))


def test_rvs_on_degenerate_support_is_constant() -> None:
    x = Uniform(4.0, 4.0)
    assert x.rvs() == 4.0
    assert np.all(x.rvs(size=3) == 4.0)


def test_cdf_matches_probability_of_left_open_events() -> None:
    x = Uniform(0.0, 8.0)
    for c, d in [(0.0, 2.0), (-3.0, 4.0), (6.0, 12.0)]:
        assert x.probability_of(interval(c, d)) == pytest.approx(float(x.cdf(d) - x.cdf(c)))


def test_cdf_on_degenerate_support_is_a_step() -> None:
    x = Uniform(1.0, 1.0)
    assert list(x.cdf([0.0, 1.0, 2.0])) == [0.0, 1.0, 1.0]


def test_frozen_distribution_mirrors_support() -> None:
    frozen = Uniform(2.0, 6.0).frozen()
    assert frozen.support() == (2.0, 6.0)
    assert frozen.mean() == pytest.approx(4.0)


def test_config_takes_part_in_equality() -> None:
    zero = Uniform(2.0, 2.0)
    strict = Uniform(2.0, 2.0, config=AlgebraConfig(degenerate_support="raise"))
    assert zero != strict
    assert len({zero, strict}) == 2
    assert zero.config is DEFAULT_CONFIG


# ---- extreme bounds ----


def test_support_wider_than_float_range_has_probability_one() -> None:
    x = Uniform(-1e308, 1e308)
    assert x.probability_of(interval(-1e308, 1e308)) == 1.0
    assert x.probability_of(interval(0.0, 1e308)) == 0.5
    assert x.probability_of(interval(-1e308, 0.0)) == 0.5


def test_wide_support_with_reference_algebra() -> None:
    x = Uniform(-1e308, 1e308, config=AlgebraConfig(branch_mode="reference"))
    assert x.probability_of(interval(-1e309, 1e309)) == 1.0
