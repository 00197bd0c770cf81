import pytest

from config import build_parameters
from core.models import ParameterSet
from scenarios.confidence_interval import (
    adoption_range_curve,
    confidence_interval_table,
    expand_confidence_interval,
    ordered_effect_bounds,
)


def test_bounds_bracket_point_estimate(default_parameters: ParameterSet) -> None:
    ci = expand_confidence_interval(default_parameters, [0.5])[0]

    assert ci.point.courses_reduced == 7615042
    assert ci.lower_bound.courses_reduced < ci.point.courses_reduced < ci.upper_bound.courses_reduced
    assert ci.lower_bound.courses_reduced == 4488867
    assert ci.upper_bound.courses_reduced == 10741218


def test_upper_bound_is_larger_magnitude_edge(default_parameters: ParameterSet) -> None:
    ci = expand_confidence_interval(default_parameters, [1.0])[0]

    assert ci.upper_bound.effect_size == -2.68
    assert ci.lower_bound.effect_size == -1.12
    assert ci.lower_bound.courses_reduced == 8977733
    assert ci.upper_bound.courses_reduced == 21482432


def test_bound_naming_does_not_depend_on_published_order() -> None:
    swapped = build_parameters(ci_lower=-2.68, ci_upper=-1.12)

    assert ordered_effect_bounds(swapped) == (-1.12, -2.68)
    ci = expand_confidence_interval(swapped, [1.0])[0]
    assert ci.upper_bound.courses_reduced == 21482432


def test_one_result_per_adoption_rate(default_parameters: ParameterSet) -> None:
    ci_results = expand_confidence_interval(default_parameters)

    assert [ci.adoption_rate for ci in ci_results] == [0.25, 0.5, 0.75, 1.0]
    for ci in ci_results:
        assert ci.lower_bound.percentage_reduction < ci.point.percentage_reduction < ci.upper_bound.percentage_reduction


def test_confidence_interval_table(default_parameters: ParameterSet) -> None:
    table = confidence_interval_table(expand_confidence_interval(default_parameters))

    assert list(table.columns) == [
        "adoption_rate", "point_estimate", "lower_bound", "upper_bound", "point_pct", "lower_pct", "upper_pct"
    ]
    assert table["adoption_rate"].tolist() == ["25%", "50%", "75%", "100%"]
    assert table["point_estimate"].tolist() == [3807520, 7615042, 11422563, 15230083]
    assert round(table["point_pct"].iloc[-1], 1) == 41.4


def test_adoption_range_curve(default_parameters: ParameterSet) -> None:
    curve = adoption_range_curve(default_parameters)

    assert len(curve) == 101
    assert curve["adopt_pct"].iloc[0] == 0
    assert curve["adopt_pct"].iloc[-1] == 100
    assert curve.loc[0, ["point", "lower", "upper"]].tolist() == [0, 0, 0]
    assert curve.loc[50, "point"] == 7615042
    assert curve.loc[100, "point"] == 15230083
    assert (curve["lower"] <= curve["point"]).all()
    assert (curve["point"] <= curve["upper"]).all()
    assert curve["point"].is_monotonic_increasing


def test_adoption_range_curve_step(default_parameters: ParameterSet) -> None:
    curve = adoption_range_curve(default_parameters, step=25)

    assert curve["adopt_pct"].tolist() == [0, 25, 50, 75, 100]
    assert curve["point"].tolist()[1:] == [3807520, 7615042, 11422563, 15230083]


@pytest.mark.parametrize("step, length, before_last", [(0.3, 335, 99.9), (30, 5, 90), (100, 2, 0)])
def test_adoption_range_curve_ends_at_full_adoption(
    default_parameters: ParameterSet, step: float, length: int, before_last: float
) -> None:
    curve = adoption_range_curve(default_parameters, step=step)

    assert len(curve) == length
    assert curve["adopt_pct"].iloc[-1] == 100
    assert curve["adopt_pct"].iloc[-2] == pytest.approx(before_last)
    assert curve["point"].iloc[-1] == 15230083
    assert curve["adopt_pct"].is_monotonic_increasing


@pytest.mark.parametrize("step", [0, -5, 150])
def test_adoption_range_curve_rejects_invalid_step(default_parameters: ParameterSet, step: float) -> None:
    with pytest.raises(ValueError):
        adoption_range_curve(default_parameters, step=step)
