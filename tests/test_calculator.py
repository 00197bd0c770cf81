import numpy as np
import pytest

from config import ConfigurationError, build_parameters, validate_parameters
from core.calculator import (
    calculate_baseline_total,
    calculate_impact,
    format_rate_label,
    treatment_distribution_table,
    weighted_average_courses,
)
from core.models import ParameterSet
from core.rounding import round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [(4007916.5, 4007917), (2.5, 3), (-2.5, -3), (2.49, 2), (15230082.7, 15230083), (0.0, 0)],
)
def test_round_half_up_rounds_halves_away_from_zero(value: float, expected: int) -> None:
    assert round_half_up(value) == expected
    assert isinstance(round_half_up(value), int)


def test_round_half_up_handles_arrays() -> None:
    result = round_half_up([0.5, 1.5, 2.4])
    assert result.dtype == np.int64
    assert result.tolist() == [1, 2, 2]


def test_children_with_rrti_matches_published_target(default_parameters: ParameterSet) -> None:
    assert default_parameters.children_with_rrti == 8015833


def test_baseline_total_uses_weighted_average(default_parameters: ParameterSet) -> None:
    weighted = weighted_average_courses(default_parameters.treatment_distribution)

    assert weighted == pytest.approx(4.59)
    assert calculate_baseline_total(default_parameters) == pytest.approx(4.59 * 8015833)
    assert calculate_baseline_total(default_parameters) == weighted * default_parameters.children_with_rrti


@pytest.mark.parametrize(
    "adoption_rate, courses_reduced, percentage",
    [(0.25, 3807520, 10.3), (0.50, 7615042, 20.7), (0.75, 11422563, 31.0), (1.00, 15230083, 41.4)],
)
def test_calculate_impact_reproduces_published_figures(
    default_parameters: ParameterSet,
    adoption_rate: float,
    courses_reduced: int,
    percentage: float,
) -> None:
    result = calculate_impact(default_parameters, adoption_rate, default_parameters.mean_difference)

    assert result.courses_reduced == courses_reduced
    assert round(result.percentage_reduction, 1) == percentage


def test_children_treated_is_monotonic(default_parameters: ParameterSet) -> None:
    rates = [0.0, 0.25, 0.5, 0.75, 1.0]
    treated = [calculate_impact(default_parameters, r, -1.90).children_treated for r in rates]

    assert treated == sorted(treated)
    assert treated[0] == 0
    assert treated[-1] == default_parameters.children_with_rrti


def test_children_standard_complements_treated(default_parameters: ParameterSet) -> None:
    result = calculate_impact(default_parameters, 0.25, -1.90)

    assert result.children_treated + result.children_standard == default_parameters.children_with_rrti


def test_courses_reduced_is_linear_within_rounding(default_parameters: ParameterSet) -> None:
    full = calculate_impact(default_parameters, 1.0, -1.90).courses_reduced

    for rate in [0.1, 0.25, 0.5, 0.75, 0.9]:
        partial = calculate_impact(default_parameters, rate, -1.90).courses_reduced
        assert abs(partial - rate * full) <= 1


def test_class_counts_do_not_exceed_total(default_parameters: ParameterSet) -> None:
    for rate in [0.25, 0.5, 0.75, 1.0]:
        result = calculate_impact(default_parameters, rate, -1.90)
        class_total = sum(result.avoided_by_class().values())

        assert class_total <= result.courses_reduced
        assert result.other_avoided == result.courses_reduced - class_total
        assert result.other_avoided >= 0


@pytest.mark.parametrize(
    "classes",
    [
        [("macrolides", 0.683), ("beta_lactams", 0.223)],
        [("a", 0.5), ("b", 0.499)],
        [("a", 0.999)],
        [("a", 0.35), ("b", 0.35)],
    ],
)
def test_class_counts_within_total_for_validated_splits(classes) -> None:
    params = build_parameters(antibiotic_classes=classes)
    assert validate_parameters(params) is True

    baseline_total = calculate_baseline_total(params)
    for pct in range(1, 101):
        result = calculate_impact(params, pct / 100, -1.90, baseline_total)
        assert sum(result.avoided_by_class().values()) <= result.courses_reduced
        assert result.other_avoided >= 0


def test_class_counts_round_each_class(default_parameters: ParameterSet) -> None:
    result = calculate_impact(default_parameters, 1.0, -1.90)

    assert result.avoided_by_class() == {"macrolides": 10402147, "beta_lactams": 3396309}


def test_effect_size_sign_is_ignored(default_parameters: ParameterSet) -> None:
    negative = calculate_impact(default_parameters, 0.5, -1.90)
    positive = calculate_impact(default_parameters, 0.5, 1.90)

    assert negative.courses_reduced == positive.courses_reduced
    assert negative.effect_size == -1.90


def test_synthetic_parameters(synthetic_parameters: ParameterSet) -> None:
    result = calculate_impact(synthetic_parameters, 0.5, synthetic_parameters.mean_difference)

    assert calculate_baseline_total(synthetic_parameters) == pytest.approx(100.0)
    assert result.children_treated == 50
    assert result.courses_reduced == 100
    assert result.percentage_reduction == pytest.approx(100.0)
    assert result.avoided_by_class() == {"a": 50, "b": 25}
    assert result.other_avoided == 25


def test_rounding_applies_to_each_stage(synthetic_parameters: ParameterSet) -> None:
    # 100 × 0.335 = 33.5 -> 34 treated; 34 × 1.5 = 51 (not round(50.25) = 50)
    result = calculate_impact(synthetic_parameters, 0.335, -1.5)

    assert result.children_treated == 34
    assert result.courses_reduced == 51


@pytest.mark.parametrize("adoption_rate", [-0.1, 1.5])
def test_calculate_impact_rejects_invalid_adoption_rate(
    default_parameters: ParameterSet, adoption_rate: float
) -> None:
    with pytest.raises(ValueError):
        calculate_impact(default_parameters, adoption_rate, -1.90)


def test_zero_distribution_is_a_configuration_error() -> None:
    params = build_parameters(treatment_distribution=[("0", 1.0, 0.0)])

    with pytest.raises(ConfigurationError):
        calculate_baseline_total(params)
    with pytest.raises(ValueError):
        calculate_impact(params, 0.5, -1.90)


def test_zero_prevalence_is_a_configuration_error(default_parameters: ParameterSet) -> None:
    with pytest.raises(ConfigurationError):
        calculate_baseline_total(default_parameters.with_prevalence(0.0))


def test_treatment_distribution_table(default_parameters: ParameterSet) -> None:
    table = treatment_distribution_table(default_parameters)

    assert list(table.columns) == ["treatments", "percentage", "courses_midpoint", "children_count", "total_courses"]
    assert table["treatments"].tolist() == ["0", "1-2", "3-4", "5+"]
    assert table["children_count"].tolist() == [561108, 1523008, 2003958, 3927758]
    assert table.loc[2, "total_courses"] == pytest.approx(2003958 * 3.5)


@pytest.mark.parametrize("rate, label", [(0.25, "25%"), (1.0, "100%"), (0.06, "6%"), (0.5, "50%")])
def test_format_rate_label(rate: float, label: str) -> None:
    assert format_rate_label(rate) == label


def test_core_package_exports_its_submodules() -> None:
    import importlib

    import core

    assert core.__all__ == ["models", "rounding", "calculator"]
    for name in core.__all__:
        assert importlib.import_module(f"core.{name}").__name__ == f"core.{name}"
