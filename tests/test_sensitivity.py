import pytest

from core.models import ParameterSet
from sensitivity.sensitivity_prevalence import run_prevalence_sensitivity, sensitivity_table


def test_prevalence_sweep_recomputes_target_population(default_parameters: ParameterSet) -> None:
    results = run_prevalence_sensitivity(default_parameters)

    targets = [swept.children_with_rrti for swept, _ in results]
    assert targets == [4809500, 8015833, 16031666]
    assert [result.adoption_rate for _, result in results] == [0.5, 0.5, 0.5]


def test_doubling_prevalence_doubles_target_population(default_parameters: ParameterSet) -> None:
    results = dict(
        (swept.prevalence, (swept, result))
        for swept, result in run_prevalence_sensitivity(default_parameters, [0.10, 0.20])
    )

    low_params, low = results[0.10]
    high_params, high = results[0.20]
    assert high_params.children_with_rrti == 2 * low_params.children_with_rrti
    assert abs(high.courses_reduced - 2 * low.courses_reduced) <= 2


def test_sweep_matches_point_scenario_at_baseline_prevalence(default_parameters: ParameterSet) -> None:
    (_, result), = run_prevalence_sensitivity(default_parameters, [0.10])

    assert result.courses_reduced == 7615042


def test_sweep_leaves_parameters_unchanged(default_parameters: ParameterSet) -> None:
    run_prevalence_sensitivity(default_parameters)

    assert default_parameters.prevalence == 0.10


def test_with_prevalence_rejects_out_of_range(default_parameters: ParameterSet) -> None:
    with pytest.raises(ValueError):
        default_parameters.with_prevalence(1.5)


def test_sensitivity_table(default_parameters: ParameterSet) -> None:
    table = sensitivity_table(run_prevalence_sensitivity(default_parameters))

    assert list(table.columns) == ["prevalence", "target_population", "courses_50pct_adoption", "percentage_reduction"]
    assert table["prevalence"].tolist() == ["6%", "10%", "20%"]
    # each row is relative to its own baseline, so the share barely moves
    assert table["percentage_reduction"].max() - table["percentage_reduction"].min() < 0.01
