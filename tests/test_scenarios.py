from core.models import ParameterSet
from scenarios.adoption import run_adoption_scenarios, scenario_table


def test_default_adoption_rates(default_parameters: ParameterSet) -> None:
    results = run_adoption_scenarios(default_parameters)

    assert [r.adoption_rate for r in results] == [0.25, 0.5, 0.75, 1.0]
    assert [r.courses_reduced for r in results] == [3807520, 7615042, 11422563, 15230083]
    assert all(r.effect_size == default_parameters.mean_difference for r in results)


def test_custom_effect_size(default_parameters: ParameterSet) -> None:
    results = run_adoption_scenarios(default_parameters, [1.0], effect_size=-1.12)

    assert results[0].courses_reduced == 8977733


def test_scenario_table_columns(default_parameters: ParameterSet) -> None:
    table = scenario_table(run_adoption_scenarios(default_parameters))

    assert list(table.columns) == [
        "adoption_rate",
        "children_treated",
        "courses_reduced",
        "percentage_reduction",
        "macrolides_avoided",
        "beta_lactams_avoided",
        "other_avoided",
    ]
    assert table["adoption_rate"].tolist() == ["25%", "50%", "75%", "100%"]
    assert table["children_treated"].iloc[-1] == 8015833


def test_to_row_flattens_classes(synthetic_parameters: ParameterSet) -> None:
    row = run_adoption_scenarios(synthetic_parameters, [0.5])[0].to_row()

    assert row["a_avoided"] == 50
    assert row["b_avoided"] == 25
    assert row["other_avoided"] == 25
    assert row["children_standard"] == 50
