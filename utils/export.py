#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Export Module
- Adoption scenarios CSV
- Confidence interval CSV
- Treatment distribution CSV
- Prevalence sensitivity CSV
- Adoption range curve CSV
- Run configuration JSON
"""

import json
from dataclasses import asdict
from datetime import datetime

from core.calculator import treatment_distribution_table, weighted_average_courses
from scenarios.adoption import scenario_table
from scenarios.confidence_interval import confidence_interval_table
from sensitivity.sensitivity_prevalence import sensitivity_table


def export_scenarios_csv(scenarios, output_path):
    """
    Export point-estimate scenario table

    Parameters:
        scenarios: list of ScenarioResult
        output_path: str
    """
    df = scenario_table(scenarios)
    df.to_csv(output_path, index=False)
    print(f"Scenarios CSV saved: {output_path}")
    return df


def export_confidence_intervals_csv(ci_results, output_path):
    """
    Export confidence interval table

    Parameters:
        ci_results: list of ConfidenceIntervalResult
        output_path: str
    """
    df = confidence_interval_table(ci_results)
    df.to_csv(output_path, index=False)
    print(f"Confidence interval CSV saved: {output_path}")
    return df


def export_treatment_distribution_csv(params, output_path):
    """
    Export per-bucket treatment distribution

    Parameters:
        params: ParameterSet
        output_path: str
    """
    df = treatment_distribution_table(params)
    df.to_csv(output_path, index=False)
    print(f"Treatment distribution CSV saved: {output_path}")
    return df


def export_sensitivity_csv(sensitivity_results, output_path):
    """
    Export prevalence sensitivity table

    Parameters:
        sensitivity_results: list of (ParameterSet, ScenarioResult)
        output_path: str
    """
    df = sensitivity_table(sensitivity_results)
    df.to_csv(output_path, index=False)
    print(f"Sensitivity CSV saved: {output_path}")
    return df


def export_adoption_curve_csv(curve_df, output_path):
    """
    Export adoption range curve

    Parameters:
        curve_df: DataFrame from adoption_range_curve()
        output_path: str
    """
    curve_df.to_csv(output_path, index=False)
    print(f"Adoption curve CSV saved: {output_path}")
    return curve_df


def export_run_config(args, params, baseline_total, output_path):
    """
    Export run configuration to JSON (records all parameters)

    Parameters:
        args: argparse.Namespace, CLI arguments
        params: ParameterSet
        baseline_total: float
        output_path: str, output file path
    """
    parameters = asdict(params)
    parameters['treatment_distribution'] = [asdict(bucket) for bucket in params.treatment_distribution]
    parameters['antibiotic_classes'] = {name: fraction for name, fraction in params.antibiotic_classes}

    config_data = {
        'timestamp': datetime.now().isoformat(),
        'parameters': parameters,
        'derived': {
            'children_with_rrti': params.children_with_rrti,
            'weighted_avg_courses': weighted_average_courses(params.treatment_distribution),
            'baseline_total_courses': baseline_total,
            'other_class_fraction': params.other_class_fraction,
        },
        'scenarios': {
            'adoption_rates': [float(r) for r in args.adoption_rates],
            'prevalence_rates': [float(p) for p in args.prevalence_rates],
        }
    }

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(config_data, f, ensure_ascii=False, indent=2)

    print(f"Run config saved: {output_path}")
    return config_data
