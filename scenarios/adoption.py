#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Adoption Scenarios: courses avoided at fixed bacterial lysates adoption rates

Scenario Description:
    A fraction of the children with recurrent RTIs (25%, 50%, 75%, 100%)
    receive bacterial lysates; each treated child avoids |mean difference|
    antibiotic courses per year.

Usage Example:
    python scenarios/adoption.py --adoption-rates 0.25 0.5 0.75 1.0
"""

import sys
import os
import argparse
import pandas as pd

# Add project path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import DEFAULT_PARAMETERS, DEFAULT_ADOPTION_RATES, RRTI_PREVALENCE, build_parameters
from core.calculator import calculate_baseline_total, calculate_impact, format_rate_label


def run_adoption_scenarios(params, adoption_rates=None, effect_size=None, baseline_total=None):
    """
    Run the scenario calculator once per adoption rate.

    Parameters:
        params: ParameterSet
        adoption_rates: list of fractions (default: DEFAULT_ADOPTION_RATES)
        effect_size: Effect size to apply (default: params.mean_difference)
        baseline_total: Precomputed baseline total, optional

    Returns:
        list of ScenarioResult, in the order of adoption_rates
    """
    if adoption_rates is None:
        adoption_rates = DEFAULT_ADOPTION_RATES
    if effect_size is None:
        effect_size = params.mean_difference
    if baseline_total is None:
        baseline_total = calculate_baseline_total(params)

    return [calculate_impact(params, rate, effect_size, baseline_total) for rate in adoption_rates]


def scenario_table(results):
    """
    Results table, one row per adoption rate.

    Columns: adoption_rate, children_treated, courses_reduced,
    percentage_reduction, <class>_avoided..., other_avoided
    """
    rows = []
    for result in results:
        row = {
            'adoption_rate': format_rate_label(result.adoption_rate),
            'children_treated': result.children_treated,
            'courses_reduced': result.courses_reduced,
            'percentage_reduction': result.percentage_reduction,
        }
        for name, avoided in result.class_avoided:
            row[f'{name}_avoided'] = avoided
        row['other_avoided'] = result.other_avoided
        rows.append(row)

    return pd.DataFrame(rows)


def parse_arguments():
    parser = argparse.ArgumentParser(
        description='Adoption Scenarios: antibiotic courses avoided per adoption rate',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--adoption-rates', type=float, nargs='+', default=DEFAULT_ADOPTION_RATES,
                        help='Adoption rates to evaluate (0.0-1.0)')
    parser.add_argument('--prevalence', type=float, default=RRTI_PREVALENCE,
                        help='RRTI prevalence (0.0-1.0)')
    return parser.parse_args()


def main():
    """Print the adoption scenario table"""
    args = parse_arguments()

    params = DEFAULT_PARAMETERS
    if args.prevalence != params.prevalence:
        params = build_parameters(prevalence=args.prevalence)

    results = run_adoption_scenarios(params, args.adoption_rates)
    table = scenario_table(results)

    print("\n" + "="*70)
    print(f"Point Estimate Results (Mean Difference = {params.mean_difference:.2f})")
    print("="*70)
    print(table.to_string(index=False))

    return table


if __name__ == '__main__':
    main()
