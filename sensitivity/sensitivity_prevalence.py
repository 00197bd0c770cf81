#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Prevalence Sensitivity Analysis
Recomputes the target population under alternative RRTI prevalence values,
with adoption fixed at 50% and the point effect size.

Usage:
    python sensitivity_prevalence.py --output-dir sensitivity_results
    python sensitivity_prevalence.py --prevalence-rates 0.05 0.1 0.15 0.2
"""

import sys
import os
import argparse
import pandas as pd
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import (
    DEFAULT_PARAMETERS, SENSITIVITY_PREVALENCE_RATES, SENSITIVITY_ADOPTION_RATE,
    OUTPUT_FILES, get_timestamp
)

from core.calculator import calculate_impact, format_rate_label


def run_prevalence_sensitivity(params, prevalence_rates=None, adoption_rate=SENSITIVITY_ADOPTION_RATE):
    """
    Run the scenario calculator once per prevalence value.

    Parameters:
        params: baseline ParameterSet (not modified)
        prevalence_rates: list of prevalence fractions (default: SENSITIVITY_PREVALENCE_RATES)
        adoption_rate: fixed adoption rate (default: 0.5)

    Returns:
        list of (ParameterSet, ScenarioResult) pairs, one per prevalence
    """
    if prevalence_rates is None:
        prevalence_rates = SENSITIVITY_PREVALENCE_RATES

    results = []
    for prevalence in prevalence_rates:
        swept = params.with_prevalence(prevalence)
        results.append((swept, calculate_impact(swept, adoption_rate, swept.mean_difference)))

    return results


def sensitivity_table(results):
    """
    Columns: prevalence, target_population, courses_50pct_adoption, percentage_reduction
    """
    rows = []
    for swept, result in results:
        rows.append({
            'prevalence': format_rate_label(swept.prevalence),
            'target_population': swept.children_with_rrti,
            f'courses_{result.adoption_rate * 100:g}pct_adoption': result.courses_reduced,
            'percentage_reduction': result.percentage_reduction,
        })

    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(
        description='Sensitivity of courses avoided to RRTI prevalence'
    )
    parser.add_argument('--output-dir', type=str, default='sensitivity_results',
                        help='Output directory')
    parser.add_argument('--prevalence-rates', type=float, nargs='+', default=SENSITIVITY_PREVALENCE_RATES,
                        help='Prevalence values to test (0.0-1.0)')
    parser.add_argument('--adoption-rate', type=float, default=SENSITIVITY_ADOPTION_RATE,
                        help='Fixed adoption rate')

    args = parser.parse_args()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print("="*70)
    print("Prevalence Sensitivity Analysis")
    print("="*70)
    print(f"\nBaseline prevalence: {DEFAULT_PARAMETERS.prevalence:.0%}")
    print(f"Adoption rate: {args.adoption_rate:.0%}")
    print(f"Prevalence values: {args.prevalence_rates}")

    results = run_prevalence_sensitivity(DEFAULT_PARAMETERS, args.prevalence_rates, args.adoption_rate)
    df = sensitivity_table(results)

    stem = Path(OUTPUT_FILES['sensitivity']).stem
    output_file = output_dir / f"{stem}_{get_timestamp()}.csv"
    df.to_csv(output_file, index=False)

    print(f"\n{df.to_string(index=False)}")
    print(f"\nResults saved: {output_file}")

    return df


if __name__ == '__main__':
    main()
