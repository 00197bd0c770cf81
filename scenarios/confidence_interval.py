#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Confidence Interval Scenario: courses avoided at the 95% CI edges of the effect size

Scenario Description:
    For each adoption rate, the calculator runs three times: with the mean
    difference and with both edges of its 95% CI. The published edges are
    listed as lower = -1.12 and upper = -2.68; here "lower_bound" is always
    the edge with the smaller |effect| (fewer courses avoided) and
    "upper_bound" the edge with the larger one, whatever the published order.

Usage Example:
    python scenarios/confidence_interval.py
    python scenarios/confidence_interval.py --curve --step 5
"""

import sys
import os
import argparse
import numpy as np
import pandas as pd

# Add project path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import DEFAULT_PARAMETERS, DEFAULT_ADOPTION_RATES, ADOPTION_CURVE_STEP
from core.calculator import calculate_baseline_total, calculate_impact, format_rate_label
from core.models import ConfidenceIntervalResult


def ordered_effect_bounds(params):
    """
    Return the CI edges as (smaller |effect|, larger |effect|).
    """
    smaller, larger = sorted((params.ci_lower, params.ci_upper), key=abs)
    return smaller, larger


def expand_confidence_interval(params, adoption_rates=None, baseline_total=None):
    """
    Point estimate and CI edges for every adoption rate.

    Parameters:
        params: ParameterSet
        adoption_rates: list of fractions (default: DEFAULT_ADOPTION_RATES)
        baseline_total: Precomputed baseline total, optional

    Returns:
        list of ConfidenceIntervalResult
    """
    if adoption_rates is None:
        adoption_rates = DEFAULT_ADOPTION_RATES
    if baseline_total is None:
        baseline_total = calculate_baseline_total(params)

    lower_effect, upper_effect = ordered_effect_bounds(params)

    ci_results = []
    for rate in adoption_rates:
        ci_results.append(ConfidenceIntervalResult(
            adoption_rate=float(rate),
            point=calculate_impact(params, rate, params.mean_difference, baseline_total),
            lower_bound=calculate_impact(params, rate, lower_effect, baseline_total),
            upper_bound=calculate_impact(params, rate, upper_effect, baseline_total),
        ))

    return ci_results


def confidence_interval_table(ci_results):
    """
    Columns: adoption_rate, point_estimate, lower_bound, upper_bound,
    point_pct, lower_pct, upper_pct
    """
    rows = []
    for ci in ci_results:
        rows.append({
            'adoption_rate': format_rate_label(ci.adoption_rate),
            'point_estimate': ci.point.courses_reduced,
            'lower_bound': ci.lower_bound.courses_reduced,
            'upper_bound': ci.upper_bound.courses_reduced,
            'point_pct': ci.point.percentage_reduction,
            'lower_pct': ci.lower_bound.percentage_reduction,
            'upper_pct': ci.upper_bound.percentage_reduction,
        })

    return pd.DataFrame(rows, columns=['adoption_rate', 'point_estimate', 'lower_bound', 'upper_bound',
                                       'point_pct', 'lower_pct', 'upper_pct'])


def adoption_range_curve(params, step=ADOPTION_CURVE_STEP, baseline_total=None):
    """
    Courses avoided with CI band across the full 0-100% adoption range.

    The grid is 0, step, 2*step, ... and always ends at 100; when step does
    not divide 100 the last interval is shorter than step.

    Parameters:
        params: ParameterSet
        step: Adoption percentage step, within (0, 100] (default: 1)
        baseline_total: Precomputed baseline total, optional

    Returns:
        DataFrame with [adopt_pct, point, lower, upper]
    """
    if step <= 0 or step > 100:
        raise ValueError(f"step ({step}) must be within (0, 100]")

    n_steps = int(np.floor(100 / step + 1e-9))
    adopt_pct = np.round(np.arange(n_steps + 1) * step, 9)
    adopt_pct = adopt_pct[adopt_pct < 100]
    adopt_pct = np.append(adopt_pct, 100.0)

    ci_results = expand_confidence_interval(params, adopt_pct / 100, baseline_total)

    return pd.DataFrame({
        'adopt_pct': adopt_pct,
        'point': [ci.point.courses_reduced for ci in ci_results],
        'lower': [ci.lower_bound.courses_reduced for ci in ci_results],
        'upper': [ci.upper_bound.courses_reduced for ci in ci_results],
    })


def parse_arguments():
    parser = argparse.ArgumentParser(
        description='Confidence interval analysis of antibiotic courses avoided',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--adoption-rates', type=float, nargs='+', default=DEFAULT_ADOPTION_RATES,
                        help='Adoption rates to evaluate (0.0-1.0)')
    parser.add_argument('--curve', action='store_true',
                        help='Print the full 0-100%% adoption curve instead')
    parser.add_argument('--step', type=float, default=ADOPTION_CURVE_STEP,
                        help='Adoption percentage step for --curve')
    return parser.parse_args()


def main():
    """Print the confidence interval table"""
    args = parse_arguments()
    params = DEFAULT_PARAMETERS

    if args.curve:
        table = adoption_range_curve(params, step=args.step)
        title = "Adoption Range Curve (95% CI)"
    else:
        table = confidence_interval_table(expand_confidence_interval(params, args.adoption_rates))
        title = "Confidence Interval Analysis (95% CI)"

    print("\n" + "="*70)
    print(title)
    print("="*70)
    print(table.to_string(index=False))

    return table


if __name__ == '__main__':
    main()
