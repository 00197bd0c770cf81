#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Statistics Module

- Headline figures of the analysis
- Maximum courses avoided (100% adoption)
- CI range at 100% adoption
- Antibiotic class impact (50% adoption)
"""


def _find_rate(items, rate, rate_of):
    for item in items:
        if abs(rate_of(item) - rate) < 1e-9:
            return item
    return None


def calculate_summary_statistics(scenarios, ci_results, full_adoption=1.0, class_adoption=0.5):
    """
    Calculate summary statistics

    Parameters:
        scenarios: list of ScenarioResult (point estimate)
        ci_results: list of ConfidenceIntervalResult
        full_adoption: adoption rate used for the maximum / CI range (default: 1.0)
        class_adoption: adoption rate used for the class breakdown (default: 0.5)

    Returns:
        dict with keys:
            - max_courses_avoided, max_percentage_reduction
            - conservative_courses, conservative_pct
            - optimistic_courses, optimistic_pct
            - class_avoided: {class name: courses} incl. 'other'
        Entries whose adoption rate was not evaluated are None.
    """
    full = _find_rate(scenarios, full_adoption, lambda s: s.adoption_rate)
    full_ci = _find_rate(ci_results, full_adoption, lambda c: c.adoption_rate)
    class_scenario = _find_rate(scenarios, class_adoption, lambda s: s.adoption_rate)

    summary = {
        'full_adoption': full_adoption,
        'class_adoption': class_adoption,
        'max_courses_avoided': None,
        'max_percentage_reduction': None,
        'conservative_courses': None,
        'conservative_pct': None,
        'optimistic_courses': None,
        'optimistic_pct': None,
        'class_avoided': None,
    }

    if full is not None:
        summary['max_courses_avoided'] = full.courses_reduced
        summary['max_percentage_reduction'] = full.percentage_reduction

    if full_ci is not None:
        summary['conservative_courses'] = full_ci.lower_bound.courses_reduced
        summary['conservative_pct'] = full_ci.lower_bound.percentage_reduction
        summary['optimistic_courses'] = full_ci.upper_bound.courses_reduced
        summary['optimistic_pct'] = full_ci.upper_bound.percentage_reduction

    if class_scenario is not None:
        class_avoided = class_scenario.avoided_by_class()
        class_avoided['other'] = class_scenario.other_avoided
        summary['class_avoided'] = class_avoided

    return summary
