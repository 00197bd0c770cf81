#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core Scenario Calculator
baseline courses + courses avoided per adoption rate
"""

import numpy as np
import pandas as pd
import sys
import os

# import config parameters
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config import ConfigurationError

from .models import ParameterSet, ScenarioResult
from .rounding import round_half_up


def weighted_average_courses(treatment_distribution) -> float:
    """
    Average antibiotic courses per child with RRTI.

    Parameters:
        treatment_distribution: sequence of TreatmentBucket

    Returns:
        Σ(bucket.fraction × bucket.midpoint)
    """
    fractions = np.array([bucket.fraction for bucket in treatment_distribution], dtype=float)
    midpoints = np.array([bucket.midpoint for bucket in treatment_distribution], dtype=float)
    return float(np.sum(fractions * midpoints))


def calculate_baseline_total(params: ParameterSet) -> float:
    """
    Total annual antibiotic courses in the untreated target population.

    This is the denominator of every percentage reduction. It is not rounded,
    and the per-bucket table below is not summed to obtain it.

    Args:
        params: ParameterSet

    Returns:
        weighted average courses × children with RRTI

    Raises:
        ConfigurationError if the total is not strictly positive
    """
    baseline_total = weighted_average_courses(params.treatment_distribution) * params.children_with_rrti

    # "not >" also catches NaN
    if not baseline_total > 0:
        raise ConfigurationError(
            f"Baseline total courses must be positive, got {baseline_total}. "
            f"Check the treatment distribution and prevalence."
        )

    return baseline_total


def calculate_impact(params: ParameterSet, adoption_rate: float, effect_size: float,
                     baseline_total: float = None) -> ScenarioResult:
    """
    Courses avoided when a fraction of children with RRTI receive bacterial lysates.

    Every derived count is rounded on its own, in this order:
        children_treated = round(children_with_rrti × adoption_rate)
        courses_reduced  = round(children_treated × |effect_size|)
        <class>_avoided  = round(courses_reduced × class_fraction)

    Args:
        params: ParameterSet
        adoption_rate: Fraction of eligible children treated (0-1)
        effect_size: Mean difference in courses per treated child (signed)
        baseline_total: Precomputed calculate_baseline_total(params), optional

    Returns:
        ScenarioResult
    """
    if not 0 <= adoption_rate <= 1:
        raise ValueError(f"adoption_rate ({adoption_rate}) must be within [0, 1]")

    if baseline_total is None:
        baseline_total = calculate_baseline_total(params)

    children_with_rrti = params.children_with_rrti
    children_treated = round_half_up(children_with_rrti * adoption_rate)
    children_standard = children_with_rrti - children_treated

    courses_reduced = round_half_up(children_treated * abs(effect_size))
    percentage_reduction = courses_reduced / baseline_total * 100

    class_avoided = tuple(
        (name, round_half_up(courses_reduced * fraction))
        for name, fraction in params.antibiotic_classes
    )
    other_avoided = courses_reduced - sum(avoided for _, avoided in class_avoided)

    return ScenarioResult(
        adoption_rate=float(adoption_rate),
        effect_size=float(effect_size),
        children_treated=children_treated,
        children_standard=children_standard,
        courses_reduced=courses_reduced,
        percentage_reduction=percentage_reduction,
        class_avoided=class_avoided,
        other_avoided=other_avoided,
    )


def treatment_distribution_table(params: ParameterSet) -> pd.DataFrame:
    """
    Per-bucket breakdown of children and courses.

    Columns: treatments, percentage, courses_midpoint, children_count, total_courses
    """
    children_with_rrti = params.children_with_rrti

    rows = []
    for bucket in params.treatment_distribution:
        children_count = round_half_up(children_with_rrti * bucket.fraction)
        rows.append({
            'treatments': bucket.label,
            'percentage': bucket.fraction,
            'courses_midpoint': bucket.midpoint,
            'children_count': children_count,
            'total_courses': children_count * bucket.midpoint,
        })

    return pd.DataFrame(rows, columns=['treatments', 'percentage', 'courses_midpoint',
                                       'children_count', 'total_courses'])


def format_rate_label(rate):
    """0.25 -> '25%'"""
    return f"{rate * 100:g}%"
