#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Global Configuration for the EU Pediatric Antibiotic Reduction Analysis
"""

import warnings

from core.models import ParameterSet, TreatmentBucket

# ==================== Population Parameters ====================
# Total children under 18 in the EU (Eurostat)
EU_PEDIATRIC_POPULATION = 80158328

# Prevalence of recurrent respiratory tract infections (RRTIs)
# 10% assumption based on literature (Peeters et al., 2021; Toivonen et al., 2016)
RRTI_PREVALENCE = 0.10

# ==================== Treatment Distribution ====================
# Distribution of antibiotic treatments in children with RRTIs (Toivonen et al., 2016)
# (label, fraction of children, courses midpoint)
# The 5+ bucket uses the median of 7 courses (Principi et al., 2003)
TREATMENT_DISTRIBUTION = [
    ('0', 0.07, 0.0),
    ('1-2', 0.19, 1.5),
    ('3-4', 0.25, 3.5),
    ('5+', 0.49, 7.0),
]

# ==================== Treatment Efficacy ====================
# Mean reduction in antibiotic courses per child, from the meta-analysis.
# The published interval lists -1.12 as "lower" and -2.68 as "upper";
# scenarios always report the larger |effect| as the upper bound.
MEAN_DIFFERENCE = -1.90
CI_LOWER = -1.12
CI_UPPER = -2.68

# ==================== Antibiotic Class Split ====================
# Antibiotic class distribution (Principi et al., 2003)
# Fractions need not sum to 1.0: the remainder is reported as "other"
ANTIBIOTIC_CLASSES = [
    ('macrolides', 0.683),
    ('beta_lactams', 0.223),
]

# ==================== Scenarios ====================
DEFAULT_ADOPTION_RATES = [0.25, 0.50, 0.75, 1.00]

# Sensitivity Analysis: prevalence range based on literature (6%, 10%, 20%)
SENSITIVITY_PREVALENCE_RATES = [0.06, 0.10, 0.20]
SENSITIVITY_ADOPTION_RATE = 0.50

# Adoption range curve (percent steps from 0 to 100)
ADOPTION_CURVE_STEP = 1

# Tolerance used when checking that bucket fractions sum to 1.0
FRACTION_TOLERANCE = 1e-6

# ==================== Visualization/Output Parameters ====================
FIGURE_DPI = 300
DEFAULT_OUTPUT_DIR = 'outputs'

# Lancet-style palette used in the published figures
COLORS = {
    'ribbon': '#E8CBDD',
    'line': '#C97BA5',
    'bar': '#C97BA5',
    'error': '#8F4E75',
    'beta_lactams': '#E8CBDD',
    'macrolides': '#DEE1E9',
    'other': '#F1E0D9',
}

PLOT_FILENAMES = {
    'adoption_range': 'adoption_range_ci',
    'class_breakdown': 'courses_by_class',
    'courses_avoided': 'courses_avoided_ci',
    'prevalence_sensitivity': 'prevalence_sensitivity',
}

# ==================== Output File Naming ====================
OUTPUT_FILES = {
    'scenarios': 'antibiotic_reduction_scenarios.csv',
    'confidence_intervals': 'confidence_interval_analysis.csv',
    'treatment_distribution': 'treatment_distribution.csv',
    'sensitivity': 'prevalence_sensitivity.csv',
    'adoption_curve': 'adoption_range_curve.csv',
    'run_config': 'run_config.json',
}


class ConfigurationError(ValueError):
    """Raised when a parameter set cannot produce meaningful scenarios."""


def build_parameters(population=EU_PEDIATRIC_POPULATION, prevalence=RRTI_PREVALENCE,
                     treatment_distribution=None, mean_difference=MEAN_DIFFERENCE,
                     ci_lower=CI_LOWER, ci_upper=CI_UPPER, antibiotic_classes=None):
    """
    Build an immutable parameter set, falling back to the published values.

    Parameters:
        population: Total pediatric population
        prevalence: RRTI prevalence (0-1)
        treatment_distribution: list of (label, fraction, midpoint) tuples
        mean_difference: Point effect size (courses per treated child)
        ci_lower, ci_upper: 95% CI edges of the effect size
        antibiotic_classes: list of (name, fraction) tuples

    Returns:
        ParameterSet
    """
    if treatment_distribution is None:
        treatment_distribution = TREATMENT_DISTRIBUTION
    if antibiotic_classes is None:
        antibiotic_classes = ANTIBIOTIC_CLASSES

    if not 0 <= prevalence <= 1:
        raise ValueError(f"prevalence ({prevalence}) must be within [0, 1]")

    return ParameterSet(
        population=int(population),
        prevalence=float(prevalence),
        treatment_distribution=tuple(
            TreatmentBucket(label=str(label), fraction=float(fraction), midpoint=float(midpoint))
            for label, fraction, midpoint in treatment_distribution
        ),
        mean_difference=float(mean_difference),
        ci_lower=float(ci_lower),
        ci_upper=float(ci_upper),
        antibiotic_classes=tuple((str(name), float(fraction)) for name, fraction in antibiotic_classes),
    )


def validate_parameters(params):
    """
    Check that a parameter set is internally consistent.

    Bucket fractions must sum to 1.0. At most two antibiotic classes are
    allowed and their fractions must sum to less than 1.0, leaving a
    positive "other" share. Effect sizes that do not reduce courses
    are allowed but trigger a warning.

    Parameters:
        params: ParameterSet

    Returns:
        bool: True if no warning was raised

    Raises:
        ConfigurationError if the distribution or class split is inconsistent
    """
    fraction_total = sum(bucket.fraction for bucket in params.treatment_distribution)
    if abs(fraction_total - 1.0) > FRACTION_TOLERANCE:
        raise ConfigurationError(
            f"Treatment distribution fractions sum to {fraction_total:.6f}, expected 1.0"
        )

    # Each class is rounded on its own; two classes below 1.0 keep the
    # rounded counts within courses_reduced, three or more may overshoot.
    if len(params.antibiotic_classes) > 2:
        raise ConfigurationError(
            f"At most 2 antibiotic classes are supported, got {len(params.antibiotic_classes)}"
        )
    class_total = sum(fraction for _, fraction in params.antibiotic_classes)
    if class_total >= 1.0 - FRACTION_TOLERANCE:
        raise ConfigurationError(
            f"Antibiotic class fractions sum to {class_total:.3f}, "
            f"expected below 1.0 to leave an 'other' share"
        )

    effects = (params.mean_difference, params.ci_lower, params.ci_upper)
    if any(effect > 0 for effect in effects):
        warnings.warn(
            f"Effect sizes {effects} include a positive value (more courses, not fewer). "
            f"Courses avoided are computed from |effect| and may be misleading.",
            UserWarning
        )
        return False

    return True


def get_timestamp():
    """Generate timestamp string for output files"""
    from datetime import datetime
    return datetime.now().strftime("%Y%m%d_%H%M%S")


DEFAULT_PARAMETERS = build_parameters()
