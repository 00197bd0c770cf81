#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils Module
"""

from .statistics import calculate_summary_statistics

from .export import (
    export_scenarios_csv,
    export_confidence_intervals_csv,
    export_treatment_distribution_csv,
    export_sensitivity_csv,
    export_adoption_curve_csv,
    export_run_config
)

__all__ = [
    # Statistics
    'calculate_summary_statistics',
    # Export
    'export_scenarios_csv',
    'export_confidence_intervals_csv',
    'export_treatment_distribution_csv',
    'export_sensitivity_csv',
    'export_adoption_curve_csv',
    'export_run_config',
]
