#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Visualization Module
"""

from .figures import (
    plot_adoption_range,
    plot_adoption_range_plotly,
    plot_class_breakdown,
    plot_courses_avoided,
    millions_label,
    millions_label_1dp
)

__all__ = [
    'plot_adoption_range',
    'plot_adoption_range_plotly',
    'plot_class_breakdown',
    'plot_courses_avoided',
    'millions_label',
    'millions_label_1dp',
]
