"""
Sensitivity Module

- sensitivity_prevalence: courses avoided under alternative RRTI prevalence
- plot_sensitivity: bar chart of the prevalence sweep
"""

__all__ = [
    'sensitivity_prevalence',
    'plot_sensitivity',
]
