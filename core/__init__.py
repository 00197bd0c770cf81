"""
Core Module

Includes the core calculation functions for the antibiotic reduction analysis:
- models.py
- rounding.py
- calculator.py

Usage:
    from core.calculator import (
        calculate_baseline_total,
        calculate_impact,
        treatment_distribution_table
    )
"""

__all__ = [
    'models',
    'rounding',
    'calculator',
]
