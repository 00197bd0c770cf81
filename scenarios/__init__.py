"""
Scenarios Module

Available scenarios:
- adoption: courses avoided at 25/50/75/100% bacterial lysates adoption
- confidence_interval: point estimate and 95% CI edges per adoption rate,
  plus the full 0-100% adoption range curve

Usage:
    # Method 1: Run the script directly
    python scenarios/adoption.py --adoption-rates 0.25 0.5
    python scenarios/confidence_interval.py --curve --step 5

    # Method 2: Import in code
    from scenarios.adoption import run_adoption_scenarios
    from scenarios.confidence_interval import expand_confidence_interval
    results = run_adoption_scenarios(params)
    ci_results = expand_confidence_interval(params)
"""

__all__ = [
    'adoption',
    'confidence_interval',
]
