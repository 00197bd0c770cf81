#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Console Report Module
Human-readable restatement of the analysis tables (no new computation).
"""


def _thousands(value):
    return f"{value:,.0f}"


def print_section(title, underline='='):
    print(f"\n\n{title}")
    print(underline * len(title))


def print_population_summary(params):
    """Print population and target population"""
    print(f"Total EU pediatric population: {params.population:,} children")
    print(f"Children with recurrent RTIs ({params.prevalence * 100:.0f}%): "
          f"{params.children_with_rrti:,} children")


def print_treatment_distribution(table, weighted_avg, baseline_total):
    """
    Print treatment distribution table

    Parameters:
        table: DataFrame from treatment_distribution_table()
        weighted_avg: float, average courses per child
        baseline_total: float, total annual courses
    """
    print("\nTreatment Distribution:")
    print(table.to_string(index=False, formatters={
        'percentage': '{:.2f}'.format,
        'courses_midpoint': '{:.1f}'.format,
        'children_count': _thousands,
        'total_courses': _thousands,
    }))
    print(f"\nWeighted average courses per child: {weighted_avg:.2f}")
    print(f"Total annual antibiotic courses: {baseline_total:,.0f}")


def print_scenario_table(table, mean_difference):
    """Print the point-estimate scenario table"""
    formatters = {col: _thousands for col in table.columns
                  if col not in ('adoption_rate', 'percentage_reduction')}
    formatters['percentage_reduction'] = '{:.1f}'.format

    print(f"Point Estimate Results (Mean Difference = {mean_difference:.2f}):")
    print(table.to_string(index=False, formatters=formatters))


def print_confidence_interval_table(table):
    """Print the CI table"""
    formatters = {
        'point_estimate': _thousands,
        'lower_bound': _thousands,
        'upper_bound': _thousands,
        'point_pct': '{:.1f}'.format,
        'lower_pct': '{:.1f}'.format,
        'upper_pct': '{:.1f}'.format,
    }
    print("Confidence Interval Analysis (95% CI):")
    print(table.to_string(index=False, formatters=formatters))


def print_summary_statistics(summary):
    """
    Print headline figures

    Parameters:
        summary: dict from calculate_summary_statistics()
    """
    full_pct = f"{summary['full_adoption'] * 100:g}%"
    class_pct = f"{summary['class_adoption'] * 100:g}%"

    if summary['max_courses_avoided'] is not None:
        print(f"Base Case ({full_pct} adoption):")
        print(f"- Maximum courses avoided: {summary['max_courses_avoided']:,} "
              f"({summary['max_percentage_reduction']:.1f}% reduction)")

    if summary['conservative_courses'] is not None:
        print(f"\nConfidence Interval Range ({full_pct} adoption):")
        print(f"- Conservative estimate: {summary['conservative_courses']:,} courses "
              f"({summary['conservative_pct']:.1f}% reduction)")
        print(f"- Optimistic estimate: {summary['optimistic_courses']:,} courses "
              f"({summary['optimistic_pct']:.1f}% reduction)")

    if summary['class_avoided'] is not None:
        print(f"\nAntibiotic Class Impact ({class_pct} adoption scenario):")
        for name, avoided in summary['class_avoided'].items():
            label = name.replace('_', '-').capitalize()
            print(f"- {label} avoided: {avoided:,} courses")


def print_sensitivity_table(table, adoption_rate):
    """Print prevalence sensitivity table"""
    formatters = {col: _thousands for col in table.columns
                  if col not in ('prevalence', 'percentage_reduction')}
    formatters['percentage_reduction'] = '{:.1f}'.format

    print(f"Sensitivity to RRTI Prevalence ({adoption_rate * 100:g}% adoption rate):")
    print(table.to_string(index=False, formatters=formatters))
