#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
EU Pediatric Antibiotic Reduction Analysis
Impact of bacterial lysates on antibiotic use in children with recurrent
respiratory tract infections (RRTIs).
"""
import sys
import os
import argparse

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
# Import configurations and utilities
from config import (
    EU_PEDIATRIC_POPULATION, RRTI_PREVALENCE,
    MEAN_DIFFERENCE, CI_LOWER, CI_UPPER,
    DEFAULT_ADOPTION_RATES, SENSITIVITY_PREVALENCE_RATES, SENSITIVITY_ADOPTION_RATE,
    ADOPTION_CURVE_STEP, DEFAULT_OUTPUT_DIR, OUTPUT_FILES, PLOT_FILENAMES,
    build_parameters, validate_parameters, get_timestamp
)

# Import core calculation functions
from core.calculator import (
    calculate_baseline_total,
    treatment_distribution_table,
    weighted_average_courses
)

from scenarios.adoption import run_adoption_scenarios, scenario_table
from scenarios.confidence_interval import (
    expand_confidence_interval,
    confidence_interval_table,
    adoption_range_curve
)
from sensitivity.sensitivity_prevalence import run_prevalence_sensitivity, sensitivity_table

# Import statistics, export and report utilities
from utils.statistics import calculate_summary_statistics
from utils.export import (
    export_scenarios_csv,
    export_confidence_intervals_csv,
    export_treatment_distribution_csv,
    export_sensitivity_csv,
    export_adoption_curve_csv,
    export_run_config
)
from utils.report import (
    print_section,
    print_population_summary,
    print_treatment_distribution,
    print_scenario_table,
    print_confidence_interval_table,
    print_summary_statistics,
    print_sensitivity_table
)


def run_analysis(args):
    """
    Run the full analysis: scenarios, CI, summary, sensitivity, export, figures

    Returns:
        dict with the computed results and the output directory
    """
    params = build_parameters(
        population=args.population,
        prevalence=args.prevalence,
        mean_difference=args.mean_difference,
        ci_lower=args.ci_lower,
        ci_upper=args.ci_upper
    )
    validate_parameters(params)

    # Independent run directory, created once all calculations have succeeded
    timestamp = get_timestamp()
    output_run_dir = f"{args.output_dir}/run_{timestamp}_prev{args.prevalence:g}"

    print("=== EU PEDIATRIC ANTIBIOTIC REDUCTION ANALYSIS ===")
    print(f"\nOutput directory: {output_run_dir}")

    # ========== 1. Population and baseline ==========
    print_section("1. POPULATION AND BASELINE CALCULATIONS")
    print_population_summary(params)

    baseline_total = calculate_baseline_total(params)
    distribution = treatment_distribution_table(params)
    print_treatment_distribution(distribution,
                                 weighted_average_courses(params.treatment_distribution),
                                 baseline_total)

    # ========== 2. Adoption scenarios ==========
    print_section("2. IMPACT SCENARIOS BY ADOPTION RATE")
    scenarios = run_adoption_scenarios(params, args.adoption_rates, baseline_total=baseline_total)
    print_scenario_table(scenario_table(scenarios), params.mean_difference)

    # ========== 3. Confidence intervals ==========
    print_section("3. CONFIDENCE INTERVAL ANALYSIS")
    ci_results = expand_confidence_interval(params, args.adoption_rates, baseline_total)
    print_confidence_interval_table(confidence_interval_table(ci_results))

    # ========== 4. Summary ==========
    print_section("4. SUMMARY STATISTICS")
    summary = calculate_summary_statistics(scenarios, ci_results)
    print_summary_statistics(summary)

    # ========== 5. Sensitivity ==========
    print_section("5. SENSITIVITY ANALYSIS")
    sensitivity = run_prevalence_sensitivity(params, args.prevalence_rates, SENSITIVITY_ADOPTION_RATE)
    print_sensitivity_table(sensitivity_table(sensitivity), SENSITIVITY_ADOPTION_RATE)

    curve = adoption_range_curve(params, step=args.curve_step, baseline_total=baseline_total)

    # ========== 6. Export ==========
    print_section("6. EXPORTING RESULTS")
    data_dir = f"{output_run_dir}/data"
    os.makedirs(data_dir, exist_ok=True)
    if not args.no_figures:
        os.makedirs(f"{output_run_dir}/figures", exist_ok=True)
    export_scenarios_csv(scenarios, f"{data_dir}/{OUTPUT_FILES['scenarios']}")
    export_confidence_intervals_csv(ci_results, f"{data_dir}/{OUTPUT_FILES['confidence_intervals']}")
    export_treatment_distribution_csv(params, f"{data_dir}/{OUTPUT_FILES['treatment_distribution']}")
    export_sensitivity_csv(sensitivity, f"{data_dir}/{OUTPUT_FILES['sensitivity']}")
    export_adoption_curve_csv(curve, f"{data_dir}/{OUTPUT_FILES['adoption_curve']}")
    export_run_config(args, params, baseline_total, f"{output_run_dir}/{OUTPUT_FILES['run_config']}")

    # ========== 7. Figures ==========
    if not args.no_figures:
        # plotting stack loads only when figures are requested
        from visualization.figures import (
            plot_adoption_range,
            plot_adoption_range_plotly,
            plot_class_breakdown,
            plot_courses_avoided
        )
        from sensitivity.plot_sensitivity import plot_prevalence_sensitivity

        print_section("7. GENERATING FIGURES")
        fig_dir = f"{output_run_dir}/figures"
        fmt = args.figure_format
        plot_adoption_range(curve, f"{fig_dir}/{PLOT_FILENAMES['adoption_range']}.{fmt}")
        plot_adoption_range_plotly(curve, f"{fig_dir}/{PLOT_FILENAMES['adoption_range']}.html")
        plot_class_breakdown(scenarios, params, f"{fig_dir}/{PLOT_FILENAMES['class_breakdown']}.{fmt}")
        plot_courses_avoided(ci_results, params, f"{fig_dir}/{PLOT_FILENAMES['courses_avoided']}.{fmt}")
        plot_prevalence_sensitivity(sensitivity_table(sensitivity),
                                    f"{fig_dir}/{PLOT_FILENAMES['prevalence_sensitivity']}.{fmt}")

    print("\n=== ANALYSIS COMPLETE ===")
    print(f"\nAll outputs saved to: {output_run_dir}")

    return {
        'params': params,
        'baseline_total': baseline_total,
        'scenarios': scenarios,
        'ci_results': ci_results,
        'summary': summary,
        'sensitivity': sensitivity,
        'curve': curve,
        'output_dir': output_run_dir,
    }


def create_parser():
    """create the argument parser"""
    parser = argparse.ArgumentParser(
        description='EU Pediatric Antibiotic Reduction Analysis (bacterial lysates in RRTIs)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Published analysis:
    python analysis.py

  Alternative prevalence, tables only:
    python analysis.py --prevalence 0.06 --no-figures

  Custom adoption rates:
    python analysis.py --adoption-rates 0.1 0.3 0.5
        """
    )

    parser.add_argument('--population', type=int, default=EU_PEDIATRIC_POPULATION,
                        help=f'Total pediatric population (default: {EU_PEDIATRIC_POPULATION})')
    parser.add_argument('--prevalence', type=float, default=RRTI_PREVALENCE,
                        help=f'RRTI prevalence, 0-1 (default: {RRTI_PREVALENCE})')
    parser.add_argument('--mean-difference', type=float, default=MEAN_DIFFERENCE,
                        help=f'Mean difference in courses per child (default: {MEAN_DIFFERENCE})')
    parser.add_argument('--ci-lower', type=float, default=CI_LOWER,
                        help=f'95%% CI edge of the mean difference (default: {CI_LOWER})')
    parser.add_argument('--ci-upper', type=float, default=CI_UPPER,
                        help=f'95%% CI edge of the mean difference (default: {CI_UPPER})')
    parser.add_argument('--adoption-rates', type=float, nargs='+', default=DEFAULT_ADOPTION_RATES,
                        help=f'Adoption rates, 0-1 (default: {DEFAULT_ADOPTION_RATES})')
    parser.add_argument('--prevalence-rates', type=float, nargs='+', default=SENSITIVITY_PREVALENCE_RATES,
                        help=f'Prevalence values for the sensitivity analysis (default: {SENSITIVITY_PREVALENCE_RATES})')
    parser.add_argument('--curve-step', type=float, default=ADOPTION_CURVE_STEP,
                        help=f'Adoption percentage step of the range curve (default: {ADOPTION_CURVE_STEP})')
    parser.add_argument('-o', '--output-dir', type=str, default=DEFAULT_OUTPUT_DIR,
                        help=f'Output directory (default: {DEFAULT_OUTPUT_DIR})')
    parser.add_argument('--figure-format', type=str, default='pdf', choices=['pdf', 'png', 'svg'],
                        help='Static figure format (default: pdf)')
    parser.add_argument('--no-figures', action='store_true',
                        help='Skip figure generation')

    return parser


def main(argv=None):
    """Main function to run the analysis"""
    parser = create_parser()
    args = parser.parse_args(argv)
    return run_analysis(args)


if __name__ == '__main__':
    main()
