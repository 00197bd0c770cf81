#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Plot Prevalence Sensitivity Results

Usage:
    python plot_sensitivity.py prevalence_sensitivity_20250601_120000.csv
    python plot_sensitivity.py prevalence_sensitivity_*.csv --output figure.pdf
"""

import sys
import os
import argparse
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config import COLORS, FIGURE_DPI

# Set style
sns.set_style("whitegrid")
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 11
plt.rcParams['axes.titlesize'] = 12


def plot_prevalence_sensitivity(df, output_path='prevalence_sensitivity.pdf'):
    """
    Bar chart of courses avoided for each RRTI prevalence value.

    Parameters:
        df: DataFrame from sensitivity_table() (or the exported CSV)
        output_path: Output file path
    """
    courses_col = [c for c in df.columns if c.startswith('courses_')][0]
    plot_df = df.assign(courses_millions=df[courses_col] / 1e6)

    fig, ax = plt.subplots(figsize=(7, 5))
    sns.barplot(data=plot_df, x='prevalence', y='courses_millions',
                color=COLORS['bar'], ax=ax)

    for idx, row in plot_df.reset_index(drop=True).iterrows():
        ax.text(idx, row['courses_millions'], f"{row['courses_millions']:.1f}M\n"
                f"({row['target_population'] / 1e6:.2f}M children)",
                ha='center', va='bottom', fontsize=9)

    ax.set_xlabel('RRTI Prevalence', fontsize=11, fontweight='bold')
    ax.set_ylabel('Antibiotic Courses Avoided (millions)', fontsize=11, fontweight='bold')
    ax.set_ylim(0, plot_df['courses_millions'].max() * 1.25)
    adoption = courses_col.replace('courses_', '').replace('pct_adoption', '')
    ax.set_title(f'Sensitivity to RRTI Prevalence ({adoption}% adoption)', fontweight='bold')

    plt.tight_layout()
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    print(f"Figure saved: {output_path}")
    plt.close(fig)

    return fig


def main():
    parser = argparse.ArgumentParser(description='Plot prevalence sensitivity results')
    parser.add_argument('csv_file', type=str, help='Sensitivity results CSV file')
    parser.add_argument('--output', type=str, default='prevalence_sensitivity.pdf',
                        help='Output figure path')

    args = parser.parse_args()

    df = pd.read_csv(args.csv_file)
    print(f"Loaded {len(df)} prevalence values from {args.csv_file}")

    plot_prevalence_sensitivity(df, args.output)


if __name__ == '__main__':
    main()
