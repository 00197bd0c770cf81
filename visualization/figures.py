#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Figure Module

Published figures of the antibiotic reduction analysis:
- plot_adoption_range()          courses avoided vs adoption %, CI ribbon
- plot_adoption_range_plotly()   interactive version of the ribbon plot
- plot_class_breakdown()         stacked bars by antibiotic class
- plot_courses_avoided()         horizontal bars with CI whiskers

All values are courses avoided; the only transformation is courses -> millions.
"""

import sys
import os
import matplotlib.pyplot as plt
import plotly.graph_objects as go
import numpy as np
from matplotlib.ticker import FuncFormatter, MultipleLocator

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from config import COLORS, FIGURE_DPI
from core.calculator import format_rate_label


def millions_label(x, pos=None):
    """15_000_000 -> '15M'"""
    return f"{x / 1e6:g}M"


def millions_label_1dp(x, pos=None):
    """15_230_083 -> '15.2M'"""
    return f"{x / 1e6:.1f}M"


def _effect_caption(params):
    return (f"Mean difference per child: {params.mean_difference:.2f} courses "
            f"(95% CI: {params.ci_lower:.2f} to {params.ci_upper:.2f})")


def plot_adoption_range(curve_df, output_path):
    """
    Plot courses avoided across the full adoption range with the 95% CI band

    Parameters:
        curve_df: DataFrame with [adopt_pct, point, lower, upper]
        output_path: Output file path

    Returns:
        None (saves figure to output_path)
    """
    fig, ax = plt.subplots(figsize=(8, 5.5))

    ax.fill_between(curve_df['adopt_pct'], curve_df['lower'], curve_df['upper'],
                    color=COLORS['ribbon'], alpha=0.45, linewidth=0,
                    label='95% confidence interval')
    ax.plot(curve_df['adopt_pct'], curve_df['point'],
            color=COLORS['line'], linewidth=2.4, label='Point estimate')

    ax.xaxis.set_major_locator(MultipleLocator(25))
    ax.yaxis.set_major_locator(MultipleLocator(5_000_000))
    ax.yaxis.set_major_formatter(FuncFormatter(millions_label))

    ax.set_xlabel('Bacterial Lysates Adoption Rate (%)', fontsize=12)
    ax.set_ylabel('Antibiotic courses avoided annually (millions)', fontsize=12)
    ax.set_title('Sensitivity analysis across the full adoption range', fontsize=13, fontweight='bold')
    ax.grid(True, which='major', alpha=0.3)
    ax.legend(loc='upper left', fontsize=10, framealpha=0.9)
    ax.set_xlim(curve_df['adopt_pct'].min(), curve_df['adopt_pct'].max())
    ax.set_ylim(bottom=0)

    fig.text(0.99, 0.01, 'Shaded band = 95% confidence interval',
             ha='right', va='bottom', fontsize=9, style='italic')

    plt.tight_layout()
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    print(f"Adoption range plot saved: {output_path}")
    plt.close(fig)


def plot_adoption_range_plotly(curve_df, output_path):
    """
    Plot the adoption range curve using Plotly (interactive version)

    Parameters:
        curve_df: DataFrame with [adopt_pct, point, lower, upper]
        output_path: Output file path (should end with .html)

    Returns:
        fig (plotly.graph_objects.Figure): Plotly figure object
    """
    fig = go.Figure()

    # Upper edge first so the lower edge can fill up to it
    fig.add_trace(go.Scatter(
        x=curve_df['adopt_pct'],
        y=curve_df['upper'],
        mode='lines',
        name='Upper bound',
        line=dict(width=0),
        showlegend=False,
        hovertemplate='Adoption: %{x}%<br>Upper: %{y:,.0f}<extra></extra>'
    ))

    fig.add_trace(go.Scatter(
        x=curve_df['adopt_pct'],
        y=curve_df['lower'],
        mode='lines',
        name='95% CI',
        line=dict(width=0),
        fill='tonexty',
        fillcolor=COLORS['ribbon'],
        hovertemplate='Adoption: %{x}%<br>Lower: %{y:,.0f}<extra></extra>'
    ))

    fig.add_trace(go.Scatter(
        x=curve_df['adopt_pct'],
        y=curve_df['point'],
        mode='lines',
        name='Point estimate',
        line=dict(color=COLORS['line'], width=3),
        hovertemplate='<b>Point estimate</b><br>Adoption: %{x}%<br>Courses: %{y:,.0f}<extra></extra>'
    ))

    fig.update_layout(
        title='Sensitivity analysis across the full adoption range',
        xaxis_title='Bacterial Lysates Adoption Rate (%)',
        yaxis_title='Antibiotic courses avoided annually',
        hovermode='x unified',
        template='plotly_white',
        font=dict(size=12),
        width=1000,
        height=650
    )

    fig.update_xaxes(dtick=25)

    fig.write_html(output_path)
    print(f"Interactive adoption range plot saved: {output_path}")

    return fig


def plot_class_breakdown(scenarios, params, output_path):
    """
    Stacked bars of courses avoided by antibiotic class per adoption rate

    Parameters:
        scenarios: list of ScenarioResult (point estimate)
        params: ParameterSet (for the caption)
        output_path: Output file path

    Returns:
        None (saves figure to output_path)
    """
    fig, ax = plt.subplots(figsize=(9, 6.5))

    labels = [format_rate_label(s.adoption_rate) for s in scenarios]
    x = np.arange(len(scenarios))
    totals = np.array([s.courses_reduced for s in scenarios], dtype=float)

    # Configured classes in reverse order, then "other" on top
    class_names = [name for name, _ in params.antibiotic_classes][::-1]
    stacks = [(name, np.array([s.avoided_by_class()[name] for s in scenarios], dtype=float))
              for name in class_names]
    stacks.append(('other', np.array([s.other_avoided for s in scenarios], dtype=float)))

    bottom = np.zeros(len(scenarios))
    for name, values in stacks:
        label = 'Other Antibiotics' if name == 'other' else name.replace('_', '-').capitalize()
        ax.bar(x, values, width=0.7, bottom=bottom, label=label,
               color=COLORS.get(name, None), edgecolor='grey', linewidth=0.4)
        bottom += values

    for xi, total in zip(x, totals):
        ax.text(xi, total * 1.05, millions_label_1dp(total),
                ha='center', va='bottom', fontsize=10, fontweight='bold')

    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.yaxis.set_major_formatter(FuncFormatter(millions_label_1dp))
    ax.set_ylim(0, totals.max() * 1.15 if len(totals) and totals.max() > 0 else 1)
    ax.grid(axis='y', alpha=0.3)
    ax.set_axisbelow(True)

    ax.set_xlabel('Bacterial Lysates Adoption Rate', fontsize=12, fontweight='bold')
    ax.set_ylabel('Antibiotic Courses Avoided (millions)', fontsize=12, fontweight='bold')
    fig.suptitle('Antibiotic Courses Avoided by Class and Adoption Rate',
                 fontsize=14, fontweight='bold', x=0.02, ha='left')
    ax.set_title('Absolute number of courses showing scaling impact with increased adoption',
                 fontsize=11, color='dimgray', loc='left')

    handles, legend_labels = ax.get_legend_handles_labels()
    ax.legend(handles[::-1], legend_labels[::-1], title='Antibiotic Class',
              loc='upper center', bbox_to_anchor=(0.5, -0.12), ncol=len(stacks), frameon=False)

    caption = (f"Total target population: {params.children_with_rrti / 1e6:.2f} million children\n"
               f"{_effect_caption(params)}")
    fig.text(0.02, -0.02, caption, ha='left', va='top', fontsize=9)

    plt.tight_layout()
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    print(f"Class breakdown plot saved: {output_path}")
    plt.close(fig)


def plot_courses_avoided(ci_results, params, output_path):
    """
    Horizontal bars of courses avoided (millions) with 95% CI whiskers

    Parameters:
        ci_results: list of ConfidenceIntervalResult
        params: ParameterSet (for the caption)
        output_path: Output file path

    Returns:
        None (saves figure to output_path)
    """
    fig, ax = plt.subplots(figsize=(9, 5.5))

    labels = [format_rate_label(ci.adoption_rate) for ci in ci_results]
    y = np.arange(len(ci_results))
    total_m = np.array([ci.point.courses_reduced for ci in ci_results]) / 1e6
    lower_m = np.array([ci.lower_bound.courses_reduced for ci in ci_results]) / 1e6
    upper_m = np.array([ci.upper_bound.courses_reduced for ci in ci_results]) / 1e6

    ax.barh(y, total_m, height=0.6, color=COLORS['bar'], zorder=2)
    ax.errorbar(total_m, y, xerr=[total_m - lower_m, upper_m - total_m],
                fmt='none', ecolor=COLORS['error'], elinewidth=1.4, capsize=6, zorder=3)

    ax.set_yticks(y)
    ax.set_yticklabels(labels)
    x_max = max(25, float(np.ceil(upper_m.max() / 5) * 5)) if len(upper_m) else 25
    ax.set_xlim(0, x_max)
    ax.xaxis.set_major_locator(MultipleLocator(5))
    ax.grid(axis='x', alpha=0.3, zorder=0)

    ax.set_xlabel('Antibiotic Courses Avoided (millions, with 95% CI)', fontsize=12)
    ax.set_ylabel('Bacterial Lysates Adoption Rate', fontsize=12)
    fig.suptitle('Antibiotic Courses Avoided', fontsize=16, fontweight='bold', x=0.02, ha='left')
    ax.set_title('with 95% confidence intervals', fontsize=11, loc='left')

    caption = (f"Based on mean difference of {params.mean_difference:.2f} courses per child "
               f"(95% CI: {params.ci_lower:.2f} to {params.ci_upper:.2f})\n"
               f"Population size: {params.children_with_rrti / 1e6:.2f} million children "
               f"with recurrent RTIs in the EU")
    fig.text(0.98, -0.02, caption, ha='right', va='top', fontsize=9)

    plt.tight_layout()
    plt.savefig(output_path, dpi=FIGURE_DPI, bbox_inches='tight')
    print(f"Courses avoided plot saved: {output_path}")
    plt.close(fig)
