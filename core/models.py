"""Domain models for the antibiotic reduction scenarios."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Tuple

from .rounding import round_half_up


@dataclass(frozen=True)
class TreatmentBucket:
    """Children grouped by how many antibiotic courses they receive per year."""

    label: str
    fraction: float  # Share of children with RRTIs in this bucket
    midpoint: float  # Representative number of courses


@dataclass(frozen=True)
class ParameterSet:
    """Literature-derived inputs shared by every scenario."""

    population: int
    prevalence: float
    treatment_distribution: Tuple[TreatmentBucket, ...]
    mean_difference: float
    ci_lower: float
    ci_upper: float
    antibiotic_classes: Tuple[Tuple[str, float], ...]

    @property
    def children_with_rrti(self) -> int:
        return round_half_up(self.population * self.prevalence)

    @property
    def other_class_fraction(self) -> float:
        return 1.0 - sum(fraction for _, fraction in self.antibiotic_classes)

    def with_prevalence(self, prevalence: float) -> "ParameterSet":
        """Return a copy with a different RRTI prevalence."""
        if not 0 <= prevalence <= 1:
            raise ValueError(f"prevalence ({prevalence}) must be within [0, 1]")
        return replace(self, prevalence=float(prevalence))


@dataclass(frozen=True)
class ScenarioResult:
    """Courses avoided for one (adoption rate, effect size) pair."""

    adoption_rate: float
    effect_size: float
    children_treated: int
    children_standard: int
    courses_reduced: int
    percentage_reduction: float
    class_avoided: Tuple[Tuple[str, int], ...]
    other_avoided: int

    def avoided_by_class(self) -> Dict[str, int]:
        return dict(self.class_avoided)

    def to_row(self) -> Dict[str, object]:
        """Flatten into a table row with one ``<class>_avoided`` column per class."""
        row = {
            'adoption_rate': self.adoption_rate,
            'effect_size': self.effect_size,
            'children_treated': self.children_treated,
            'children_standard': self.children_standard,
            'courses_reduced': self.courses_reduced,
            'percentage_reduction': self.percentage_reduction,
        }
        for name, avoided in self.class_avoided:
            row[f'{name}_avoided'] = avoided
        row['other_avoided'] = self.other_avoided
        return row


@dataclass(frozen=True)
class ConfidenceIntervalResult:
    """Point estimate and CI edges for one adoption rate.

    ``upper_bound`` always holds the larger number of courses avoided.
    """

    adoption_rate: float
    point: ScenarioResult
    lower_bound: ScenarioResult
    upper_bound: ScenarioResult
