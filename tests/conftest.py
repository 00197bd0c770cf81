import matplotlib

matplotlib.use("Agg")

import pytest

from config import DEFAULT_PARAMETERS, build_parameters
from core.models import ParameterSet


@pytest.fixture
def default_parameters() -> ParameterSet:
    """Published parameter set used across unit tests."""
    return DEFAULT_PARAMETERS


@pytest.fixture
def synthetic_parameters() -> ParameterSet:
    """Small round numbers: 100 children with RRTI, 1 course each on average."""
    return build_parameters(
        population=1000,
        prevalence=0.1,
        treatment_distribution=[("0", 0.5, 0.0), ("2", 0.5, 2.0)],
        mean_difference=-2.0,
        ci_lower=-1.0,
        ci_upper=-3.0,
        antibiotic_classes=[("a", 0.5), ("b", 0.25)],
    )
