"""Integer rounding used at every stage of the scenario pipeline."""

import numpy as np


def round_half_up(value):
    """
    Round to the nearest integer, with halves rounded away from zero.

    Python's built-in ``round`` rounds halves to even, which turns
    4,007,916.5 treated children into 4,007,916 and shifts the published
    50% adoption total by two courses.

    Parameters:
        value: scalar or array-like

    Returns:
        int for scalars, int64 ndarray otherwise
    """
    value = np.asarray(value, dtype=float)
    rounded = np.sign(value) * np.floor(np.abs(value) + 0.5)
    if rounded.ndim == 0:
        return int(rounded)
    return rounded.astype(np.int64)
