"""
Statistics accumulator.

Mean and population standard deviation (divisor n, not n - 1) over a finite
sample of numbers.
"""

from typing import Iterable, Optional

import numpy as np

from flowctl.errors import EmptyStatsError
from flowctl.models.summary import Stats


def accumulate(values: Iterable[float]) -> Stats:
    """
    Compute Stats over a non-empty sample.

    Args:
        values: Sample values (e.g. durations in milliseconds)

    Returns:
        Stats with count, mean and population standard deviation

    Raises:
        EmptyStatsError: If the sample is empty
    """
    sample = np.fromiter(values, dtype=np.float64)
    if sample.size == 0:
        raise EmptyStatsError()

    return Stats(
        count=int(sample.size),
        mean=float(np.mean(sample)),
        population_standard_deviation=float(np.std(sample, ddof=0)),
    )


def compute_stats(values: Iterable[float]) -> Optional[Stats]:
    """Compute Stats over a sample, or None when the sample is empty."""
    try:
        return accumulate(values)
    except EmptyStatsError:
        return None
