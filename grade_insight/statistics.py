"""
Descriptive statistics over numeric projections of grade cells.

All functions are pure. Degenerate inputs never raise: an empty sequence
describes as zeros, a single observation has zero spread, and a lone
student sits at the 100th percentile.
"""

from dataclasses import asdict, dataclass

import numpy as np

from .grades import numeric_value


@dataclass(frozen=True)
class Descriptive:
    mean: float
    std_dev: float
    min: float
    max: float
    count: int

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class CellStats:
    """Descriptive statistics of a column of cells plus participation counts."""
    stats: Descriptive
    evaluated_count: int
    missing_count: int


def population_std(values):
    """Population standard deviation (divide by N); 0 for fewer than two values."""
    arr = np.asarray(values, dtype=float)
    if arr.size <= 1:
        return 0.0
    mean = arr.mean()
    # Clamp so rounding can never push the variance below zero
    variance = max(float(np.mean(arr ** 2) - mean ** 2), 0.0)
    return float(np.sqrt(variance))


def describe(values):
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return Descriptive(mean=0.0, std_dev=0.0, min=0.0, max=0.0, count=0)
    return Descriptive(
        mean=float(np.mean(arr)),
        std_dev=population_std(arr),
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        count=int(arr.size),
    )


def included_values(cells):
    """Numeric projections of the cells that take part in aggregation."""
    values = []
    for cell in cells:
        value = numeric_value(cell)
        if value is not None:
            values.append(value)
    return values


def describe_cells(cells):
    cells = list(cells)
    values = included_values(cells)
    return CellStats(
        stats=describe(values),
        evaluated_count=len(values),
        missing_count=len(cells) - len(values),
    )


def percentile_rank(score, peers):
    """
    Percentage of peers strictly below score, in [0, 100].

    Tied scores share the same rank. With one peer or none the result is 100.
    """
    arr = np.asarray(peers, dtype=float)
    n = arr.size
    if n <= 1:
        return 100.0
    below = int(np.sum(arr < score))
    return float(np.clip(100.0 * below / n, 0.0, 100.0))


def percentile_ranks(scores):
    """Percentile rank of every score against the whole sequence."""
    arr = np.asarray(scores, dtype=float)
    return [percentile_rank(score, arr) for score in arr]
