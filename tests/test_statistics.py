# tests/test_statistics.py

import pytest

from grade_insight.grades import Absent, Fraction, Label, Numeric, Withdrawn
from grade_insight.statistics import (
    describe,
    describe_cells,
    percentile_rank,
    percentile_ranks,
    population_std,
)


def test_population_std_divides_by_n():
    assert population_std([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)


def test_population_std_degenerate():
    assert population_std([]) == 0.0
    assert population_std([42.0]) == 0.0
    assert population_std([0.1, 0.1, 0.1]) == 0.0


def test_describe():
    result = describe([60.0, 70.0, 80.0])

    assert result.mean == pytest.approx(70.0)
    assert result.std_dev == pytest.approx(8.164965, rel=1e-6)
    assert result.min == 60.0
    assert result.max == 80.0
    assert result.count == 3


def test_describe_empty_sequence_uses_zeros():
    result = describe([])

    assert result.to_dict() == {'mean': 0.0, 'std_dev': 0.0, 'min': 0.0, 'max': 0.0, 'count': 0}


def test_describe_cells_counts_participation():
    cells = [
        Numeric(80.0),
        Absent(),
        Fraction(9.0, 10.0),
        Fraction(3.0, 0.0),
        Label('NSP'),
        Withdrawn(),
        Numeric(0.0),
    ]

    result = describe_cells(cells)

    assert result.evaluated_count == 3
    assert result.missing_count == 4
    assert result.stats.max == 80.0
    assert result.stats.min == 0.0
    assert result.stats.mean == pytest.approx(89.0 / 3)


def test_percentile_rank_counts_strictly_lower_peers():
    peers = [30.0, 45.0, 61.0, 82.0, 95.0]

    assert percentile_rank(30.0, peers) == 0.0
    assert percentile_rank(61.0, peers) == 40.0
    assert percentile_rank(95.0, peers) == 80.0


def test_percentile_rank_ties_share_rank():
    assert percentile_ranks([50.0, 50.0, 70.0]) == pytest.approx([0.0, 0.0, 200.0 / 3])


def test_percentile_rank_single_peer_is_100():
    assert percentile_rank(12.0, [12.0]) == 100.0
    assert percentile_rank(12.0, []) == 100.0


@pytest.mark.parametrize(
    'scores',
    [
        [1.0],
        [5.0, 5.0, 5.0],
        [0.0, 100.0],
        [13.5, 99.0, 42.0, 42.0, 7.25, 150.0],
    ],
)
def test_percentile_rank_bounds(scores):
    assert percentile_rank(min(scores), scores) >= 0.0
    assert percentile_rank(max(scores), scores) <= 100.0
