"""
Adaptive histogram buckets for accumulated scores.

Classes graded on the usual 0-100 scale get fixed buckets around the passing
mark. While the course is still early (nobody has reached 60 points yet) the
observed range is split into equal-width buckets instead, so the histogram is
not squashed into the first bar.
"""

import math
from dataclasses import asdict, dataclass
from numbers import Real

import numpy as np

from .config import DEFAULT_MAX_OBSERVED, EARLY_GRADING_BUCKETS, PASSING_THRESHOLD, STANDARD_BUCKETS


@dataclass(frozen=True)
class DistributionBucket:
    range_label: str
    min: float
    max: float  # exclusive
    count: int
    is_failing: bool
    percent_of_class: float

    def contains(self, score):
        return self.min <= score < self.max

    def to_dict(self):
        return asdict(self)


def _score_of(item):
    if isinstance(item, Real):
        return float(item)
    if isinstance(item, dict):
        return float(item['accumulated_score'])
    return float(item.accumulated_score)


def _format_bound(value):
    return str(int(value)) if float(value).is_integer() else f'{value:g}'


def early_grading_ranges(max_observed, bucket_count=EARLY_GRADING_BUCKETS):
    """Equal-width (min, max, label) ranges over [0, max_observed]."""
    step = max(math.ceil(max_observed / bucket_count), 1)
    ranges = []
    for i in range(bucket_count):
        lo = i * step
        hi = (i + 1) * step
        label_hi = hi
        if i == bucket_count - 1:
            # Stretch the last bucket so the top scorer is inside it
            hi = max_observed + 1
            if hi <= lo:
                hi = lo + step
            label_hi = math.floor(max_observed)
            if label_hi <= lo:
                label_hi = hi
        ranges.append((float(lo), float(hi), f'{_format_bound(lo)}-{_format_bound(label_hi)}'))
    return ranges


def bucket_ranges(max_observed):
    if max_observed < PASSING_THRESHOLD:
        return early_grading_ranges(max_observed)
    return list(STANDARD_BUCKETS)


def bucket(students_with_scores):
    """
    Partition students into contiguous, upper-bound-exclusive buckets.

    Accepts student summaries, dicts with an 'accumulated_score' key, or bare
    scores. Scores outside every range are counted in the nearest end bucket,
    so the counts always add up to the number of students.
    """
    scores = np.asarray([_score_of(item) for item in students_with_scores], dtype=float)
    student_count = int(scores.size)
    max_observed = float(np.max(scores)) if student_count else DEFAULT_MAX_OBSERVED

    ranges = bucket_ranges(max_observed)
    upper_edges = np.asarray([hi for _, hi, _ in ranges])

    # First bucket whose exclusive upper edge is above the score
    positions = np.searchsorted(upper_edges, scores, side='right')
    positions = np.clip(positions, 0, len(ranges) - 1)
    counts = np.bincount(positions, minlength=len(ranges))

    buckets = []
    for (lo, hi, label), count in zip(ranges, counts):
        percent = 100.0 * count / student_count if student_count else 0.0
        buckets.append(DistributionBucket(
            range_label=label,
            min=lo,
            max=hi,
            count=int(count),
            # Early grading with a top score in [59, 60) stretches the last max past 60,
            # so that bucket is not flagged failing even though its students are
            is_failing=hi <= PASSING_THRESHOLD,
            percent_of_class=float(percent),
        ))
    return buckets
