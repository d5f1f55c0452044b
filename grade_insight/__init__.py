"""
Grade roster analytics: per-student and per-evaluation statistics, status
classification, density curves and adaptive histogram buckets.
"""

from .buckets import DistributionBucket, bucket
from .classifier import StatusCategory, classify
from .density import DensityCurve, estimate, silverman_bandwidth
from .grades import Absent, Fraction, Label, Numeric, Withdrawn, is_missing, numeric_value
from .statistics import Descriptive, describe, percentile_rank, population_std
from .summary import ClassSummary, EvaluationSummary, GradeAnalyzer, StudentSummary, Summary
from .table import EvaluationIdentity, StudentIdentity, Table

__all__ = [
    'Absent',
    'ClassSummary',
    'DensityCurve',
    'Descriptive',
    'DistributionBucket',
    'EvaluationIdentity',
    'EvaluationSummary',
    'Fraction',
    'GradeAnalyzer',
    'Label',
    'Numeric',
    'StatusCategory',
    'StudentIdentity',
    'StudentSummary',
    'Summary',
    'Table',
    'Withdrawn',
    'bucket',
    'classify',
    'describe',
    'estimate',
    'is_missing',
    'numeric_value',
    'percentile_rank',
    'population_std',
    'silverman_bandwidth',
]
