"""
Summary builder: turns a Table into the class, student and evaluation views.

Everything is computed once when the analyzer is constructed. All students
are ranked and classified against the same peer set (the full roster), so
percentiles and statuses always agree with each other.
"""

import logging
from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd

from . import buckets, density
from .classifier import StatusCategory, classify
from .config import PASSING_THRESHOLD, SUBJECT_HEADER_PREFIX
from .grades import contribution, possible_points
from .statistics import describe, describe_cells, included_values, percentile_rank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentSummary:
    id: str
    name: str
    accumulated_score: float
    percentile: float
    std_dev: float
    status: StatusCategory

    def to_dict(self):
        data = asdict(self)
        data['status'] = self.status.value
        return data


@dataclass(frozen=True)
class EvaluationSummary:
    id: str
    name: str
    average: float
    std_dev: float
    highest_score: float
    lowest_score: float
    max_possible_score: float
    evaluated_count: int
    missing_count: int

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class ClassSummary:
    student_count: int
    overall_average: float
    overall_std_dev: float
    evaluation_count: int
    acumulated_points: float
    approved_count: int
    failed_count: int
    on_track_count: int
    warning_count: int
    critical_count: int

    def count_for(self, status):
        return {
            StatusCategory.APPROVED: self.approved_count,
            StatusCategory.FAILED: self.failed_count,
            StatusCategory.ON_TRACK: self.on_track_count,
            StatusCategory.WARNING: self.warning_count,
            StatusCategory.CRITICAL: self.critical_count,
        }[status]

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class Summary:
    class_summary: ClassSummary
    students: tuple
    evaluations: tuple

    def to_dict(self):
        return {
            'class': self.class_summary.to_dict(),
            'students': [s.to_dict() for s in self.students],
            'evaluations': [e.to_dict() for e in self.evaluations],
        }


def summarize_evaluation(evaluation, cells):
    cell_stats = describe_cells(cells)
    maxima = [p for p in (possible_points(cell) for cell in cells) if p is not None]
    return EvaluationSummary(
        id=evaluation.id,
        name=evaluation.name,
        average=cell_stats.stats.mean,
        std_dev=cell_stats.stats.std_dev,
        highest_score=cell_stats.stats.max,
        lowest_score=cell_stats.stats.min,
        max_possible_score=max(maxima) if maxima else 0.0,
        evaluated_count=cell_stats.evaluated_count,
        missing_count=cell_stats.missing_count,
    )


def summarize_students(table, passing_threshold=PASSING_THRESHOLD):
    """Student summaries plus the class-level statistics of their accumulated scores."""
    accumulated = [sum(contribution(cell) for cell in row) for row in table.grades]
    class_stats = describe(accumulated)

    summaries = []
    for student, row, score in zip(table.students, table.grades, accumulated):
        summaries.append(StudentSummary(
            id=student.id,
            name=student.name,
            accumulated_score=float(score),
            percentile=percentile_rank(score, accumulated),
            std_dev=describe(included_values(row)).std_dev,
            status=classify(score, class_stats.mean, class_stats.std_dev, passing_threshold),
        ))
    return summaries, class_stats


class GradeAnalyzer:
    """
    Read-only analysis of one uploaded roster.

    Build it from a ready Table; a new file means a new analyzer. The table
    and description headers are handed back unchanged.
    """

    def __init__(self, table, description_headers=(), passing_threshold=PASSING_THRESHOLD):
        self.table = table
        self.description_headers = tuple(description_headers)
        self.passing_threshold = passing_threshold

        students, class_stats = summarize_students(table, passing_threshold)
        evaluations = [summarize_evaluation(evaluation, table.column(j))
                       for j, evaluation in enumerate(table.evaluations)]

        counts = {status: 0 for status in StatusCategory}
        for student in students:
            counts[student.status] += 1

        class_summary = ClassSummary(
            student_count=table.student_count,
            overall_average=class_stats.mean,
            overall_std_dev=class_stats.std_dev,
            evaluation_count=table.evaluation_count,
            acumulated_points=float(sum(e.max_possible_score for e in evaluations)),
            approved_count=counts[StatusCategory.APPROVED],
            failed_count=counts[StatusCategory.FAILED],
            on_track_count=counts[StatusCategory.ON_TRACK],
            warning_count=counts[StatusCategory.WARNING],
            critical_count=counts[StatusCategory.CRITICAL],
        )
        self._summary = Summary(class_summary, tuple(students), tuple(evaluations))

        if table.student_count == 0:
            logger.debug('Empty roster; summary uses default values')
        logger.info('Analyzed %d students across %d evaluations (average %.2f)',
                    table.student_count, table.evaluation_count, class_stats.mean)

    # --- query operations ---

    def get_summary(self):
        return self._summary

    def get_table(self):
        return self.table

    def get_description_headers(self):
        return list(self.description_headers)

    def get_distribution(self):
        return buckets.bucket(self._summary.students)

    # --- supplementary views ---

    def class_density(self):
        """Density curve of the accumulated scores."""
        return density.estimate([s.accumulated_score for s in self._summary.students])

    def evaluation_density(self, evaluation_id):
        """Density curve of one evaluation's scores (missing cells left out)."""
        column = self.table.column(self.table.evaluation_index(evaluation_id))
        return density.estimate(included_values(column))

    def student_evolution(self, student_id):
        return self.table.student_scores(student_id)

    def status_distribution(self):
        """Count and share of the class for every status, worst first."""
        class_summary = self._summary.class_summary
        rows = []
        for status in sorted(StatusCategory, key=lambda s: s.rank):
            count = class_summary.count_for(status)
            percent = 100.0 * count / class_summary.student_count if class_summary.student_count else 0.0
            rows.append({'status': status.value, 'count': count, 'percent_of_class': percent})
        return rows

    def subject_name(self):
        """Course name taken from the subject banner header, if there is one."""
        for header in self.description_headers:
            if header.strip().upper().startswith(SUBJECT_HEADER_PREFIX):
                return header.strip()[len(SUBJECT_HEADER_PREFIX):].strip()
        return None

    def evaluation_performance(self):
        """
        Scores of every evaluation as a percentage of its scale, with box-plot statistics.

        The scale is the evaluation's max_possible_score when fractions give one,
        otherwise its highest score (at least 1), so evaluations graded out of
        different totals can be compared side by side.
        """
        rows = []
        for j, evaluation in enumerate(self._summary.evaluations):
            values = np.asarray(included_values(self.table.column(j)), dtype=float)
            if evaluation.max_possible_score > 0:
                scale = evaluation.max_possible_score
            else:
                scale = max(float(np.max(values)) if values.size else 0.0, 1.0)
            percents = values / scale * 100.0

            if percents.size:
                q1, median, q3 = (float(p) for p in np.percentile(percents, [25, 50, 75]))
                mean = float(np.mean(percents))
            else:
                q1 = median = q3 = mean = 0.0

            rows.append({
                'id': evaluation.id,
                'name': evaluation.name,
                'scale': float(scale),
                'values': percents.tolist(),
                'q1': q1,
                'median': median,
                'q3': q3,
                'mean': mean,
            })
        return rows

    def students_frame(self):
        return pd.DataFrame([s.to_dict() for s in self._summary.students],
                            columns=['id', 'name', 'accumulated_score', 'percentile', 'std_dev', 'status'])

    def evaluations_frame(self):
        return pd.DataFrame([e.to_dict() for e in self._summary.evaluations],
                            columns=['id', 'name', 'average', 'std_dev', 'highest_score', 'lowest_score',
                                     'max_possible_score', 'evaluated_count', 'missing_count'])
