import logging
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from .grades import Absent, cell_to_dict, coerce_cell, contribution, numeric_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StudentIdentity:
    id: str
    name: str


@dataclass(frozen=True)
class EvaluationIdentity:
    id: str
    name: str


@dataclass(frozen=True)
class Table:
    """
    The parsed roster: students x evaluations grid of grade cells.

    The grid is always rectangular. Short rows are padded with Absent and
    long rows are truncated, so grades[i] has one cell per evaluation.
    """
    students: tuple = field(default_factory=tuple)
    evaluations: tuple = field(default_factory=tuple)
    grades: tuple = field(default_factory=tuple)

    def __post_init__(self):
        students = tuple(self.students)
        evaluations = tuple(self.evaluations)
        width = len(evaluations)

        rows = []
        for i, student in enumerate(students):
            raw = list(self.grades[i]) if i < len(self.grades) else []
            if len(raw) != width:
                logger.warning('Row for student %s has %d cells, expected %d; repairing',
                               student.id, len(raw), width)
            raw = raw[:width] + [Absent()] * (width - len(raw))
            rows.append(tuple(coerce_cell(value) for value in raw))

        if len(self.grades) > len(students):
            logger.warning('Dropping %d grade rows without a student',
                           len(self.grades) - len(students))

        object.__setattr__(self, 'students', students)
        object.__setattr__(self, 'evaluations', evaluations)
        object.__setattr__(self, 'grades', tuple(rows))

    @classmethod
    def from_rows(cls, student_names, evaluation_names, rows):
        """Build a table from names and rows of cells, numbers or None, numbering ids from 0."""
        students = [StudentIdentity(str(i), name) for i, name in enumerate(student_names)]
        evaluations = [EvaluationIdentity(str(j), name) for j, name in enumerate(evaluation_names)]
        return cls(students, evaluations, [list(row) for row in rows])

    # --- shape ---

    @property
    def student_count(self):
        return len(self.students)

    @property
    def evaluation_count(self):
        return len(self.evaluations)

    # --- lookups ---

    def student_index(self, student_id):
        for i, student in enumerate(self.students):
            if student.id == student_id:
                return i
        raise KeyError(f'Unknown student: {student_id}')

    def evaluation_index(self, evaluation_id):
        for j, evaluation in enumerate(self.evaluations):
            if evaluation.id == evaluation_id:
                return j
        raise KeyError(f'Unknown evaluation: {evaluation_id}')

    def cell(self, student_id, evaluation_id):
        return self.grades[self.student_index(student_id)][self.evaluation_index(evaluation_id)]

    def column(self, evaluation_index):
        return [row[evaluation_index] for row in self.grades]

    def student_scores(self, student_id):
        """(evaluation, score) pairs for one student in column order, with missing cells shown as 0."""
        row = self.grades[self.student_index(student_id)]
        return [(evaluation, contribution(cell))
                for evaluation, cell in zip(self.evaluations, row)]

    def find_students(self, query):
        """Students whose id or name contains the query, ignoring case."""
        needle = query.strip().lower()
        return [student for student in self.students
                if needle in student.id.lower() or needle in student.name.lower()]

    # --- views ---

    def to_frame(self):
        """Numeric projection as a DataFrame (students x evaluations, NaN for missing)."""
        data = []
        for row in self.grades:
            values = [numeric_value(cell) for cell in row]
            data.append([np.nan if value is None else value for value in values])
        return pd.DataFrame(
            data,
            index=pd.Index([s.name for s in self.students], name='student'),
            columns=[e.name for e in self.evaluations],
            dtype=float,
        )

    def to_dict(self):
        return {
            'students': [{'id': s.id, 'name': s.name} for s in self.students],
            'evaluations': [{'id': e.id, 'name': e.name} for e in self.evaluations],
            'grades': [[cell_to_dict(cell) for cell in row] for row in self.grades],
        }
