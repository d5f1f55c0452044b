# tests/conftest.py

import pytest

from grade_insight.grades import Absent, Fraction, Label, Numeric, Withdrawn
from grade_insight.summary import GradeAnalyzer
from grade_insight.table import EvaluationIdentity, StudentIdentity, Table


@pytest.fixture
def sample_table():
    students = [
        StudentIdentity('2021001', 'Ana Lopez'),
        StudentIdentity('2021002', 'Bruno Diaz'),
        StudentIdentity('2021003', 'Carla Mejia'),
    ]
    evaluations = [
        EvaluationIdentity('e1', 'Parcial 1'),
        EvaluationIdentity('e2', 'Tarea 1'),
        EvaluationIdentity('e3', 'Laboratorio'),
    ]
    grades = [
        [Numeric(30.0), Fraction(18.0, 20.0), Numeric(25.0)],
        [Numeric(20.0), Absent(), Label('NSP')],
        [Numeric(0.0), Fraction(10.0, 20.0), Withdrawn()],
    ]
    return Table(students, evaluations, grades)


@pytest.fixture
def end_to_end_table():
    # Two evaluations whose sums are 95, 82, 61, 45 and 30
    return Table.from_rows(
        ['Ana', 'Bruno', 'Carla', 'Diego', 'Elena'],
        ['Primer corte', 'Segundo corte'],
        [
            [50.0, 45.0],
            [40.0, 42.0],
            [31.0, 30.0],
            [25.0, 20.0],
            [30.0, None],
        ],
    )


@pytest.fixture
def sample_analyzer(end_to_end_table):
    return GradeAnalyzer(
        end_to_end_table,
        description_headers=['UNIVERSIDAD CENTROAMERICANA', 'ASIGNATURA: Calculo I'],
    )


@pytest.fixture
def empty_analyzer():
    return GradeAnalyzer(Table())
