# tests/test_table.py

import logging
import math

import pytest

from grade_insight.grades import Absent, Numeric
from grade_insight.table import EvaluationIdentity, StudentIdentity, Table


def test_table_shape(sample_table):
    assert sample_table.student_count == 3
    assert sample_table.evaluation_count == 3
    assert all(len(row) == 3 for row in sample_table.grades)


def test_short_rows_are_padded_with_absent():
    table = Table(
        [StudentIdentity('s1', 'Ana'), StudentIdentity('s2', 'Bruno')],
        [EvaluationIdentity('e1', 'Quiz'), EvaluationIdentity('e2', 'Examen')],
        [[Numeric(10.0)]],
    )

    assert table.grades[0] == (Numeric(10.0), Absent())
    assert table.grades[1] == (Absent(), Absent())


def test_long_rows_are_truncated():
    table = Table.from_rows(['Ana'], ['Quiz'], [[10, 20, 30]])

    assert table.grades == ((Numeric(10.0),),)


def test_from_rows_numbers_ids():
    table = Table.from_rows(['Ana', 'Bruno'], ['Quiz'], [[10], [None]])

    assert table.students[1] == StudentIdentity('1', 'Bruno')
    assert table.evaluations[0] == EvaluationIdentity('0', 'Quiz')
    assert table.grades[1][0] == Absent()


def test_cell_lookup(sample_table):
    assert sample_table.cell('2021001', 'e1') == Numeric(30.0)

    with pytest.raises(KeyError):
        sample_table.cell('missing', 'e1')


def test_student_scores(sample_table):
    scores = sample_table.student_scores('2021002')

    assert [(evaluation.name, score) for evaluation, score in scores] == [
        ('Parcial 1', 20.0),
        ('Tarea 1', 0.0),
        ('Laboratorio', 0.0),
    ]


def test_student_scores_keep_evaluations_with_the_same_name():
    table = Table.from_rows(['Ana'], ['Tarea', 'Tarea'], [[10.0, 20.0]])

    scores = table.student_scores('0')

    assert [(evaluation.id, score) for evaluation, score in scores] == [('0', 10.0), ('1', 20.0)]


def test_find_students(sample_table):
    assert [s.id for s in sample_table.find_students('bruno')] == ['2021002']
    assert [s.id for s in sample_table.find_students('2021')] == ['2021001', '2021002', '2021003']
    assert sample_table.find_students('zzz') == []


def test_to_frame(sample_table):
    frame = sample_table.to_frame()

    assert list(frame.columns) == ['Parcial 1', 'Tarea 1', 'Laboratorio']
    assert frame.loc['Ana Lopez', 'Tarea 1'] == 18.0
    assert math.isnan(frame.loc['Bruno Diaz', 'Tarea 1'])
    assert frame.loc['Carla Mejia', 'Parcial 1'] == 0.0


def test_to_dict(sample_table):
    data = sample_table.to_dict()

    assert data['students'][0] == {'id': '2021001', 'name': 'Ana Lopez'}
    assert data['grades'][1][2] == {'status': 'Label', 'value': 'NSP'}


def test_empty_table():
    table = Table()

    assert table.student_count == 0
    assert table.to_frame().empty


def test_ragged_rows_log_a_warning(caplog):
    with caplog.at_level(logging.WARNING, logger='grade_insight.table'):
        Table.from_rows(['Ana', 'Bruno'], ['Quiz', 'Examen'], [[10.0], [5.0, 6.0, 7.0]])

    messages = [record.getMessage() for record in caplog.records]
    assert 'Row for student 0 has 1 cells, expected 2; repairing' in messages
    assert 'Row for student 1 has 3 cells, expected 2; repairing' in messages


def test_extra_rows_are_dropped_with_a_warning(caplog):
    with caplog.at_level(logging.WARNING, logger='grade_insight.table'):
        table = Table.from_rows(['Ana'], ['Quiz'], [[10.0], [20.0], [30.0]])

    assert table.grades == ((Numeric(10.0),),)
    assert 'Dropping 2 grade rows without a student' in caplog.text
