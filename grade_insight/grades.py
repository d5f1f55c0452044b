"""
Grade cells: the tagged representation of one raw score entry.

A cell is exactly one of Numeric, Fraction, Absent, Withdrawn or Label.
Consumers never inspect the tag themselves; they go through numeric_value()
and is_missing() so every part of the analysis projects cells the same way.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Numeric:
    value: float

    @property
    def status(self):
        return 'Numeric'


@dataclass(frozen=True)
class Fraction:
    obtained: float
    possible: float

    @property
    def status(self):
        return 'Fraction'

    @property
    def is_valid(self):
        return math.isfinite(self.obtained) and math.isfinite(self.possible) and self.possible > 0


@dataclass(frozen=True)
class Absent:
    @property
    def status(self):
        return 'Absent'


@dataclass(frozen=True)
class Withdrawn:
    @property
    def status(self):
        return 'Withdrawn'


@dataclass(frozen=True)
class Label:
    text: str

    @property
    def status(self):
        return 'Label'


GRADE_CELL_TYPES = (Numeric, Fraction, Absent, Withdrawn, Label)


def numeric_value(cell):
    """Numeric contribution of a cell, or None when it is excluded from aggregation."""
    if isinstance(cell, Numeric):
        if not math.isfinite(cell.value):
            return None
        return float(cell.value)
    if isinstance(cell, Fraction):
        if not cell.is_valid:
            return None
        return float(cell.obtained)
    return None


def is_missing(cell):
    return numeric_value(cell) is None


def contribution(cell):
    """Value used when summing a row: missing cells count as 0."""
    value = numeric_value(cell)
    return 0.0 if value is None else value


def possible_points(cell):
    """Maximum points of a valid Fraction, otherwise None."""
    if isinstance(cell, Fraction) and cell.is_valid:
        return float(cell.possible)
    return None


def coerce_cell(value):
    """
    Turn a plain Python value into a grade cell.

    Cells pass through unchanged, numbers become Numeric, None, NaN and infinity become
    Absent, (obtained, possible) pairs become Fraction and strings become Label.
    """
    if isinstance(value, GRADE_CELL_TYPES):
        if isinstance(value, Fraction) and not value.is_valid:
            logger.warning('Fraction %s/%s is not a valid score; treated as missing',
                           value.obtained, value.possible)
        if isinstance(value, Numeric) and not math.isfinite(value.value):
            logger.warning('Score %s is not a finite number; treated as missing', value.value)
        return value
    if value is None:
        return Absent()
    if isinstance(value, bool):
        raise TypeError(f'Cannot use a boolean as a grade: {value!r}')
    if isinstance(value, Real):
        if not math.isfinite(value):
            return Absent()
        return Numeric(float(value))
    if isinstance(value, tuple) and len(value) == 2:
        return coerce_cell(Fraction(float(value[0]), float(value[1])))
    if isinstance(value, str):
        return Label(value)
    raise TypeError(f'Cannot interpret {value!r} as a grade cell')


def cell_to_dict(cell):
    """JSON-shaped form: {'status': tag, 'value': payload}."""
    if isinstance(cell, Numeric):
        return {'status': cell.status, 'value': cell.value}
    if isinstance(cell, Fraction):
        return {'status': cell.status,
                'value': {'obtained': cell.obtained, 'possible': cell.possible}}
    if isinstance(cell, Label):
        return {'status': cell.status, 'value': cell.text}
    return {'status': cell.status, 'value': None}
