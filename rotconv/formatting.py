"""
Text formatting of rotation data for display.

Vectors are printed on a single line with a separator between the elements and matrices are printed as 3 rows.  Angles
in degrees are usually shown with 2 decimal places and angles in radians with 4 (see :func:`angle_digits`).
"""

from typing import Sequence

import numpy as np

from rotconv._typing import ARRAY_LIKE, ANGLE_UNIT
from rotconv.conversions.core._helpers import _check_matrix_array_and_shape, _check_unit


__all__ = ['DEFAULT_DIGITS', 'angle_digits', 'format_vector', 'format_matrix']


DEFAULT_DIGITS: int = 4
"""
The number of decimal places used when none is specified for an element.
"""


def angle_digits(unit: ANGLE_UNIT) -> int:
    """
    Returns the number of decimal places angles in `unit` are displayed with (2 for degrees, 4 for radians).

    :param unit: ``"deg"`` or ``"rad"``
    :return: the number of decimal places
    :raises InvalidUnit: if `unit` is not recognized
    """

    return 2 if _check_unit(unit, 'angle_digits') == 'deg' else DEFAULT_DIGITS


def format_vector(values: ARRAY_LIKE, digits: int | Sequence[int] = DEFAULT_DIGITS, sep: str = '\t') -> str:
    """
    Formats a sequence of numbers on a single line.

    `digits` is either the number of decimal places for every element or a sequence giving the number of decimal places
    element by element.  Elements past the end of the sequence use :data:`DEFAULT_DIGITS`.

    For example::

        >>> from rotconv.formatting import format_vector
        >>> format_vector([0, 0, 1, 90], [4, 4, 4, 2])
        '0.0000\\t0.0000\\t1.0000\\t90.00'

    :param values: the numbers to format
    :param digits: the decimal places for all or each of the elements
    :param sep: the string placed between elements
    :return: the formatted line
    """

    values = np.asarray(values, dtype=np.float64).ravel()

    if isinstance(digits, int):
        per_element = [digits] * values.size
    else:
        digits = list(digits)
        per_element = [digits[ind] if ind < len(digits) else DEFAULT_DIGITS for ind in range(values.size)]

    return sep.join('{:.{}f}'.format(value, places) for value, places in zip(values, per_element))


def format_matrix(matrix: ARRAY_LIKE, digits: int = DEFAULT_DIGITS) -> str:
    """
    Formats a 3x3 matrix as 3 lines, one per row, with 2 spaces between the columns.

    The matrix may be given as a 3x3 array indexed ``[row, column]`` or as 9 values in column-major order.

    :param matrix: the matrix to format
    :param digits: the number of decimal places
    :return: the formatted matrix
    """

    matrix = _check_matrix_array_and_shape(matrix)

    return '\n'.join(format_vector(row, digits, sep='  ') for row in matrix)
