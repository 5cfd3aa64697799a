import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rotconv.exceptions import InvalidUnit


_UNITS = ('deg', 'rad')


def _check_array_and_shape(values: ARRAY_LIKE, shape: tuple[int, ...], name: str) -> DOUBLE_ARRAY:
    """
    Copies `values` into a new float64 array and checks that it holds exactly one `name` of the given shape.

    The result never shares memory with `values`, so it can be modified or returned freely.
    """

    array = np.array(values, dtype=np.float64)

    if array.shape != shape:
        raise ValueError('A {} must have shape {}, got {}.  Only a single rotation may be converted at a '
                         'time'.format(name, shape, array.shape))

    return array


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, (4,), 'quaternion')


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, (3,), 'vector')


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Accepts either a 3x3 matrix indexed [row, column] or 9 values stored in column-major order.
    """

    if np.ndim(matrix) == 1 and np.size(matrix) == 9:
        return _check_array_and_shape(matrix, (9,), 'matrix').reshape(3, 3, order='F')

    return _check_array_and_shape(matrix, (3, 3), 'matrix')


def _check_unit(unit: object, caller: str) -> str:
    if not isinstance(unit, str) or unit not in _UNITS:
        raise InvalidUnit(unit, caller)
    return unit


def _to_radians(angle: float, unit: object, caller: str) -> float:
    if _check_unit(unit, caller) == 'deg':
        return float(np.deg2rad(angle))
    return float(angle)


def _from_radians(angle: float, unit: object, caller: str) -> float:
    if _check_unit(unit, caller) == 'deg':
        return float(np.rad2deg(angle))
    return float(angle)
