"""
Checks for caller supplied rotation data.

The conversion routines in :mod:`rotconv.conversions.core` trust their matrix inputs.  The functions here let a caller
(a form, a script, a file reader) reject bad data before it reaches them.
"""

import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY
from rotconv.conversions.core._helpers import _check_matrix_array_and_shape, _check_vector_array_and_shape
from rotconv.exceptions import InvalidAxis, InvalidRotationMatrix


__all__ = ['MATRIX_TOLERANCE', 'is_valid_rotation_matrix', 'validate_rotation_matrix', 'validate_axis']


MATRIX_TOLERANCE: float = 1e-3
"""
The default allowed deviation of :math:`\\mathbf{T}^T\\mathbf{T}` from the identity and of the determinant from 1.
"""


def is_valid_rotation_matrix(matrix: ARRAY_LIKE, tolerance: float = MATRIX_TOLERANCE) -> bool:
    r"""
    Checks that a matrix is a proper rotation matrix.

    A proper rotation matrix satisfies :math:`\mathbf{T}^T\mathbf{T}=\mathbf{I}` and :math:`|\mathbf{T}|=1`.  Each
    element of :math:`\mathbf{T}^T\mathbf{T}` must be within `tolerance` of the identity and the determinant must be
    within `tolerance` of 1.  Matrices with the wrong shape or with non finite elements are reported as invalid.

    The matrix may be given as a 3x3 array indexed ``[row, column]`` or as 9 values in column-major order.

    :param matrix: The matrix to check
    :param tolerance: The allowed deviation
    :return: ``True`` if the matrix is a rotation matrix
    """

    try:
        matrix = _check_matrix_array_and_shape(matrix)
    except (ValueError, TypeError):
        return False

    if not np.isfinite(matrix).all():
        return False

    if not np.allclose(matrix.T @ matrix, np.eye(3), rtol=0, atol=tolerance):
        return False

    return bool(abs(np.linalg.det(matrix) - 1) <= tolerance)


def validate_rotation_matrix(matrix: ARRAY_LIKE, tolerance: float = MATRIX_TOLERANCE) -> DOUBLE_ARRAY:
    """
    Returns the matrix as a 3x3 float array if it is a proper rotation matrix.

    See :func:`is_valid_rotation_matrix` for the checks performed.

    :param matrix: The matrix to check
    :param tolerance: The allowed deviation
    :return: The 3x3 matrix indexed ``[row, column]``
    :raises InvalidRotationMatrix: if the matrix is not a rotation matrix
    """

    if not is_valid_rotation_matrix(matrix, tolerance):
        raise InvalidRotationMatrix('Invalid rotation matrix: it must be orthonormal with a determinant of +1 '
                                    '(tolerance {:g})'.format(tolerance))

    return _check_matrix_array_and_shape(matrix)


def validate_axis(axis: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the axis as a length 3 float array if it is not the zero vector.

    The axis is not normalized.

    :param axis: The rotation axis
    :return: The axis as an array
    :raises InvalidAxis: if the axis is the zero vector
    """

    axis = _check_vector_array_and_shape(axis)

    if not axis.any():
        raise InvalidAxis('Invalid axis: zero vector')

    return axis
