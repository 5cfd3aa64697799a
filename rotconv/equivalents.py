# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`EquivalentsSolver` which takes a rotation in any one of the supported representations
and computes the other three, the way an interactive converter keeps all of its outputs in sync with a single edited
input.

Inputs are validated before they are converted.  A zero axis, a zero quaternion, or a matrix that is not a proper
rotation (see :func:`.is_valid_rotation_matrix`) is rejected.  Matrix inputs use the direct
:func:`.matrix_to_axis_angle` path so that 180 degree rotations keep an accurate axis; every other input goes
through the quaternion.

Example::

    >>> from rotconv.equivalents import EquivalentsSolver, EquivalentsOptions
    >>> solver = EquivalentsSolver(EquivalentsOptions(euler_unit='deg'))
    >>> result = solver.solve('axis-angle', [0, 0, 1, 90], unit='deg')
    >>> print(result.format()['euler'])
    90.00	0.00	0.00
"""

from dataclasses import dataclass

import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY, ANGLE_UNIT, EULER_ANGLES, REPRESENTATION
from rotconv.conversions.core._helpers import _check_unit, _to_radians, _from_radians
from rotconv.conversions.core.conversions import (quaternion_to_euler, quaternion_to_axis_angle, quaternion_to_matrix,
                                                  axis_angle_to_quaternion, euler_to_quaternion,
                                                  matrix_to_quaternion, matrix_to_axis_angle)
from rotconv.conversions.core.quaternion_math import quaternion_normalize
from rotconv.conversions.validation import MATRIX_TOLERANCE, validate_axis, validate_rotation_matrix
from rotconv.formatting import DEFAULT_DIGITS, angle_digits, format_vector, format_matrix
from rotconv.utilities.options import UserOptions
from rotconv.utilities.mixin_classes.user_option_configured import UserOptionConfigured


__all__ = ['REPRESENTATIONS', 'EquivalentsOptions', 'Equivalents', 'EquivalentsSolver']


REPRESENTATIONS: tuple[str, ...] = ('axis-angle', 'euler', 'quaternion', 'matrix')
"""
The names of the representations accepted by :meth:`EquivalentsSolver.solve`.
"""


@dataclass
class EquivalentsOptions(UserOptions):
    """
    Options for the :class:`EquivalentsSolver`.
    """

    input_unit: ANGLE_UNIT = 'deg'
    """
    The unit of the angles in axis-angle and Euler inputs when :meth:`EquivalentsSolver.solve` is not given one.
    """

    axis_angle_unit: ANGLE_UNIT = 'deg'
    """
    The unit the axis-angle angle is reported in.
    """

    euler_unit: ANGLE_UNIT = 'deg'
    """
    The unit the Euler angles are reported in.
    """

    matrix_tolerance: float = MATRIX_TOLERANCE
    """
    The tolerance used to decide whether an input matrix is a proper rotation matrix.
    """

    digits: int = DEFAULT_DIGITS
    """
    The number of decimal places used when formatting non-angle values.
    """

    def override_options(self):
        _check_unit(self.input_unit, 'EquivalentsOptions.input_unit')
        _check_unit(self.axis_angle_unit, 'EquivalentsOptions.axis_angle_unit')
        _check_unit(self.euler_unit, 'EquivalentsOptions.euler_unit')

        if self.matrix_tolerance <= 0:
            raise ValueError('matrix_tolerance must be positive')


@dataclass
class Equivalents:
    """
    A single rotation expressed in all four representations.
    """

    source: str
    """
    The representation the rotation was given in.
    """

    quaternion: DOUBLE_ARRAY
    """
    The unit quaternion ``[x, y, z, w]``.
    """

    matrix: DOUBLE_ARRAY
    """
    The 3x3 rotation matrix indexed ``[row, column]``.
    """

    axis: DOUBLE_ARRAY
    """
    The rotation axis.
    """

    angle: float
    """
    The rotation angle in :attr:`axis_angle_unit`.
    """

    euler: EULER_ANGLES
    """
    The intrinsic Z-Y-X Euler angles in :attr:`euler_unit`.
    """

    axis_angle_unit: ANGLE_UNIT = 'deg'

    euler_unit: ANGLE_UNIT = 'deg'

    digits: int = DEFAULT_DIGITS
    """
    The number of decimal places :meth:`format` uses for non-angle values by default.
    """

    def format(self, digits: int | None = None) -> dict[str, str]:
        """
        Formats each representation for display.

        Angles use the precision given by :func:`.angle_digits` for their unit; everything else uses `digits`.

        :param digits: the number of decimal places for non-angle values.  Defaults to :attr:`digits`.
        :return: a dictionary from representation name to its formatted text
        """

        if digits is None:
            digits = self.digits

        return {'axis-angle': format_vector(np.hstack([self.axis, self.angle]),
                                            [digits] * 3 + [angle_digits(self.axis_angle_unit)]),
                'euler': format_vector(self.euler, angle_digits(self.euler_unit)),
                'quaternion': format_vector(self.quaternion, digits),
                'matrix': format_matrix(self.matrix, digits)}


class EquivalentsSolver(UserOptionConfigured[EquivalentsOptions], EquivalentsOptions):
    """
    Computes all representations of a rotation from any single one.

    The solver is configured with :class:`EquivalentsOptions`.  Changing an option attribute on the instance takes
    effect on the next call to :meth:`solve`, and :meth:`reset_settings` restores the options the solver was created
    with.
    """

    def __init__(self, options: EquivalentsOptions | None = None):
        """
        :param options: the options to configure the solver with.  The defaults are used if ``None``.
        """

        super().__init__(EquivalentsOptions, options=options)

    def solve(self, kind: REPRESENTATION, values: ARRAY_LIKE, unit: ANGLE_UNIT | None = None) -> Equivalents:
        """
        Computes every representation of the rotation given by `values`.

        The expected `values` depend on `kind`:

        * ``"axis-angle"``: 4 values, the axis x, y, z followed by the angle
        * ``"euler"``: 3 values, alpha (about z), beta (about y), gamma (about x)
        * ``"quaternion"``: 4 values ``x, y, z, w``; they are normalized
        * ``"matrix"``: a 3x3 array or 9 values in column-major order

        :param kind: which representation `values` is
        :param values: the rotation data
        :param unit: the unit of the input angles for axis-angle and Euler inputs.  Defaults to :attr:`input_unit`.
                     Ignored for the other inputs.
        :return: the rotation in all four representations
        :raises ValueError: if `kind` is not recognized or `values` has the wrong size
        :raises InvalidUnit: if a unit is not recognized
        :raises InvalidAxis: for a zero axis
        :raises InvalidRotationMatrix: for a matrix that is not a proper rotation
        """

        if unit is None:
            unit = self.input_unit

        _check_unit(self.axis_angle_unit, 'EquivalentsSolver.solve')
        _check_unit(self.euler_unit, 'EquivalentsSolver.solve')

        if kind == 'axis-angle':
            return self._solve_axis_angle(values, unit)
        elif kind == 'euler':
            return self._solve_euler(values, unit)
        elif kind == 'quaternion':
            return self._solve_quaternion(values)
        elif kind == 'matrix':
            return self._solve_matrix(values)
        else:
            raise ValueError('Unknown representation {!r}.  Must be one of {}'.format(kind, ', '.join(REPRESENTATIONS)))

    def _solve_axis_angle(self, values: ARRAY_LIKE, unit: ANGLE_UNIT) -> Equivalents:
        values = _as_flat(values, 4, 'axis-angle')

        axis = validate_axis(values[:3])
        angle = values[3]

        quaternion = axis_angle_to_quaternion(axis, angle, unit)

        output_angle = _from_radians(_to_radians(angle, unit, 'EquivalentsSolver.solve'),
                                     self.axis_angle_unit, 'EquivalentsSolver.solve')

        return self._build('axis-angle', quaternion, quaternion_to_matrix(quaternion),
                           axis / np.linalg.norm(axis), output_angle,
                           quaternion_to_euler(quaternion, self.euler_unit))

    def _solve_euler(self, values: ARRAY_LIKE, unit: ANGLE_UNIT) -> Equivalents:
        alpha, beta, gamma = _as_flat(values, 3, 'euler')

        quaternion = euler_to_quaternion(alpha, beta, gamma, unit)

        euler = tuple(_from_radians(_to_radians(angle, unit, 'EquivalentsSolver.solve'),
                                    self.euler_unit, 'EquivalentsSolver.solve') for angle in (alpha, beta, gamma))

        axis, angle = quaternion_to_axis_angle(quaternion, self.axis_angle_unit)

        return self._build('euler', quaternion, quaternion_to_matrix(quaternion), axis, angle, euler)

    def _solve_quaternion(self, values: ARRAY_LIKE) -> Equivalents:
        values = _as_flat(values, 4, 'quaternion')

        if not values.any():
            raise ValueError('Invalid quaternion: zero length')

        quaternion = quaternion_normalize(values)

        axis, angle = quaternion_to_axis_angle(quaternion, self.axis_angle_unit)

        return self._build('quaternion', quaternion, quaternion_to_matrix(quaternion), axis, angle,
                           quaternion_to_euler(quaternion, self.euler_unit))

    def _solve_matrix(self, values: ARRAY_LIKE) -> Equivalents:
        matrix = validate_rotation_matrix(values, self.matrix_tolerance)

        quaternion = matrix_to_quaternion(matrix)

        axis, angle = matrix_to_axis_angle(matrix, self.axis_angle_unit)

        return self._build('matrix', quaternion, matrix, axis, angle, quaternion_to_euler(quaternion, self.euler_unit))

    def _build(self, source: str, quaternion: DOUBLE_ARRAY, matrix: DOUBLE_ARRAY, axis: DOUBLE_ARRAY, angle: float,
               euler: EULER_ANGLES) -> Equivalents:
        return Equivalents(source=source, quaternion=quaternion, matrix=matrix, axis=axis, angle=angle,
                           euler=euler, axis_angle_unit=self.axis_angle_unit, euler_unit=self.euler_unit,
                           digits=self.digits)


def _as_flat(values: ARRAY_LIKE, size: int, kind: str) -> DOUBLE_ARRAY:
    values = np.asarray(values, dtype=np.float64).ravel()

    if values.size != size:
        raise ValueError('{} input requires {} values, got {}'.format(kind, size, values.size))

    return values
