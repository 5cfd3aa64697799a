# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Rotation` class, a single rotation that can be built from and read out as any of the
four supported representations.
"""

import copy

import warnings

import numpy as np

from rotconv.conversions.core.conversions import (quaternion_to_euler, quaternion_to_axis_angle, quaternion_to_matrix,
                                                  axis_angle_to_quaternion, euler_to_quaternion, matrix_to_quaternion)
from rotconv.conversions.core.quaternion_math import (quaternion_inverse, quaternion_multiplication,
                                                      quaternion_normalize, quaternions_equivalent)

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY, ANGLE_UNIT, AXIS_ANGLE, EULER_ANGLES


_UNIT_TOLERANCE = 1e-12
"""
How far from 1 the length of a quaternion may be before it is reported as non-unit.
"""


class Rotation:
    """
    A rotation stored as a unit quaternion ``[x, y, z, w]``.

    The quaternion is the hub every conversion in :mod:`rotconv.conversions.core` passes through, so every read out is
    a single conversion away.  ``Rotation(data)`` decides what `data` is from its size: 4 values are a quaternion and
    9 values are a rotation matrix (3x3, or flat in column-major order).  Giving another :class:`Rotation` makes a
    copy of it and giving nothing makes the identity.  The ``from_*`` class methods say what the input is explicitly.

    :attr:`matrix` is computed on first access and kept until the quaternion changes.

    Rotations compose with ``*`` the same way their matrices multiply::

        >>> from rotconv import Rotation
        >>> yaw = Rotation.from_euler(90, 0, 0, 'deg')
        >>> roll = Rotation.from_euler(0, 0, 90, 'deg')
        >>> [round(angle, 6) for angle in (yaw * roll).as_euler('deg')]
        [90.0, 0.0, 90.0]

    No sign convention is imposed on the stored quaternion, so ``==`` treats ``q`` and ``-q`` as equal.
    """

    def __init__(self, data: 'ARRAY_LIKE | Rotation | None' = None):
        """
        :param data: A quaternion, a rotation matrix, another rotation, or ``None`` for the identity
        :raises ValueError: if `data` is not 4 or 9 values or is the zero quaternion
        """

        self._quaternion = np.array([0, 0, 0, 1.0])
        self._matrix: DOUBLE_ARRAY | None = None
        self._mupdate = True

        if isinstance(data, Rotation):
            self.quaternion = data.quaternion
            return

        if data is None:
            return

        values = np.asarray(data, dtype=np.float64)

        if values.size == 4:
            self.quaternion = values
        elif values.size == 9:
            self.matrix = values
        else:
            raise ValueError('Cannot interpret {} values as a rotation.  Give a quaternion (4) or a matrix '
                             '(9)'.format(values.size))

    @classmethod
    def from_quaternion(cls, quaternion: ARRAY_LIKE) -> 'Rotation':
        """
        :param quaternion: ``[x, y, z, w]``
        :return: The rotation
        """

        out = cls()
        out.quaternion = quaternion
        return out

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE) -> 'Rotation':
        """
        The matrix is not validated; see :func:`.validate_rotation_matrix`.

        :param matrix: 3x3 indexed ``[row, column]`` or 9 values in column-major order
        :return: The rotation
        """

        out = cls()
        out.matrix = matrix
        return out

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: float, unit: ANGLE_UNIT) -> 'Rotation':
        """
        See :func:`.axis_angle_to_quaternion`.

        :param axis: The rotation axis (need not be unit length)
        :param angle: The rotation angle
        :param unit: ``"deg"`` or ``"rad"``
        :return: The rotation
        :raises InvalidUnit: if `unit` is not recognized
        :raises InvalidAxis: if `axis` is the zero vector
        """

        return cls.from_quaternion(axis_angle_to_quaternion(axis, angle, unit))

    @classmethod
    def from_euler(cls, alpha: float, beta: float, gamma: float, unit: ANGLE_UNIT) -> 'Rotation':
        """
        See :func:`.euler_to_quaternion`.

        :param alpha: The rotation about z
        :param beta: The rotation about y
        :param gamma: The rotation about x
        :param unit: ``"deg"`` or ``"rad"``
        :return: The rotation
        :raises InvalidUnit: if `unit` is not recognized
        """

        return cls.from_quaternion(euler_to_quaternion(alpha, beta, gamma, unit))

    @property
    def quaternion(self) -> DOUBLE_ARRAY:
        """
        The unit quaternion ``[x, y, z, w]``.

        Setting it with a quaternion that is not unit length stores the normalized quaternion and warns.  The zero
        quaternion is not a rotation and raises a ``ValueError``.
        """

        return self._quaternion

    @quaternion.setter
    def quaternion(self, data: 'ARRAY_LIKE | Rotation'):

        if isinstance(data, Rotation):
            data = data.quaternion

        values = np.array(data, dtype=np.float64).ravel()

        if values.size != 4:
            raise ValueError('A quaternion has 4 values, got {}'.format(values.size))

        length = np.linalg.norm(values)

        if length == 0:
            raise ValueError('The zero quaternion does not represent a rotation')

        if abs(1 - length) > _UNIT_TOLERANCE:
            warnings.warn('Quaternion length is {:.6g}, not 1.  Normalizing it'.format(length))

        self._quaternion = quaternion_normalize(values)
        self._mupdate = True

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The 3x3 rotation matrix indexed ``[row, column]``.

        Setting it converts the matrix to the stored quaternion (see :func:`.matrix_to_quaternion`).
        """

        if self._mupdate:
            self._matrix = quaternion_to_matrix(self._quaternion)
            self._mupdate = False

        assert self._matrix is not None
        return self._matrix

    @matrix.setter
    def matrix(self, val: ARRAY_LIKE):

        self.quaternion = matrix_to_quaternion(val)

        self._matrix = quaternion_to_matrix(self._quaternion)
        self._mupdate = False

    @property
    def q_vector(self) -> DOUBLE_ARRAY:
        """
        The vector part ``[x, y, z]`` of the quaternion (read only)
        """

        return self._quaternion[:3]

    @property
    def q_scalar(self) -> float:
        """
        The scalar part ``w`` of the quaternion (read only)
        """

        return float(self._quaternion[-1])

    def as_axis_angle(self, unit: ANGLE_UNIT) -> AXIS_ANGLE:
        """
        See :func:`.quaternion_to_axis_angle`.

        :param unit: ``"deg"`` or ``"rad"``
        :return: The unit axis and the angle
        """

        return quaternion_to_axis_angle(self._quaternion, unit)

    def as_euler(self, unit: ANGLE_UNIT) -> EULER_ANGLES:
        """
        See :func:`.quaternion_to_euler` for the order of the angles.

        :param unit: ``"deg"`` or ``"rad"``
        :return: The three Z-Y-X angles
        """

        return quaternion_to_euler(self._quaternion, unit)

    def inv(self) -> 'Rotation':
        """
        :return: A new rotation undoing this one
        """

        return Rotation(quaternion_inverse(self._quaternion))

    def __eq__(self, other) -> bool:

        if not isinstance(other, Rotation):
            try:
                other = Rotation(other)
            except ValueError:
                return False

        return quaternions_equivalent(self._quaternion, other.quaternion)

    def __mul__(self, other: 'Rotation') -> 'Rotation':

        if not isinstance(other, Rotation):
            return NotImplemented

        return Rotation(quaternion_multiplication(self._quaternion, other.quaternion))

    def __repr__(self) -> str:
        return '{}({!r})'.format(type(self).__name__, self._quaternion)

    def __str__(self) -> str:
        return str(self._quaternion)

    def copy(self) -> 'Rotation':
        """
        :return: An independent copy
        """

        return copy.deepcopy(self)
