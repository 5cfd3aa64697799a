# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Core conversion routines for rotation representations

This module contains the routines for converting between the four rotation representations handled by this package
(see :ref:`Rotation Representations <rotation-representation-table>`).  All routines are implemented purely on numpy
arrays (or array like objects), convert a single rotation per call, and return freshly allocated results.  Inputs are
never modified; where a quaternion needs to be normalized a copy is normalized instead.

The quaternion is the hub representation: every conversion goes through it except axis-angle to/from rotation matrix,
which is also provided directly (:func:`matrix_to_axis_angle`, :func:`axis_angle_to_matrix`) so that rotations near
180 degrees can be handled precisely.

Every routine that consumes or produces an angle takes a ``unit`` selector that must be exactly ``"deg"`` or ``"rad"``.
Anything else raises :class:`.InvalidUnit`.

.. warning::
    :func:`matrix_to_quaternion` and :func:`matrix_to_axis_angle` do not check that the input matrix is a proper
    rotation matrix.  A matrix that is not orthonormal with a determinant of +1 produces finite but meaningless results.
    Use :func:`.validate_rotation_matrix` first when the matrix comes from an untrusted source.
"""

import warnings

import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY, ANGLE_UNIT, AXIS_ANGLE, EULER_ANGLES

from rotconv.conversions.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                               _check_vector_array_and_shape, _check_unit, _to_radians, _from_radians)
from rotconv.conversions.core.elementals import skew
from rotconv.conversions.core.quaternion_math import quaternion_normalize
from rotconv.exceptions import InvalidAxis


__all__ = ['quaternion_to_euler', 'quaternion_to_axis_angle', 'quaternion_to_matrix',
           'axis_angle_to_quaternion', 'axis_angle_to_matrix',
           'euler_to_quaternion', 'euler_to_matrix',
           'matrix_to_quaternion', 'matrix_to_axis_angle', 'matrix_to_euler',
           'matrix_from_column_major', 'matrix_to_column_major',
           'DEFAULT_AXIS']


DEFAULT_AXIS: tuple[float, float, float] = (1.0, 0.0, 0.0)
"""
The axis reported for rotations whose axis is undefined (angles of zero).
"""

_AXIS_EPSILON = 1e-6
"""
Below this value of sin(theta/2) the rotation axis of a quaternion is considered undefined.
"""

_ANGLE_EPSILON = 1e-6
"""
Tolerance on the angle (radians) used to detect the identity and 180 degree special cases from a matrix.
"""


def quaternion_to_euler(quaternion: ARRAY_LIKE, unit: ANGLE_UNIT) -> EULER_ANGLES:
    r"""
    This function converts a rotation quaternion into intrinsic Z-Y-X Tait-Bryan angles.

    The angles are computed as

    .. math::
        \alpha = \text{atan2}(2(q_sq_x+q_yq_z), 1-2(q_x^2+q_y^2)) \\
        \beta = \text{sin}^{-1}(2(q_sq_y-q_zq_x)) \\
        \gamma = \text{atan2}(2(q_sq_z+q_xq_y), 1-2(q_y^2+q_z^2))

    where :math:`\alpha` is the rotation about the x axis, :math:`\beta` the rotation about the y axis, and
    :math:`\gamma` the rotation about the z axis.  When the argument of the arcsine reaches or overshoots
    :math:`\pm 1` (gimbal lock) :math:`\beta` is set to :math:`\pm\pi/2` using the sign of the argument so that no NaN is
    produced.

    .. note::
        The result is returned in Z-Y-X order, that is ``(gamma, beta, alpha)`` in the naming above.  This is the same
        order :func:`euler_to_quaternion` expects its angles in (first the z angle, last the x angle), so the output of
        this function can be fed straight back into it.

    The quaternion is assumed to already be unit length; it is not renormalized here.

    :param quaternion: The rotation quaternion ``[x, y, z, w]``
    :param unit: ``"deg"`` or ``"rad"``, the unit to return the angles in
    :return: The three Euler angles in Z-Y-X order
    :raises InvalidUnit: if `unit` is not recognized
    """

    _check_unit(unit, 'quaternion_to_euler')

    x, y, z, w = _check_quaternion_array_and_shape(quaternion)

    # rotation about x
    sinr_cosp = 2 * (w * x + y * z)
    cosr_cosp = 1 - 2 * (x * x + y * y)
    alpha = np.arctan2(sinr_cosp, cosr_cosp)

    # rotation about y, clamped at the gimbal lock boundary
    sinp = 2 * (w * y - z * x)
    if abs(sinp) >= 1:
        beta = np.sign(sinp) * np.pi / 2
    else:
        beta = np.arcsin(sinp)

    # rotation about z
    siny_cosp = 2 * (w * z + x * y)
    cosy_cosp = 1 - 2 * (y * y + z * z)
    gamma = np.arctan2(siny_cosp, cosy_cosp)

    return (_from_radians(gamma, unit, 'quaternion_to_euler'),
            _from_radians(beta, unit, 'quaternion_to_euler'),
            _from_radians(alpha, unit, 'quaternion_to_euler'))


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE, unit: ANGLE_UNIT) -> AXIS_ANGLE:
    r"""
    This function converts a rotation quaternion into a rotation axis and angle.

    The quaternion is first normalized (a copy is normalized, the input is left alone) and then

    .. math::
        \theta = 2\text{cos}^{-1}(q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\text{sin}(\theta/2)}

    When :math:`\text{sin}(\theta/2)` is below 1e-6 the axis is undefined and :data:`DEFAULT_AXIS` ``(1, 0, 0)`` is
    returned instead.  The angle lies in :math:`[0, 2\pi]`; no sign convention is imposed on the quaternion so a
    negative scalar part yields an angle above :math:`\pi`.

    A zero quaternion cannot be normalized.  It is treated as the identity rotation and a warning is issued.

    :param quaternion: The rotation quaternion ``[x, y, z, w]``
    :param unit: ``"deg"`` or ``"rad"``, the unit to return the angle in
    :return: The unit rotation axis as a length 3 array and the rotation angle
    :raises InvalidUnit: if `unit` is not recognized
    """

    _check_unit(unit, 'quaternion_to_axis_angle')

    quaternion = _check_quaternion_array_and_shape(quaternion)

    if not quaternion.any():
        warnings.warn('A zero quaternion was supplied.  Treating it as the identity rotation')
        return np.array(DEFAULT_AXIS), 0.0

    quaternion = quaternion_normalize(quaternion)

    # the clip guards arccos against rounding just outside of [-1, 1]
    angle = 2 * np.arccos(np.clip(quaternion[-1], -1, 1))

    sin_half = np.sin(angle / 2)

    if sin_half > _AXIS_EPSILON:
        axis = quaternion[:3] / sin_half
    else:
        axis = np.array(DEFAULT_AXIS)

    return axis, _from_radians(angle, unit, 'quaternion_to_axis_angle')


def quaternion_to_matrix(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v \\ q_s\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`).

    If the vector portion of the quaternion is exactly zero the identity matrix is returned without normalizing, which
    keeps an all zero quaternion from being divided by its zero length.  Otherwise a normalized copy of the quaternion
    is used.

    For example::

        >>> from rotconv import quaternion_to_matrix
        >>> from numpy import sqrt
        >>> quaternion_to_matrix([0, 0, sqrt(2)/2, sqrt(2)/2]).round(12)
        array([[ 0., -1.,  0.],
               [ 1.,  0.,  0.],
               [ 0.,  0.,  1.]])

    :param quaternion: The rotation quaternion ``[x, y, z, w]``
    :return: The 3x3 rotation matrix indexed ``[row, column]``
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    if quaternion[0] == quaternion[1] == quaternion[2] == 0:
        if quaternion[3] == 0:
            warnings.warn('A zero quaternion was supplied.  Returning the identity matrix')
        return np.eye(3)

    quaternion = quaternion_normalize(quaternion)

    # extract the scalar and vector portion of the quaternion
    qs = quaternion[-1]
    qv = quaternion[:3]

    # form and return the rotation matrix
    return (qs ** 2 - qv @ qv) * np.eye(3) + 2 * np.outer(qv, qv) + 2 * qs * skew(qv)


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: float, unit: ANGLE_UNIT) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation quaternion.

    The axis does not need to be unit length; it is normalized first.  The quaternion is then formed by

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    and normalized once more to remove rounding error.

    :param axis: The rotation axis as 3 values
    :param angle: The rotation angle
    :param unit: ``"deg"`` or ``"rad"``, the unit of `angle`
    :return: The unit rotation quaternion ``[x, y, z, w]``
    :raises InvalidUnit: if `unit` is not recognized
    :raises InvalidAxis: if `axis` is the zero vector
    """

    theta = _to_radians(angle, unit, 'axis_angle_to_quaternion')

    unit_axis = _normalize_axis(axis, 'axis_angle_to_quaternion')

    half_angle = theta / 2

    return quaternion_normalize(np.hstack([np.sin(half_angle) * unit_axis, np.cos(half_angle)]))


def axis_angle_to_matrix(axis: ARRAY_LIKE, angle: float, unit: ANGLE_UNIT) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle directly into a rotation matrix.

    The matrix is computed according to:

    .. math::
        \mathbf{T} = \text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\left[\hat{\mathbf{x}}\times\right]+
        (1-\text{cos}(\theta))\hat{\mathbf{x}}\hat{\mathbf{x}}^T

    where :math:`\hat{\mathbf{x}}` is the normalized axis.  The result agrees with
    ``quaternion_to_matrix(axis_angle_to_quaternion(axis, angle, unit))`` to within rounding.

    :param axis: The rotation axis as 3 values
    :param angle: The rotation angle
    :param unit: ``"deg"`` or ``"rad"``, the unit of `angle`
    :return: The 3x3 rotation matrix indexed ``[row, column]``
    :raises InvalidUnit: if `unit` is not recognized
    :raises InvalidAxis: if `axis` is the zero vector
    """

    theta = _to_radians(angle, unit, 'axis_angle_to_matrix')

    unit_axis = _normalize_axis(axis, 'axis_angle_to_matrix')

    ctheta = np.cos(theta)

    return ctheta * np.eye(3) + np.sin(theta) * skew(unit_axis) + (1 - ctheta) * np.outer(unit_axis, unit_axis)


def euler_to_quaternion(alpha: float, beta: float, gamma: float, unit: ANGLE_UNIT) -> DOUBLE_ARRAY:
    r"""
    This function converts intrinsic Z-Y-X Tait-Bryan angles into a rotation quaternion.

    `alpha` is the rotation about the z axis, `beta` the rotation about the new y axis, and `gamma` the rotation about
    the newest x axis, so that the equivalent rotation matrix is
    :math:`\mathbf{R}_z(\alpha)\mathbf{R}_y(\beta)\mathbf{R}_x(\gamma)`.

    .. note::
        The quaternion is built by a degree based Z-Y-X builder whose arguments are the x, y, and z angles, so it is
        called with the angles reversed (``gamma, beta, alpha``).  Radian inputs are converted to degrees before calling
        it.  Only the Z-Y-X order is supported.

    :param alpha: The rotation about z
    :param beta: The rotation about y
    :param gamma: The rotation about x
    :param unit: ``"deg"`` or ``"rad"``, the unit of the angles
    :return: The unit rotation quaternion ``[x, y, z, w]``
    :raises InvalidUnit: if `unit` is not recognized
    """

    if _check_unit(unit, 'euler_to_quaternion') == 'rad':
        alpha, beta, gamma = np.rad2deg(alpha), np.rad2deg(beta), np.rad2deg(gamma)

    quaternion = _zyx_quaternion_from_degrees(gamma, beta, alpha)

    return quaternion_normalize(quaternion)


def euler_to_matrix(alpha: float, beta: float, gamma: float, unit: ANGLE_UNIT) -> DOUBLE_ARRAY:
    """
    This function converts intrinsic Z-Y-X Tait-Bryan angles into a rotation matrix.

    This is done through the quaternion using :func:`euler_to_quaternion` followed by :func:`quaternion_to_matrix`.

    :param alpha: The rotation about z
    :param beta: The rotation about y
    :param gamma: The rotation about x
    :param unit: ``"deg"`` or ``"rad"``, the unit of the angles
    :return: The 3x3 rotation matrix
    :raises InvalidUnit: if `unit` is not recognized
    """

    return quaternion_to_matrix(euler_to_quaternion(alpha, beta, gamma, unit))


def matrix_to_quaternion(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    When the trace of the matrix is positive the quaternion is extracted from the trace:

    .. math::
        q_s = \frac{1}{2}\sqrt{\text{Tr}(\mathbf{T})+1} \\
        \mathbf{q}_v = \frac{1}{4q_s}\left[\begin{array}{c}t_{32}-t_{23}\\ t_{13}-t_{31}\\ t_{21}-t_{12}
        \end{array}\right]

    otherwise the largest diagonal element is used as the pivot (the earlier element wins a tie) to keep the square
    root well away from zero.  The result is normalized before it is returned.

    The matrix may be given as a 3x3 array indexed ``[row, column]`` or as 9 values in column-major order.

    .. warning::
        The matrix is not checked for orthonormality.

    :param matrix: The rotation matrix
    :return: The unit rotation quaternion ``[x, y, z, w]``
    """

    matrix = _check_matrix_array_and_shape(matrix)

    quaternion = np.zeros(4)

    trace = np.trace(matrix)

    if trace > 0:
        root = np.sqrt(trace + 1)
        quaternion[3] = 0.5 * root
        root = 0.5 / root
        quaternion[0] = (matrix[2, 1] - matrix[1, 2]) * root
        quaternion[1] = (matrix[0, 2] - matrix[2, 0]) * root
        quaternion[2] = (matrix[1, 0] - matrix[0, 1]) * root

    else:
        i = 0
        if matrix[1, 1] > matrix[0, 0]:
            i = 1
        if matrix[2, 2] > matrix[i, i]:
            i = 2
        j = (i + 1) % 3
        k = (i + 2) % 3

        root = np.sqrt(matrix[i, i] - matrix[j, j] - matrix[k, k] + 1)
        quaternion[i] = 0.5 * root
        root = 0.5 / root
        quaternion[3] = (matrix[k, j] - matrix[j, k]) * root
        quaternion[j] = (matrix[i, j] + matrix[j, i]) * root
        quaternion[k] = (matrix[i, k] + matrix[k, i]) * root

    return quaternion_normalize(quaternion)


def matrix_to_axis_angle(matrix: ARRAY_LIKE, unit: ANGLE_UNIT) -> AXIS_ANGLE:
    r"""
    This function converts a rotation matrix directly into a rotation axis and angle.

    The angle is :math:`\theta=\text{cos}^{-1}((\text{Tr}(\mathbf{T})-1)/2)` with the argument clipped to
    :math:`[-1, 1]`.  The axis is then found in one of three ways:

    * if :math:`\theta` is within 1e-6 of 0 the axis is undefined and :data:`DEFAULT_AXIS` ``(1, 0, 0)`` is used
    * if :math:`\theta` is within 1e-6 of :math:`\pi` the axis is recovered from the largest diagonal element
      :math:`t_{ii}` as :math:`x_i=\sqrt{(t_{ii}+1)/2}` with the other components taken from the off diagonal elements of
      row/column :math:`i` divided by :math:`2x_i`.  The diagonal elements are tested in order and the first one that is
      at least as large as the others wins.
    * otherwise

      .. math::
          \hat{\mathbf{x}} = \frac{1}{2\text{sin}(\theta)}\left[\begin{array}{c}t_{32}-t_{23}\\ t_{13}-t_{31}\\
          t_{21}-t_{12}\end{array}\right]

    No quaternion is formed along the way, which keeps the 180 degree case accurate.

    The matrix may be given as a 3x3 array indexed ``[row, column]`` or as 9 values in column-major order.

    .. warning::
        The matrix is not checked for orthonormality.

    :param matrix: The rotation matrix
    :param unit: ``"deg"`` or ``"rad"``, the unit to return the angle in
    :return: The rotation axis as a length 3 array and the rotation angle
    :raises InvalidUnit: if `unit` is not recognized
    """

    _check_unit(unit, 'matrix_to_axis_angle')

    matrix = _check_matrix_array_and_shape(matrix)

    angle = np.arccos(np.clip((np.trace(matrix) - 1) / 2, -1, 1))

    if abs(angle) < _ANGLE_EPSILON:
        axis = np.array(DEFAULT_AXIS)

    elif abs(np.pi - angle) < _ANGLE_EPSILON:
        axis = np.zeros(3)

        if matrix[0, 0] >= matrix[1, 1] and matrix[0, 0] >= matrix[2, 2]:
            axis[0] = np.sqrt(max((matrix[0, 0] + 1) / 2, 0))
            axis[1] = matrix[0, 1] / (2 * axis[0])
            axis[2] = matrix[0, 2] / (2 * axis[0])

        elif matrix[1, 1] >= matrix[0, 0] and matrix[1, 1] >= matrix[2, 2]:
            axis[1] = np.sqrt(max((matrix[1, 1] + 1) / 2, 0))
            axis[0] = matrix[0, 1] / (2 * axis[1])
            axis[2] = matrix[1, 2] / (2 * axis[1])

        else:
            axis[2] = np.sqrt(max((matrix[2, 2] + 1) / 2, 0))
            axis[0] = matrix[0, 2] / (2 * axis[2])
            axis[1] = matrix[1, 2] / (2 * axis[2])

    else:
        axis = np.array([matrix[2, 1] - matrix[1, 2],
                         matrix[0, 2] - matrix[2, 0],
                         matrix[1, 0] - matrix[0, 1]]) / (2 * np.sin(angle))

    return axis, _from_radians(angle, unit, 'matrix_to_axis_angle')


def matrix_to_euler(matrix: ARRAY_LIKE, unit: ANGLE_UNIT) -> EULER_ANGLES:
    """
    This function converts a rotation matrix into intrinsic Z-Y-X Tait-Bryan angles.

    This is done through :func:`matrix_to_quaternion` followed by :func:`quaternion_to_euler` so the angles are
    returned in the same Z-Y-X order.

    :param matrix: The rotation matrix
    :param unit: ``"deg"`` or ``"rad"``, the unit to return the angles in
    :return: The three Euler angles in Z-Y-X order
    :raises InvalidUnit: if `unit` is not recognized
    """

    _check_unit(unit, 'matrix_to_euler')

    return quaternion_to_euler(matrix_to_quaternion(matrix), unit)


def matrix_from_column_major(values: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Builds a 3x3 matrix indexed ``[row, column]`` from 9 values stored column by column.

    :param values: the 9 matrix elements in column-major order
    :return: the 3x3 matrix
    """

    values = np.asarray(values, dtype=np.float64).ravel()

    if values.size != 9:
        raise ValueError('A 3x3 matrix requires exactly 9 values')

    return values.reshape(3, 3, order='F')


def matrix_to_column_major(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Flattens a 3x3 matrix into its 9 elements in column-major order.

    :param matrix: the 3x3 matrix indexed ``[row, column]``
    :return: the 9 elements, column by column
    """

    return _check_matrix_array_and_shape(matrix).ravel(order='F')


def _normalize_axis(axis: ARRAY_LIKE, caller: str) -> DOUBLE_ARRAY:
    """
    Returns a unit length copy of the axis, rejecting the zero vector.
    """

    axis = _check_vector_array_and_shape(axis)

    length = np.linalg.norm(axis)

    if length == 0:
        raise InvalidAxis('{}: the rotation axis cannot be the zero vector'.format(caller))

    return axis / length


def _zyx_quaternion_from_degrees(x: float, y: float, z: float) -> DOUBLE_ARRAY:
    """
    Builds the quaternion for the intrinsic rotation about z by `z`, then y by `y`, then x by `x` (all in degrees).
    """

    half_to_rad = np.pi / 360

    x_half = x * half_to_rad
    y_half = y * half_to_rad
    z_half = z * half_to_rad

    sx, cx = np.sin(x_half), np.cos(x_half)
    sy, cy = np.sin(y_half), np.cos(y_half)
    sz, cz = np.sin(z_half), np.cos(z_half)

    return np.array([sx * cy * cz - cx * sy * sz,
                     cx * sy * cz + sx * cy * sz,
                     cx * cy * sz - sx * sy * cz,
                     cx * cy * cz + sx * sy * sz])
