"""
Elementary rotation matrices about the coordinate axes and the cross product matrix.

These are the building blocks for checking the composite conversions, for instance
``rot_z(alpha) @ rot_y(beta) @ rot_x(gamma)`` is the matrix of the intrinsic Z-Y-X Euler angles
``(alpha, beta, gamma)``.
"""

import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY


__all__ = ["rot_x", "rot_y", "rot_z", "skew"]


def rot_x(theta: float) -> DOUBLE_ARRAY:
    r"""
    Right handed rotation by `theta` radians about the x axis:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle in radians
    :return: The 3x3 rotation matrix
    """

    c, s = np.cos(theta), np.sin(theta)

    return np.array([[1, 0, 0],
                     [0, c, -s],
                     [0, s, c]], dtype=np.float64)


def rot_y(theta: float) -> DOUBLE_ARRAY:
    r"""
    Right handed rotation by `theta` radians about the y axis:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle in radians
    :return: The 3x3 rotation matrix
    """

    c, s = np.cos(theta), np.sin(theta)

    return np.array([[c, 0, s],
                     [0, 1, 0],
                     [-s, 0, c]], dtype=np.float64)


def rot_z(theta: float) -> DOUBLE_ARRAY:
    r"""
    Right handed rotation by `theta` radians about the z axis:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    For example::

        >>> from rotconv import rot_z
        >>> from numpy import pi
        >>> rot_z(pi/2).round(12)
        array([[ 0., -1.,  0.],
               [ 1.,  0.,  0.],
               [ 0.,  0.,  1.]])

    :param theta: The angle in radians
    :return: The 3x3 rotation matrix
    """

    c, s = np.cos(theta), np.sin(theta)

    return np.array([[c, -s, 0],
                     [s, c, 0],
                     [0, 0, 1]], dtype=np.float64)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the matrix :math:`\left[\mathbf{a}\times\right]` for which
    :math:`\left[\mathbf{a}\times\right]\mathbf{b}=\mathbf{a}\times\mathbf{b}`:

    .. math::
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    :param vector: A length 3 vector
    :return: The 3x3 skew symmetric matrix
    :raises ValueError: if `vector` is not length 3
    """

    a = np.asarray(vector, dtype=np.float64)

    if a.shape != (3,):
        raise ValueError('skew requires a length 3 vector, got shape {}'.format(a.shape))

    return np.array([[0, -a[2], a[1]],
                     [a[2], 0, -a[0]],
                     [-a[1], a[0], 0]])
