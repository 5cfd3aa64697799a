import warnings

import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY

from rotconv.conversions.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_inverse", "quaternion_multiplication", "quaternions_equivalent"]


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns a unit length copy of the quaternion.

    Unlike many attitude libraries no sign convention is imposed on the result, so ``q`` and ``-q`` stay distinct
    (they represent the same rotation).  A zero quaternion has no direction and is returned unchanged (as zeros) with a
    warning, mirroring the behavior of the usual graphics math libraries that leave zero vectors alone.

    The input is never modified.

    :param quaternion: the quaternion to normalize
    :returns: The normalized quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    length = np.linalg.norm(work_quaternion)

    if length == 0:
        warnings.warn('Cannot normalize a zero length quaternion.  Leaving it as zeros')
        return work_quaternion

    work_quaternion /= length

    return work_quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the conjugate of a unit quaternion, which is the rotation undoing it.

    :math:`\mathbf{q}\otimes\mathbf{q}^{-1}` is the identity quaternion ``[0, 0, 0, 1]``.  The input is not modified.

    :param quaternion: The unit quaternion ``[x, y, z, w]``
    :return: ``[-x, -y, -z, w]``
    """

    conjugate = _check_quaternion_array_and_shape(quaternion)

    conjugate[:3] = -conjugate[:3]

    return conjugate


def quaternion_multiplication(left: ARRAY_LIKE, right: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    The Hamilton product of two scalar-last quaternions.

    The product applies `right` first and then `left`, matching the matrix product
    ``quaternion_to_matrix(left) @ quaternion_to_matrix(right)``:

    .. math::
        \mathbf{p}\otimes\mathbf{q}=\left[\begin{array}{c}p_s\mathbf{q}_v + q_s\mathbf{p}_v +
        \mathbf{p}_v\times\mathbf{q}_v\\
        p_s q_s-\mathbf{p}_v^T\mathbf{q}_v\end{array}\right]

    :param left: :math:`\mathbf{p}`
    :param right: :math:`\mathbf{q}`
    :return: :math:`\mathbf{p}\otimes\mathbf{q}`
    """

    p = _check_quaternion_array_and_shape(left)
    q = _check_quaternion_array_and_shape(right)

    p_vector, p_scalar = p[:3], p[3]
    q_vector, q_scalar = q[:3], q[3]

    return np.concatenate([p_scalar * q_vector + q_scalar * p_vector + np.cross(p_vector, q_vector),
                           [p_scalar * q_scalar - p_vector @ q_vector]])


def quaternions_equivalent(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE, atol: float = 1e-8) -> bool:
    """
    Checks whether two quaternions represent the same rotation.

    Since ``q`` and ``-q`` are the same rotation this returns ``True`` if the quaternions are equal to within ``atol``
    element-wise with either sign.

    :param quaternion_1: the first quaternion
    :param quaternion_2: the second quaternion
    :param atol: the absolute tolerance for each component
    :return: ``True`` if the quaternions represent the same rotation
    """

    q1 = _check_quaternion_array_and_shape(quaternion_1)
    q2 = _check_quaternion_array_and_shape(quaternion_2)

    return bool(np.allclose(q1, q2, rtol=0, atol=atol) or np.allclose(q1, -q2, rtol=0, atol=atol))
