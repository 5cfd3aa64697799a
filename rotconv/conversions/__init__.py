r"""
This package defines the routines for converting between the rotation representations handled by rotconv as well as a
class which wraps a single rotation.

The representations are:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
axis-angle         A unit 3 element rotation axis :math:`\hat{\mathbf{x}}` and the angle :math:`\theta` to rotate about
                   it.  For a zero angle the axis is undefined and ``(1, 0, 0)`` is reported.
euler angles       3 angles :math:`(\alpha, \beta, \gamma)` applied in intrinsic Z-Y-X (Tait-Bryan) order: first
                   :math:`\alpha` about z, then :math:`\beta` about the new y, then :math:`\gamma` about the newest x.
                   Mathematically :math:`\mathbf{T}=\mathbf{R}_z(\alpha)\mathbf{R}_y(\beta)\mathbf{R}_x(\gamma)`.
                   No other order is supported.
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`.  Note that quaternions are not unique in that the
                   rotation represented by :math:`\mathbf{q}` is the same rotation represented by :math:`-\mathbf{q}`.
                   No sign convention is enforced.
rotation matrix    A :math:`3\times 3` orthonormal matrix with a determinant of +1, returned as a numpy array indexed
                   ``[row, column]``.  Inputs may also be given as 9 values in column-major order.
=================  =====================================================================================================

The angle unit of every angle consuming or producing routine is chosen per call with ``"deg"`` or ``"rad"``.
"""

import rotconv.conversions.core
import rotconv.conversions.validation
import rotconv.conversions.rotation

from rotconv.conversions.core import *
from rotconv.conversions.validation import (MATRIX_TOLERANCE, is_valid_rotation_matrix, validate_rotation_matrix,
                                            validate_axis)
from rotconv.conversions.rotation import Rotation

__all__ = ['quaternion_to_euler', 'quaternion_to_axis_angle', 'quaternion_to_matrix',
           'axis_angle_to_quaternion', 'axis_angle_to_matrix',
           'euler_to_quaternion', 'euler_to_matrix',
           'matrix_to_quaternion', 'matrix_to_axis_angle', 'matrix_to_euler',
           'matrix_from_column_major', 'matrix_to_column_major', 'DEFAULT_AXIS',
           'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication', 'quaternions_equivalent',
           'MATRIX_TOLERANCE', 'is_valid_rotation_matrix', 'validate_rotation_matrix', 'validate_axis',
           'Rotation']
