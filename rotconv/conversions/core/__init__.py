"""
This package contains the pure conversion routines and the quaternion and elementary rotation helpers they are built
on.  It has no dependencies on the higher level modules of :mod:`rotconv.conversions` to avoid circular imports.
"""

import rotconv.conversions.core.conversions
import rotconv.conversions.core.elementals
import rotconv.conversions.core.quaternion_math

from rotconv.conversions.core.conversions import (quaternion_to_euler, quaternion_to_axis_angle, quaternion_to_matrix,
                                                  axis_angle_to_quaternion, axis_angle_to_matrix,
                                                  euler_to_quaternion, euler_to_matrix,
                                                  matrix_to_quaternion, matrix_to_axis_angle, matrix_to_euler,
                                                  matrix_from_column_major, matrix_to_column_major, DEFAULT_AXIS)

from rotconv.conversions.core.elementals import rot_x, rot_y, rot_z, skew

from rotconv.conversions.core.quaternion_math import (quaternion_normalize, quaternion_inverse,
                                                      quaternion_multiplication, quaternions_equivalent)

__all__ = ['quaternion_to_euler', 'quaternion_to_axis_angle', 'quaternion_to_matrix',
           'axis_angle_to_quaternion', 'axis_angle_to_matrix',
           'euler_to_quaternion', 'euler_to_matrix',
           'matrix_to_quaternion', 'matrix_to_axis_angle', 'matrix_to_euler',
           'matrix_from_column_major', 'matrix_to_column_major', 'DEFAULT_AXIS',
           'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication', 'quaternions_equivalent']
