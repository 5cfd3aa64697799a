# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
rotconv converts a 3D rotation between its axis-angle, intrinsic Z-Y-X Euler angle, unit quaternion, and rotation
matrix representations and keeps them consistent.

The conversion routines live in :mod:`rotconv.conversions` and are re-exported here, along with the
:class:`.Rotation` class and the errors they raise.
"""

import rotconv.conversions

from rotconv.conversions import *
from rotconv.exceptions import InvalidUnit, InvalidAxis, InvalidRotationMatrix

__version__ = '1.0.0'

__all__ = rotconv.conversions.__all__ + ['InvalidUnit', 'InvalidAxis', 'InvalidRotationMatrix']
