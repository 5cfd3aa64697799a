# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


from typing import Literal

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike


ANGLE_UNIT = Literal['deg', 'rad']
"""
The recognized angle unit selectors.  Anything else raises :class:`.InvalidUnit`.
"""

REPRESENTATION = Literal['axis-angle', 'euler', 'quaternion', 'matrix']
"""
The names of the four rotation representations handled by this package.
"""

AXIS_ANGLE = tuple[DOUBLE_ARRAY, float]
EULER_ANGLES = tuple[float, float, float]
