# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
Exceptions raised by the rotation conversion routines.

All of them derive from :class:`ValueError` so that callers which only care about "bad input" can catch that.
"""


class InvalidUnit(ValueError):
    """
    Raised when an angle unit selector is neither ``"deg"`` nor ``"rad"``.
    """

    def __init__(self, unit: object, caller: str):
        self.unit = unit
        self.caller = caller
        super().__init__('{}: unit must be "deg" or "rad", got {!r}'.format(caller, unit))


class InvalidAxis(ValueError):
    """
    Raised when the axis of an axis-angle rotation is the zero vector and therefore cannot be normalized.
    """


class InvalidRotationMatrix(ValueError):
    """
    Raised when a matrix is not orthonormal with a determinant of +1 (within tolerance).
    """
