"""Layout exceptions for gridterm.

Every failure raised by the layout engine derives from ``LayoutError``
and is local to the single Axis or Grid call that raised it.
"""


class LayoutError(Exception):
    """Base exception for layout errors."""

    pass


class InvalidLengthError(LayoutError, ValueError):
    """Raised when an axis is sized to fewer than one cell."""

    def __init__(self, length):
        self.length = length
        super().__init__(f"Axis length must be at least 1, got {length}")


class IndexOutOfRangeError(LayoutError, IndexError):
    """Raised when a row or column index is outside its axis."""

    def __init__(self, index, length, one_based=False):
        self.index = index
        self.length = length
        if one_based:
            valid = f"1..{length}"
        else:
            valid = f"0..{length - 1}"
        super().__init__(f"Index {index} out of range (valid: {valid})")


class InvalidPercentError(LayoutError, ValueError):
    """Raised when a share is not a percentage between 0 and 100."""

    def __init__(self, percent):
        self.percent = percent
        super().__init__(f"Percent must be 0-100, got {percent}")


class OverAllocationError(LayoutError, ValueError):
    """Raised when pinned shares on one axis add up to more than 100."""

    def __init__(self, reserved):
        self.reserved = reserved
        super().__init__(f"Pinned shares total {reserved}%, more than 100%")


class ConfigurationError(LayoutError, ValueError):
    """Raised when a grid is constructed from invalid settings."""

    pass
