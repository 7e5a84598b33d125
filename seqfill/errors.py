"""
Exceptions raised while filling invalid values.

Errors coming from the interpolation backend (scipy) are not wrapped here,
they reach the caller as raised.
"""


class FillError(Exception):
    """Base class for errors raised by seqfill itself."""


class ArityError(FillError, TypeError):
    """Wrong number of positional arguments (accepted: 1 to 3)."""

    def __init__(self, nargs: int):
        self.nargs = nargs
        super().__init__(f"Expected 1 to 3 positional arguments, got {nargs}.")


class InvalidMethodError(FillError, ValueError):
    """Unrecognized fill method."""

    def __init__(self, method):
        self.method = method
        super().__init__(f"Invalid method: {method}.")


class DimensionError(FillError, ValueError):
    """Independent and dependent sequences differ in size."""

    def __init__(self, x_size: int, y_size: int):
        self.x_size = x_size
        self.y_size = y_size
        super().__init__(
            f"X and Y must have the same number of elements "
            f"(got {x_size} and {y_size})."
        )
