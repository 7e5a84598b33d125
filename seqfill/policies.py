"""
Fill policies.

A fill policy says what to do with invalid (NaN) entries of a sequence:
leave them, carry the previous or next valid value, interpolate them with
a kernel, or overwrite them with a constant.
"""

import numbers
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .errors import InvalidMethodError


class Kernel(Enum):
    """Interpolation kernels."""

    NEAREST = "nearest"
    LINEAR = "linear"
    SPLINE = "spline"
    PCHIP = "pchip"
    CUBIC = "cubic"


class FillPolicy:
    """Base of the policy variants below."""


@dataclass(frozen=True)
class NoFill(FillPolicy):
    """Return the sequence unchanged."""


@dataclass(frozen=True)
class Previous(FillPolicy):
    """Carry the previous valid value forward across each gap."""


@dataclass(frozen=True)
class Next(FillPolicy):
    """Carry the next valid value backward across each gap."""


@dataclass(frozen=True)
class Constant(FillPolicy):
    """Overwrite invalid entries with a fixed value."""

    value: float


@dataclass(frozen=True)
class Interpolate(FillPolicy):
    """Interpolate invalid entries from the valid ones."""

    kernel: Kernel = Kernel.LINEAR


DEFAULT_POLICY = Interpolate(Kernel.LINEAR)

# Method names accepted as strings, lower case
METHODS = {
    "none": NoFill(),
    "previous": Previous(),
    "next": Next(),
    **{kernel.value: Interpolate(kernel) for kernel in Kernel},
}


def is_scalar_value(value) -> bool:
    """
    Check whether `value` can serve as a constant fill value.

    Real numbers, numpy numeric scalars and single-element numeric arrays
    qualify. Booleans do not.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Real):
        return True
    if isinstance(value, np.ndarray):
        return (
            value.size == 1
            and np.issubdtype(value.dtype, np.number)
            and not np.issubdtype(value.dtype, np.complexfloating)
        )
    return False


def parse_policy(spec) -> FillPolicy:
    """
    Turn a user supplied policy specification into a FillPolicy.

    Parameters
    ----------
    spec : str, Kernel, FillPolicy or real scalar
        Method name (case-insensitive): 'none', 'previous', 'next',
        'nearest', 'linear', 'spline', 'pchip' or 'cubic'.
        A number is taken as a constant fill value.

    Returns
    -------
    FillPolicy

    Raises
    ------
    InvalidMethodError
        If `spec` is an unknown method name or not a policy at all.
    """
    if isinstance(spec, FillPolicy):
        return spec
    if isinstance(spec, Kernel):
        return Interpolate(spec)
    if isinstance(spec, str):
        try:
            return METHODS[spec.lower()]
        except KeyError:
            raise InvalidMethodError(spec) from None
    if is_scalar_value(spec):
        return Constant(float(np.asarray(spec).reshape(())))
    raise InvalidMethodError(spec)
