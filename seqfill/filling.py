"""
Fill invalid (NaN) values in a sequence.

The entry point is `fill_invalid_values`, which accepts the sequence alone,
the sequence with a policy, or independent coordinates plus sequence plus
policy, and returns the filled copy together with the mask of invalid
entries.
"""

import logging

import numpy as np
import pandas as pd

from .errors import ArityError, DimensionError
from .interpolation import interpolate
from .policies import (
    DEFAULT_POLICY,
    Constant,
    FillPolicy,
    Interpolate,
    Kernel,
    Next,
    NoFill,
    Previous,
    is_scalar_value,
    parse_policy,
)

logger = logging.getLogger(__name__)


def invalid_mask(y) -> np.ndarray:
    """Boolean array of the same shape as `y`, True where `y` is NaN."""
    return np.isnan(np.asarray(y, dtype=float))


def _is_policy_spec(value) -> bool:
    return isinstance(value, (str, Kernel, FillPolicy)) or is_scalar_value(value)


def resolve_arguments(*args):
    """
    Resolve the positional call forms into (x, y, policy).

    Accepted forms::

        (y)                 x = 1..N, linear interpolation
        (y, policy)         x = 1..N
        (x, y)              linear interpolation
        (x, y, policy)

    A second argument that is a string, a Kernel, a FillPolicy or a numeric
    scalar is taken as the policy, anything else as the sequence `y`.
    A one-element list does not count as a scalar: ``([0], [nan])`` reads
    as ``(x, y)``. Pass a number or a one-element numpy array to use it as
    a fill value.

    Returns
    -------
    x : np.ndarray or None
        Independent coordinates, None when defaulted to 1..N
    y : array_like
        Sequence to fill, as given
    policy : FillPolicy

    Raises
    ------
    ArityError
        If not called with 1 to 3 arguments.
    InvalidMethodError
        If the policy cannot be parsed.
    """
    if not 1 <= len(args) <= 3:
        raise ArityError(len(args))

    if len(args) == 1:
        x, y, spec = None, args[0], DEFAULT_POLICY
    elif len(args) == 2:
        if _is_policy_spec(args[1]):
            x, y, spec = None, args[0], args[1]
        else:
            x, y, spec = args[0], args[1], DEFAULT_POLICY
    else:
        x, y, spec = args

    return x, y, parse_policy(spec)


def fill_previous(y: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """
    Fill each gap between two valid entries with the value before it.

    Invalid entries before the first valid one or after the last valid one
    are left as they are.

    Parameters
    ----------
    y : np.ndarray
        1-D sequence
    mask : np.ndarray
        Boolean array, True = invalid

    Returns
    -------
    np.ndarray
        Filled copy of `y`
    """
    filled = np.array(y, dtype=float)
    valid = np.flatnonzero(~mask)
    if valid.size < 2:
        return filled

    # Index of the last valid entry at or before each position
    source = np.where(mask, 0, np.arange(mask.size))
    np.maximum.accumulate(source, out=source)

    inner = slice(valid[0], valid[-1] + 1)
    filled[inner] = filled[source[inner]]
    return filled


def fill_next(y: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """
    Fill each gap between two valid entries with the value after it.

    Invalid entries before the first valid one or after the last valid one
    are left as they are.
    """
    filled = np.array(y, dtype=float)
    valid = np.flatnonzero(~mask)
    if valid.size < 2:
        return filled

    # Index of the first valid entry at or after each position
    source = np.where(mask, mask.size - 1, np.arange(mask.size))
    source = np.minimum.accumulate(source[::-1])[::-1]

    inner = slice(valid[0], valid[-1] + 1)
    filled[inner] = filled[source[inner]]
    return filled


def fill_interpolated(
    x: np.ndarray, y: np.ndarray, mask: np.ndarray, kernel: Kernel
) -> np.ndarray:
    """
    Replace invalid entries by interpolating the valid ones over `x`.

    Raises
    ------
    DimensionError
        If `x` and `y` do not have the same number of elements.
    """
    if x.size != y.size:
        raise DimensionError(x.size, y.size)

    filled = np.array(y, dtype=float)
    filled[mask] = interpolate(x[~mask], y[~mask], x[mask], kernel)
    return filled


def apply_policy(x, y: np.ndarray, mask: np.ndarray, policy: FillPolicy) -> np.ndarray:
    """
    Fill the 1-D sequence `y` according to `policy`.

    `x` is only used by interpolation policies; None stands for 1..N.
    """
    if isinstance(policy, NoFill):
        return np.array(y, dtype=float)
    if isinstance(policy, Previous):
        return fill_previous(y, mask)
    if isinstance(policy, Next):
        return fill_next(y, mask)
    if isinstance(policy, Constant):
        filled = np.array(y, dtype=float)
        filled[mask] = policy.value
        return filled
    if isinstance(policy, Interpolate):
        if x is None:
            x = np.arange(1, y.size + 1, dtype=float)
        else:
            x = np.asarray(x, dtype=float).ravel(order="F")
        return fill_interpolated(x, y, mask, policy.kernel)
    raise TypeError(f"Unsupported fill policy: {policy!r}")


def fill_invalid_values(*args):
    """
    Fill invalid values (NaN) in a sequence.

    Call forms::

        filled, invalid = fill_invalid_values(y)
        filled, invalid = fill_invalid_values(y, method_or_value)
        filled, invalid = fill_invalid_values(x, y)
        filled, invalid = fill_invalid_values(x, y, method_or_value)

    Parameters
    ----------
    x : array_like, optional
        Independent coordinates of `y`, same number of elements.
        Defaults to 1..N and only matters for interpolation methods.
    y : array_like or pd.Series
        Sequence with NaN marking invalid entries
    method_or_value : str, Kernel, FillPolicy or float, optional
        'none': return `y` unchanged.
        'previous': previous valid value, gaps only.
        'next': next valid value, gaps only.
        'nearest', 'linear' (default), 'spline', 'pchip', 'cubic':
        interpolate valid values over `x` with the given kernel.
        A number is used as fill value.
        Method names are case-insensitive.

    Returns
    -------
    filled : np.ndarray or pd.Series
        Copy of `y` (float) with invalid values filled
    invalid : np.ndarray or pd.Series
        Boolean mask, True where `y` was invalid

    Raises
    ------
    ArityError
        Called with fewer than 1 or more than 3 arguments.
    InvalidMethodError
        Unknown method name.
    DimensionError
        `x` and `y` sizes differ with an interpolation method.

    Examples
    --------
    >>> x = [0, 2, 4, 8, 10, 12, 14, 16, 18, 20]
    >>> y = [0, np.nan, 16, 64, np.nan, np.nan, np.nan, 256, 324, 400]
    >>> filled, invalid = fill_invalid_values(x, y, "previous")
    >>> filled
    array([  0.,   0.,  16.,  64.,  64.,  64.,  64., 256., 324., 400.])
    """
    x, y, policy = resolve_arguments(*args)

    series = y if isinstance(y, pd.Series) else None
    if isinstance(x, pd.Series):
        x = x.to_numpy()

    values = np.asarray(y, dtype=float)
    mask = invalid_mask(values)

    # Column-major, like linear indexing of a matrix
    flat_values = values.ravel(order="F")
    flat_mask = mask.ravel(order="F")
    logger.debug(
        "Filling %d of %d values with %r", int(flat_mask.sum()), flat_mask.size, policy
    )

    filled = apply_policy(x, flat_values, flat_mask, policy).reshape(
        values.shape, order="F"
    )

    if series is not None:
        return (
            pd.Series(filled, index=series.index, name=series.name),
            pd.Series(mask, index=series.index, name=series.name),
        )
    return filled, mask
