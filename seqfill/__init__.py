# Invalid value filling for numeric sequences
from .errors import FillError, ArityError, InvalidMethodError, DimensionError
from .policies import Kernel, FillPolicy, NoFill, Previous, Next, Constant, Interpolate, DEFAULT_POLICY, parse_policy
from .interpolation import interpolate
from .filling import (
    fill_invalid_values,
    resolve_arguments,
    invalid_mask,
    fill_previous,
    fill_next,
    fill_interpolated,
    apply_policy,
)
from .plotting import plot_filled

__version__ = "0.1.0"
