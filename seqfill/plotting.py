"""
Diagnostic plot for filled sequences.
"""

import numpy as np
import matplotlib.pyplot as plt


def plot_filled(
    x: np.ndarray,
    y: np.ndarray,
    filled: np.ndarray,
    invalid: np.ndarray,
    ax=None,
    title: str = "Invalid values filled",
):
    """
    Plot a sequence before and after filling its invalid values.

    Shows:
    - Valid samples of the original sequence
    - The filled sequence as a dashed line
    - The filled entries as markers (entries left invalid are not drawn)

    Parameters
    ----------
    x : np.ndarray or None
        Independent coordinates, None for 1..N
    y : np.ndarray
        Original sequence with NaN for invalid values
    filled : np.ndarray
        Output of fill_invalid_values
    invalid : np.ndarray
        Boolean mask of invalid entries (True = invalid)
    ax : matplotlib.axes.Axes, optional
        Axes to draw on. A new figure is created when omitted.
    title : str, optional
        Plot title

    Returns
    -------
    matplotlib.axes.Axes
    """
    y = np.asarray(y, dtype=float).ravel(order="F")
    filled = np.asarray(filled, dtype=float).ravel(order="F")
    invalid = np.asarray(invalid, dtype=bool).ravel(order="F")
    if x is None:
        x = np.arange(1, y.size + 1)
    x = np.asarray(x, dtype=float).ravel(order="F")

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    ax.plot(x, filled, "r--", label="Filled")
    ax.scatter(x[~invalid], y[~invalid], c="b", s=20, label="Valid")
    ax.scatter(x[invalid], filled[invalid], c="r", marker="x", s=30, label="Filled values")
    ax.legend()
    ax.grid(True)
    ax.set_xlabel("x")
    ax.set_title(title)
    return ax
