"""
Tests for the diagnostic plot.
"""

import matplotlib.pyplot as plt
import numpy as np

from seqfill import fill_invalid_values, plot_filled


def test_plot_filled_creates_axes(squares):
    x, y = squares
    filled, invalid = fill_invalid_values(x, y)
    ax = plot_filled(x, y, filled, invalid, title="squares")
    assert ax.get_title() == "squares"
    assert len(ax.lines) == 1
    assert len(ax.collections) == 2
    plt.close(ax.figure)


def test_plot_filled_on_given_axes():
    y = np.array([1.0, np.nan, 3.0])
    filled, invalid = fill_invalid_values(y)
    fig, ax = plt.subplots()
    assert plot_filled(None, y, filled, invalid, ax=ax) is ax
    xdata = ax.lines[0].get_xdata()
    assert list(xdata) == [1.0, 2.0, 3.0]
    plt.close(fig)
