"""
Kernel test configuration.

Shared plot fixtures and states used across reducer, selector and store tests.
"""

import pytest

from cadastrapp.kernel.actions import add_plot_selection, add_plots
from cadastrapp.kernel.reducer import default_state, reduce

P1 = {"parcelle": "P1", "area": 12}
P2 = {"parcelle": "P2", "area": 5}
P3 = {"parcelle": "P3", "area": 40, "commune": "35238"}


@pytest.fixture
def empty():
    """Fresh default state — no tabs, default styles."""
    return default_state()


@pytest.fixture
def one_tab(empty):
    """State with one empty tab."""
    return reduce(empty, add_plot_selection())


@pytest.fixture
def with_plots(one_tab):
    """Tab 0 holds P1, P2, P3; nothing selected."""
    return reduce(one_tab, add_plots([dict(P1), dict(P2), dict(P3)]))


@pytest.fixture
def three_tabs(empty):
    state = empty
    for _ in range(3):
        state = reduce(state, add_plot_selection())
    return state
