"""
Cadastrapp Reducer — Happy Path Tests

One test per action type. Apply the action to a suitable state, verify the
resulting state. These are the foundation tests.
"""

from cadastrapp.kernel.actions import (
    add_plot_selection,
    add_plots,
    deselect_plots,
    loading,
    remove_plot_selection,
    remove_plots,
    select_plots,
    set_active_plot_selection,
    set_configuration,
    set_layer_style,
    tear_down,
    toggle_search,
    toggle_selection,
)
from cadastrapp.kernel.reducer import default_state, reduce
from cadastrapp.kernel.types import DEFAULT_STYLES, SearchType, SelectionType

# ============================================================================
# Default state
# ============================================================================


def test_default_state_shape():
    state = default_state()
    assert state == {"plots": [], "styles": DEFAULT_STYLES}
    assert "configuration" not in state


def test_default_state_is_fresh_each_call():
    a = default_state()
    b = default_state()
    a["styles"]["selected"]["weight"] = 99
    a["plots"].append({"data": [], "selected": []})
    assert b["styles"]["selected"]["weight"] == 4
    assert b["plots"] == []
    assert DEFAULT_STYLES["selected"]["weight"] == 4


# ============================================================================
# Configuration, loading, tool modes
# ============================================================================


def test_set_configuration(empty):
    config = {"cadastreWMSURL": "https://domain.org/geoserver/wms", "maxRequest": "8"}
    state = reduce(empty, set_configuration(config))
    assert state["configuration"] == config
    assert state["plots"] == []


def test_set_configuration_replaces_wholesale(empty):
    state = reduce(empty, set_configuration({"a": 1, "b": 2}))
    state = reduce(state, set_configuration({"c": 3}))
    assert state["configuration"] == {"c": 3}


def test_loading_global_only(empty):
    state = reduce(empty, loading(True))
    assert state["loading"] is True
    assert "loadingFlags" not in state


def test_loading_named_sets_both(empty):
    state = reduce(empty, loading(True, "plotSearch"))
    assert state["loading"] is True
    assert state["loadingFlags"] == {"plotSearch": True}


def test_loading_last_write_wins(empty):
    state = reduce(empty, loading(True, "plotSearch"))
    state = reduce(state, loading(True, "ownerSearch"))
    state = reduce(state, loading(False, "plotSearch"))
    # Global flag follows the latest transition even though ownerSearch is still running
    assert state["loading"] is False
    assert state["loadingFlags"] == {"plotSearch": False, "ownerSearch": True}


def test_toggle_selection_sets_mode(empty):
    state = reduce(empty, toggle_selection(SelectionType.POLYGON))
    assert state["selectionType"] == SelectionType.POLYGON


def test_toggle_selection_none_turns_off(empty):
    state = reduce(empty, toggle_selection(SelectionType.POINT))
    state = reduce(state, toggle_selection(None))
    assert state["selectionType"] is None


def test_toggle_selection_same_value_twice_keeps_it(empty):
    state = reduce(empty, toggle_selection("Point"))
    state = reduce(state, toggle_selection("Point"))
    assert state["selectionType"] == "Point"


def test_toggle_search(empty):
    state = reduce(empty, toggle_search(SearchType.OWNER))
    assert state["searchType"] == SearchType.OWNER
    state = reduce(state, toggle_search(None))
    assert state["searchType"] is None


# ============================================================================
# Plots
# ============================================================================


def test_add_plots_creates_missing_tab(empty):
    state = reduce(empty, add_plots([{"parcelle": "P1"}]))
    assert state["plots"] == [{"data": [{"parcelle": "P1"}], "selected": []}]


def test_remove_plots(with_plots):
    state = reduce(with_plots, remove_plots(["P2"]))
    assert [p["parcelle"] for p in state["plots"][0]["data"]] == ["P1", "P3"]


def test_select_plots(with_plots):
    state = reduce(with_plots, select_plots([{"parcelle": "P3"}, {"parcelle": "P1"}]))
    assert state["plots"][0]["selected"] == ["P3", "P1"]


def test_deselect_plots(with_plots):
    state = reduce(with_plots, select_plots([{"parcelle": "P1"}, {"parcelle": "P2"}]))
    state = reduce(state, deselect_plots([{"parcelle": "P1"}]))
    assert state["plots"][0]["selected"] == ["P2"]


# ============================================================================
# Tabs
# ============================================================================


def test_add_plot_selection(empty):
    state = reduce(empty, add_plot_selection())
    assert state["plots"] == [{"data": [], "selected": []}]
    assert "activePlotSelection" not in state


def test_remove_plot_selection(three_tabs):
    state = reduce(three_tabs, remove_plot_selection())
    assert len(state["plots"]) == 2
    assert state["activePlotSelection"] == 0


def test_set_active_plot_selection(three_tabs):
    state = reduce(three_tabs, set_active_plot_selection(2))
    assert state["activePlotSelection"] == 2


# ============================================================================
# Styles and teardown
# ============================================================================


def test_set_layer_style_replaces_role(empty):
    style = {"fillColor": "#FF0000", "opacity": 1}
    state = reduce(empty, set_layer_style("selected", style))
    assert state["styles"]["selected"] == style
    assert state["styles"]["unselected"] == DEFAULT_STYLES["unselected"]


def test_set_layer_style_accepts_new_role(empty):
    state = reduce(empty, set_layer_style("highlighted", {"color": "#00FF00"}))
    assert state["styles"]["highlighted"] == {"color": "#00FF00"}
    assert set(state["styles"]) == {"selected", "unselected", "highlighted"}


def test_tear_down(with_plots):
    state = reduce(with_plots, set_configuration({"maxRequest": "8"}))
    state = reduce(state, tear_down())
    assert state == default_state()
