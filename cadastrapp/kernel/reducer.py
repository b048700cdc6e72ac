"""
Cadastrapp Kernel — Reducer

Pure function: (state, action) → state
No side effects. No IO. Deterministic.

The input state is never modified. Handlers copy the containers they
change and share everything else with the previous state.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable
from typing import Any

from cadastrapp.kernel.types import (
    DEFAULT_STYLES,
    GLOBAL_LOADING,
    AddPlots,
    AddPlotSelectionTab,
    DeselectPlots,
    Loading,
    RemovePlots,
    RemovePlotSelectionTab,
    SelectPlots,
    SetActivePlotSelection,
    SetConfiguration,
    SetLayerStyle,
    TeardownApplication,
    ToggleSearchMode,
    ToggleSelectionMode,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def default_state() -> dict[str, Any]:
    """
    The state at tool startup and after teardown.

    Full shape once populated:
        {
            "loading":             bool,
            "loadingFlags":        {name: bool},
            "selectionType":       str | None,
            "searchType":          str | None,
            "activePlotSelection": int,
            "plots":               [{"data": [{"parcelle": ...}], "selected": [parcelle]}],
            "configuration":       {...},   # opaque, from the server
            "styles":              {"selected": {...}, "unselected": {...}},
        }
    """
    return {
        "plots": [],
        "styles": copy.deepcopy(DEFAULT_STYLES),
    }


def empty_plot_selection() -> dict[str, Any]:
    return {"data": [], "selected": []}


def reduce(state: dict[str, Any], action: Any) -> dict[str, Any]:
    """
    Apply one action to the current state and return the next state.

    Unknown actions return `state` itself.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        return state
    return handler(state, action)


def replay(actions: Iterable[Any], state: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Fold actions over a starting state (default_state() when omitted).
    replay(actions) == reduce(reduce(reduce(default_state(), a1), a2), a3)...
    """
    if state is None:
        state = default_state()
    for action in actions:
        state = reduce(state, action)
    return state


def toggle_selection(tab: dict[str, Any], parcelle: Any) -> dict[str, Any]:
    """
    Flip `parcelle` in tab["selected"] if the tab holds that plot.

    Returns `tab` itself when the plot is not in tab["data"].
    """
    for plot in tab["data"]:
        if plot.get("parcelle") == parcelle:
            break
    else:
        return tab
    selected = tab["selected"]
    if parcelle in selected:
        selected = [p for p in selected if p != parcelle]
    else:
        selected = [*selected, parcelle]
    return {**tab, "selected": selected}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _set(state: dict[str, Any], key: str, value: Any) -> dict[str, Any]:
    return {**state, key: value}


def _active_index(state: dict[str, Any]) -> int:
    active = state.get("activePlotSelection")
    return 0 if active is None else active


def _active_tab(state: dict[str, Any]) -> dict[str, Any]:
    """Active tab, or a fresh empty one when it does not exist yet."""
    index = _active_index(state)
    plots = state.get("plots") or []
    if 0 <= index < len(plots):
        return plots[index]
    return empty_plot_selection()


def _set_active_tab(state: dict[str, Any], tab: dict[str, Any]) -> dict[str, Any]:
    """
    Write `tab` at the active index, padding with empty tabs if needed.

    A negative index names no tab: the state is returned unchanged.
    """
    index = _active_index(state)
    if index < 0:
        return state
    plots = list(state.get("plots") or [])
    while len(plots) <= index:
        plots.append(empty_plot_selection())
    plots[index] = tab
    return _set(state, "plots", plots)


def _upsert_plot(data: list[dict[str, Any]], plot: dict[str, Any]) -> list[dict[str, Any]]:
    parcelle = plot.get("parcelle")
    for i, existing in enumerate(data):
        if existing.get("parcelle") == parcelle:
            return [*data[:i], dict(plot), *data[i + 1:]]
    return [*data, dict(plot)]


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_set_configuration(state: dict, action: SetConfiguration) -> dict:
    return _set(state, "configuration", action.configuration)


def _handle_loading(state: dict, action: Loading) -> dict:
    state = _set(state, "loading", action.value)
    if action.name != GLOBAL_LOADING:
        flags = {**(state.get("loadingFlags") or {}), action.name: action.value}
        state = _set(state, "loadingFlags", flags)
    return state


def _handle_toggle_selection(state: dict, action: ToggleSelectionMode) -> dict:
    # Clicking the active tool again arrives here as None; no implicit toggle.
    return _set(state, "selectionType", action.selection_type)


def _handle_toggle_search(state: dict, action: ToggleSearchMode) -> dict:
    return _set(state, "searchType", action.search_type)


def _handle_add_plots(state: dict, action: AddPlots) -> dict:
    tab = _active_tab(state)
    for plot in action.plots:
        # Toggle against the data as it was before this plot is upserted.
        tab = toggle_selection(tab, plot.get("parcelle"))
        tab = {**tab, "data": _upsert_plot(tab["data"], plot)}
    return _set_active_tab(state, tab)


def _handle_remove_plots(state: dict, action: RemovePlots) -> dict:
    parcelles = set(action.parcelles)
    tab = _active_tab(state)
    tab = {
        **tab,
        "data": [plot for plot in tab["data"] if plot.get("parcelle") not in parcelles],
        "selected": [p for p in tab["selected"] if p not in parcelles],
    }
    return _set_active_tab(state, tab)


def _handle_select_plots(state: dict, action: SelectPlots) -> dict:
    tab = _active_tab(state)
    selected: list[Any] = []
    for parcelle in [*(tab.get("selected") or []), *(plot.get("parcelle") for plot in action.plots)]:
        if parcelle not in selected:
            selected.append(parcelle)
    return _set_active_tab(state, {**tab, "selected": selected})


def _handle_deselect_plots(state: dict, action: DeselectPlots) -> dict:
    tab = _active_tab(state)
    parcelles = [plot.get("parcelle") for plot in action.plots]
    selected = [p for p in (tab.get("selected") or []) if p not in parcelles]
    return _set_active_tab(state, {**tab, "selected": selected})


def _handle_add_plot_selection(state: dict, action: AddPlotSelectionTab) -> dict:
    return _set(state, "plots", [*(state.get("plots") or []), empty_plot_selection()])


def _handle_remove_plot_selection(state: dict, action: RemovePlotSelectionTab) -> dict:
    current = _active_index(state)
    removed = current if action.active is None else action.active
    plots = [tab for i, tab in enumerate(state.get("plots") or []) if i != removed]
    state = _set(state, "plots", plots)
    # Steps back one tab whichever index was removed.
    return _set(state, "activePlotSelection", max(current - 1, 0))


def _handle_tear_down(state: dict, action: TeardownApplication) -> dict:
    return default_state()


def _handle_set_active_plot_selection(state: dict, action: SetActivePlotSelection) -> dict:
    return _set(state, "activePlotSelection", action.active)


def _handle_set_layer_style(state: dict, action: SetLayerStyle) -> dict:
    styles = {**(state.get("styles") or {}), action.style_type: action.value}
    return _set(state, "styles", styles)


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------

_HANDLERS: dict[type, Callable[[dict, Any], dict]] = {
    SetConfiguration: _handle_set_configuration,
    Loading: _handle_loading,
    ToggleSelectionMode: _handle_toggle_selection,
    ToggleSearchMode: _handle_toggle_search,
    AddPlots: _handle_add_plots,
    RemovePlots: _handle_remove_plots,
    SelectPlots: _handle_select_plots,
    DeselectPlots: _handle_deselect_plots,
    AddPlotSelectionTab: _handle_add_plot_selection,
    RemovePlotSelectionTab: _handle_remove_plot_selection,
    TeardownApplication: _handle_tear_down,
    SetActivePlotSelection: _handle_set_active_plot_selection,
    SetLayerStyle: _handle_set_layer_style,
}
