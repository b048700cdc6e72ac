"""
Cadastrapp Kernel — Selectors

Read-only helpers over the state tree for map rendering and UI code.
Absent keys read as their defaults: no tab is an empty tab, no active
index is 0, no style falls back to the built-in one.
"""

from __future__ import annotations

import copy
from typing import Any

from cadastrapp.kernel.types import DEFAULT_STYLES, GLOBAL_LOADING, SELECTED_STYLE, UNSELECTED_STYLE


def active_plot_selection_index(state: dict[str, Any]) -> int:
    active = state.get("activePlotSelection")
    return 0 if active is None else active


def active_selection(state: dict[str, Any]) -> dict[str, Any]:
    """The active tab, or an empty tab when it does not exist."""
    plots = state.get("plots") or []
    index = active_plot_selection_index(state)
    if 0 <= index < len(plots):
        return plots[index]
    return {"data": [], "selected": []}


def current_plots(state: dict[str, Any]) -> list[dict[str, Any]]:
    return active_selection(state).get("data") or []


def selected_plots(state: dict[str, Any]) -> list[dict[str, Any]]:
    """Selected plot records of the active tab, in data order."""
    tab = active_selection(state)
    selected = tab.get("selected") or []
    return [plot for plot in tab.get("data") or [] if plot.get("parcelle") in selected]


def is_selected(state: dict[str, Any], parcelle: str) -> bool:
    return parcelle in (active_selection(state).get("selected") or [])


def is_loading(state: dict[str, Any], name: str | None = None) -> bool:
    """Global loading flag, or the flag of one named operation."""
    if name is None or name == GLOBAL_LOADING:
        return bool(state.get("loading"))
    return bool((state.get("loadingFlags") or {}).get(name))


def layer_style(state: dict[str, Any], role: str) -> dict[str, Any] | None:
    styles = state.get("styles") or {}
    if role in styles:
        return styles[role]
    if role in DEFAULT_STYLES:
        return copy.deepcopy(DEFAULT_STYLES[role])
    return None


def plot_style(state: dict[str, Any], parcelle: str) -> dict[str, Any] | None:
    """Style a plot of the active tab is drawn with."""
    role = SELECTED_STYLE if is_selected(state, parcelle) else UNSELECTED_STYLE
    return layer_style(state, role)


def configuration_value(state: dict[str, Any], key: str, default: Any = None) -> Any:
    return (state.get("configuration") or {}).get(key, default)
