"""
Cadastrapp Kernel — the pure selection engine.

Components:
  actions     — action creators and wire codec
  validation  — structural payload checks for collaborators
  reducer     — (state, action) → state  (pure, deterministic)
  selectors   — read helpers for rendering code
  store       — single-writer state holder around the reducer
  stream      — JSONL action log decoding
"""

from cadastrapp.kernel.actions import (
    InvalidActionError,
    UnknownActionError,
    action_to_dict,
    parse_action,
)
from cadastrapp.kernel.reducer import default_state, reduce, replay, toggle_selection
from cadastrapp.kernel.selectors import (
    active_plot_selection_index,
    active_selection,
    configuration_value,
    current_plots,
    is_loading,
    is_selected,
    layer_style,
    plot_style,
    selected_plots,
)
from cadastrapp.kernel.store import ReentrantDispatchError, SelectionStore
from cadastrapp.kernel.stream import ActionStreamParser, read_actions
from cadastrapp.kernel.validation import validate_action

__all__ = [
    "reduce",
    "replay",
    "default_state",
    "toggle_selection",
    "parse_action",
    "action_to_dict",
    "validate_action",
    "active_plot_selection_index",
    "active_selection",
    "current_plots",
    "selected_plots",
    "is_selected",
    "is_loading",
    "layer_style",
    "plot_style",
    "configuration_value",
    "ActionStreamParser",
    "read_actions",
    "SelectionStore",
    "InvalidActionError",
    "UnknownActionError",
    "ReentrantDispatchError",
]
