"""
Cadastrapp Kernel — Action Construction

Factory functions for creating well-formed actions, plus the wire codec
(dict <-> Action). Used by collaborators to build intents before dispatching
them to the store, and by tests to build actions concisely.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from cadastrapp.kernel.types import (
    ACTION_TYPES,
    GLOBAL_LOADING,
    Action,
    AddPlots,
    AddPlotSelectionTab,
    DeselectPlots,
    Loading,
    RemovePlots,
    RemovePlotSelectionTab,
    SearchType,
    SelectionType,
    SelectPlots,
    SetActivePlotSelection,
    SetConfiguration,
    SetLayerStyle,
    TeardownApplication,
    ToggleSearchMode,
    ToggleSelectionMode,
)

_ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class UnknownActionError(ValueError):
    """Wire action has a type outside the known set."""

    def __init__(self, action_type: Any) -> None:
        super().__init__(f"UNKNOWN_ACTION: {action_type!r}")
        self.action_type = action_type


class InvalidActionError(ValueError):
    """Action is known but its payload is malformed."""

    def __init__(self, action_type: Any, errors: list[str]) -> None:
        super().__init__(f"INVALID_ACTION: {action_type}: {'; '.join(errors)}")
        self.action_type = action_type
        self.errors = errors


# ---------------------------------------------------------------------------
# Action creators
# ---------------------------------------------------------------------------


def set_configuration(configuration: dict[str, Any] | None) -> SetConfiguration:
    return SetConfiguration(configuration=configuration)


def loading(value: bool, name: str = GLOBAL_LOADING) -> Loading:
    """
    Loading flag change. With the default name only the global flag moves;
    any other name also tracks a per-feature flag.
    """
    return Loading(name=name, value=value)


def toggle_selection(selection_type: SelectionType | str | None) -> ToggleSelectionMode:
    """Pass None to switch the selection tool off."""
    return ToggleSelectionMode(selection_type=selection_type)


def toggle_search(search_type: SearchType | str | None) -> ToggleSearchMode:
    """Pass None to close the search panel."""
    return ToggleSearchMode(search_type=search_type)


def add_plots(plots: Iterable[dict[str, Any]]) -> AddPlots:
    return AddPlots(plots=list(plots))


def remove_plots(parcelles: Iterable[str]) -> RemovePlots:
    return RemovePlots(parcelles=list(parcelles))


def select_plots(plots: Iterable[dict[str, Any]]) -> SelectPlots:
    return SelectPlots(plots=list(plots))


def deselect_plots(plots: Iterable[dict[str, Any]]) -> DeselectPlots:
    return DeselectPlots(plots=list(plots))


def add_plot_selection() -> AddPlotSelectionTab:
    return AddPlotSelectionTab()


def remove_plot_selection(active: int | None = None) -> RemovePlotSelectionTab:
    return RemovePlotSelectionTab(active=active)


def tear_down() -> TeardownApplication:
    return TeardownApplication()


def set_active_plot_selection(active: int) -> SetActivePlotSelection:
    return SetActivePlotSelection(active=active)


def set_layer_style(style_type: str, value: dict[str, Any] | None) -> SetLayerStyle:
    return SetLayerStyle(style_type=style_type, value=value)


# ---------------------------------------------------------------------------
# Wire codec
# ---------------------------------------------------------------------------


def parse_action(data: dict[str, Any]) -> Action:
    """
    Decode a wire dict ({"type": "CADASTRAPP:...", ...payload}) into an Action.

    Payload keys use the wire spelling (selectionType, searchType, styleType).

    Raises:
        UnknownActionError: type missing or not one of ACTION_TYPES
        InvalidActionError: known type, malformed payload
    """
    if not isinstance(data, dict):
        raise InvalidActionError(None, ["action must be an object"])

    action_type = data.get("type")
    if action_type not in ACTION_TYPES:
        raise UnknownActionError(action_type)

    try:
        return _ACTION_ADAPTER.validate_python(data)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'][1:])}: {err['msg']}" for err in e.errors()]
        raise InvalidActionError(action_type, errors) from e


def action_to_dict(action: Action) -> dict[str, Any]:
    """Encode an Action into its wire dict."""
    return action.model_dump(by_alias=True)
