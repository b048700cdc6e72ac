"""
Cadastrapp Kernel — Action Validation

Structural checks on action payloads, done by collaborators before dispatch.
The reducer never calls this: it takes whatever it is given.

Validation is structural (is every plot identified? are indexes sane?),
not semantic (does the plot exist in the active tab?).
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from cadastrapp.kernel.types import (
    ACTION_CLASSES,
    AddPlots,
    DeselectPlots,
    Loading,
    Plot,
    RemovePlots,
    RemovePlotSelectionTab,
    SelectPlots,
    SetActivePlotSelection,
    SetLayerStyle,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_action(action: Any) -> list[str]:
    """
    Validate an action's payload structure.
    Returns a list of error strings. Empty list = valid.

    Actions with no payload worth checking (teardown, tab creation,
    configuration) are always valid. Unknown objects are reported.
    """
    validator = _VALIDATORS.get(type(action))
    if validator is None:
        if isinstance(action, ACTION_CLASSES):
            return []
        return [f"Unknown action: {type(action).__name__}"]
    return validator(action)


def validate_plot(plot: Any) -> list[str]:
    """Check one plot record. Extra fields are allowed."""
    if not isinstance(plot, dict):
        return ["plot must be an object"]
    try:
        Plot.model_validate(plot)
    except ValidationError as e:
        return [f"plot {'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
    return []


# ---------------------------------------------------------------------------
# Per-action validators
# ---------------------------------------------------------------------------


def _validate_plots(plots: list[Any], label: str) -> list[str]:
    errors: list[str] = []
    for i, plot in enumerate(plots):
        for err in validate_plot(plot):
            errors.append(f"{label}[{i}]: {err}")
    return errors


def _validate_loading(a: Loading) -> list[str]:
    if not a.name:
        return ["loading requires a non-empty 'name'"]
    return []


def _validate_add_plots(a: AddPlots) -> list[str]:
    errors = _validate_plots(a.plots, "plots")
    seen: set[str] = set()
    for plot in a.plots:
        parcelle = plot.get("parcelle") if isinstance(plot, dict) else None
        if not isinstance(parcelle, str):
            continue
        if parcelle in seen:
            # A second occurrence in the same batch would toggle selection.
            errors.append(f"Duplicate parcelle in batch: {parcelle}")
        seen.add(parcelle)
    return errors


def _validate_remove_plots(a: RemovePlots) -> list[str]:
    return [f"parcelles[{i}]: empty identifier" for i, p in enumerate(a.parcelles) if not p]


def _validate_select_plots(a: SelectPlots | DeselectPlots) -> list[str]:
    return _validate_plots(a.plots, "plots")


def _validate_remove_plot_selection(a: RemovePlotSelectionTab) -> list[str]:
    if a.active is not None and a.active < 0:
        return [f"Invalid tab index: {a.active}"]
    return []


def _validate_set_active_plot_selection(a: SetActivePlotSelection) -> list[str]:
    if a.active < 0:
        return [f"Invalid tab index: {a.active}"]
    return []


def _validate_set_layer_style(a: SetLayerStyle) -> list[str]:
    if not a.style_type:
        return ["set_layer_style requires a non-empty 'styleType'"]
    return []


_VALIDATORS: dict[type, Any] = {
    Loading: _validate_loading,
    AddPlots: _validate_add_plots,
    RemovePlots: _validate_remove_plots,
    SelectPlots: _validate_select_plots,
    DeselectPlots: _validate_select_plots,
    RemovePlotSelectionTab: _validate_remove_plot_selection,
    SetActivePlotSelection: _validate_set_active_plot_selection,
    SetLayerStyle: _validate_set_layer_style,
}
