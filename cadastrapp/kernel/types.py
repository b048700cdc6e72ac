"""
Cadastrapp Kernel — Shared Types

Action classes, enums and constants used across actions, validation,
reducer, selectors and store. These are the contracts that bind the kernel
together.

State itself is a plain dict tree (see reducer.default_state). Actions are
frozen pydantic models tagged by a literal `type` holding the wire name.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Wire action types
# ---------------------------------------------------------------------------

LOADING = "CADASTRAPP:LOADING"
ADD_PLOTS = "CADASTRAPP:ADD_PLOTS"
REMOVE_PLOTS = "CADASTRAPP:REMOVE_PLOTS"
ADD_PLOT_SELECTION = "CADASTRAPP:ADD_PLOT_SELECTION"
REMOVE_PLOT_SELECTION = "CADASTRAPP:REMOVE_PLOT_SELECTION"
SET_ACTIVE_PLOT_SELECTION = "CADASTRAPP:SET_ACTIVE_PLOT_SELECTION"
SELECT_PLOTS = "CADASTRAPP:SELECT_PLOTS"
DESELECT_PLOTS = "CADASTRAPP:DESELECT_PLOTS"
SET_CONFIGURATION = "CADASTRAPP:SET_CONFIGURATION"
TOGGLE_SELECTION = "CADASTRAPP:TOGGLE_SELECTION"
TOGGLE_SEARCH = "CADASTRAPP:TOGGLE_SEARCH"
TEAR_DOWN = "CADASTRAPP:TEAR_DOWN"
SET_LAYER_STYLE = "CADASTRAPP:SET_LAYER_STYLE"

ACTION_TYPES: set[str] = {
    LOADING,
    ADD_PLOTS,
    REMOVE_PLOTS,
    ADD_PLOT_SELECTION,
    REMOVE_PLOT_SELECTION,
    SET_ACTIVE_PLOT_SELECTION,
    SELECT_PLOTS,
    DESELECT_PLOTS,
    SET_CONFIGURATION,
    TOGGLE_SELECTION,
    TOGGLE_SEARCH,
    TEAR_DOWN,
    SET_LAYER_STYLE,
}

# Loading name that only drives the global flag
GLOBAL_LOADING = "loading"

# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

SELECTED_STYLE = "selected"
UNSELECTED_STYLE = "unselected"

DEFAULT_STYLES: dict[str, dict[str, Any]] = {
    SELECTED_STYLE: {
        "fillColor": "#81BEF7",
        "opacity": 0.6,
        "fillOpacity": 0.6,
        "color": "#111111",  # stroke color
        "weight": 4,
    },
    UNSELECTED_STYLE: {
        "fillColor": "#222111",
        "opacity": 0.4,
        "fillOpacity": 0.4,
        "color": "#111222",  # stroke color
        "weight": 2,
    },
}


# ---------------------------------------------------------------------------
# Tool modes
# ---------------------------------------------------------------------------


class SelectionType(str, Enum):
    """Map drawing tools used to pick plots."""

    POINT = "Point"
    LINE = "LineString"
    POLYGON = "Polygon"


class SearchType(str, Enum):
    """Search panels that can be opened."""

    PLOT = "plot"
    OWNER = "owner"
    COOWNER = "coownership"


# ---------------------------------------------------------------------------
# Plot
# ---------------------------------------------------------------------------


class Plot(BaseModel):
    """
    A cadastral parcel record. Only `parcelle` is known to the kernel;
    every other field is carried opaquely.
    """

    model_config = ConfigDict(extra="allow")

    parcelle: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class SetConfiguration(_Action):
    type: Literal["CADASTRAPP:SET_CONFIGURATION"] = SET_CONFIGURATION
    configuration: dict[str, Any] | None = None


class Loading(_Action):
    type: Literal["CADASTRAPP:LOADING"] = LOADING
    name: str = GLOBAL_LOADING
    value: bool = False


class ToggleSelectionMode(_Action):
    type: Literal["CADASTRAPP:TOGGLE_SELECTION"] = TOGGLE_SELECTION
    selection_type: SelectionType | None = Field(default=None, alias="selectionType")


class ToggleSearchMode(_Action):
    type: Literal["CADASTRAPP:TOGGLE_SEARCH"] = TOGGLE_SEARCH
    search_type: SearchType | None = Field(default=None, alias="searchType")


class AddPlots(_Action):
    type: Literal["CADASTRAPP:ADD_PLOTS"] = ADD_PLOTS
    plots: list[dict[str, Any]] = Field(default_factory=list)


class RemovePlots(_Action):
    type: Literal["CADASTRAPP:REMOVE_PLOTS"] = REMOVE_PLOTS
    parcelles: list[str] = Field(default_factory=list)


class SelectPlots(_Action):
    type: Literal["CADASTRAPP:SELECT_PLOTS"] = SELECT_PLOTS
    plots: list[dict[str, Any]] = Field(default_factory=list)


class DeselectPlots(_Action):
    type: Literal["CADASTRAPP:DESELECT_PLOTS"] = DESELECT_PLOTS
    plots: list[dict[str, Any]] = Field(default_factory=list)


class AddPlotSelectionTab(_Action):
    type: Literal["CADASTRAPP:ADD_PLOT_SELECTION"] = ADD_PLOT_SELECTION


class RemovePlotSelectionTab(_Action):
    type: Literal["CADASTRAPP:REMOVE_PLOT_SELECTION"] = REMOVE_PLOT_SELECTION
    active: int | None = None


class TeardownApplication(_Action):
    type: Literal["CADASTRAPP:TEAR_DOWN"] = TEAR_DOWN


class SetActivePlotSelection(_Action):
    type: Literal["CADASTRAPP:SET_ACTIVE_PLOT_SELECTION"] = SET_ACTIVE_PLOT_SELECTION
    active: int = 0


class SetLayerStyle(_Action):
    type: Literal["CADASTRAPP:SET_LAYER_STYLE"] = SET_LAYER_STYLE
    style_type: str = Field(alias="styleType")
    value: dict[str, Any] | None = None


Action = Annotated[
    SetConfiguration
    | Loading
    | ToggleSelectionMode
    | ToggleSearchMode
    | AddPlots
    | RemovePlots
    | SelectPlots
    | DeselectPlots
    | AddPlotSelectionTab
    | RemovePlotSelectionTab
    | TeardownApplication
    | SetActivePlotSelection
    | SetLayerStyle,
    Field(discriminator="type"),
]

ACTION_CLASSES: tuple[type[_Action], ...] = (
    SetConfiguration,
    Loading,
    ToggleSelectionMode,
    ToggleSearchMode,
    AddPlots,
    RemovePlots,
    SelectPlots,
    DeselectPlots,
    AddPlotSelectionTab,
    RemovePlotSelectionTab,
    TeardownApplication,
    SetActivePlotSelection,
    SetLayerStyle,
)
