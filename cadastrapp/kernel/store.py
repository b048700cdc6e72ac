"""
Cadastrapp Kernel — Store

Holds the single application state and is its only writer. Sits between the
pure reducer and the collaborators (search results, configuration fetch,
map and UI code) that dispatch actions and read state.

Operations: dispatch, subscribe, teardown
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from cadastrapp.config import settings
from cadastrapp.kernel.actions import InvalidActionError, parse_action, tear_down
from cadastrapp.kernel.reducer import default_state, reduce
from cadastrapp.kernel.validation import validate_action

logger = logging.getLogger(__name__)

Listener = Callable[[dict[str, Any]], None]


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ReentrantDispatchError(RuntimeError):
    """A listener tried to dispatch while the store was still dispatching."""


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class SelectionStore:
    """
    State holder for one plot-selection tool instance.

    Actions are reduced one at a time, to completion, in arrival order.
    Listeners run after each state change and must not dispatch.
    """

    def __init__(
        self,
        state: dict[str, Any] | None = None,
        *,
        validate: bool | None = None,
        strict: bool | None = None,
    ) -> None:
        self._state = default_state() if state is None else state
        self._validate = settings.VALIDATE_ACTIONS if validate is None else validate
        self._strict = settings.STRICT_ACTIONS if strict is None else strict
        self._listeners: list[Listener] = []
        self._dispatching = False

    @property
    def state(self) -> dict[str, Any]:
        return self._state

    def dispatch(self, action: Any) -> dict[str, Any]:
        """
        Reduce one action into the held state and notify listeners.

        Wire dicts are decoded first. Returns the new state.

        Raises:
            ReentrantDispatchError: called from a listener
            UnknownActionError / InvalidActionError: undecodable wire dict
            InvalidActionError: strict mode and the action fails validation
        """
        if self._dispatching:
            raise ReentrantDispatchError("Listeners may not dispatch actions")

        if isinstance(action, dict):
            action = parse_action(action)

        if self._validate:
            errors = validate_action(action)
            if errors:
                action_type = getattr(action, "type", type(action).__name__)
                if self._strict:
                    raise InvalidActionError(action_type, errors)
                logger.warning("SelectionStore: %s failed validation: %s", action_type, "; ".join(errors))

        self._dispatching = True
        try:
            previous = self._state
            self._state = reduce(previous, action)
        finally:
            self._dispatching = False

        if self._state is previous:
            logger.debug("SelectionStore: %r left state unchanged", action)
            return self._state

        logger.debug("SelectionStore: applied %s", getattr(action, "type", action))
        self._notify()
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def teardown(self) -> dict[str, Any]:
        """Reset to the startup state."""
        logger.info("SelectionStore: teardown")
        return self.dispatch(tear_down())

    def _notify(self) -> None:
        self._dispatching = True
        try:
            for listener in list(self._listeners):
                listener(self._state)
        finally:
            self._dispatching = False
