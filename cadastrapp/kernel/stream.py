"""
JSONL action stream decoder.

Buffers streaming text until newlines, decodes each line into an Action,
and skips malformed JSON, unknown action types and invalid payloads with a
warning.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from cadastrapp.kernel.actions import InvalidActionError, UnknownActionError, parse_action

logger = logging.getLogger(__name__)


class ActionStreamParser:
    """
    Parses streaming JSONL action logs.

    Accumulates partial chunks in a buffer and emits decoded actions as
    complete lines become available.
    """

    def __init__(self) -> None:
        self.buffer = ""

    def feed(self, chunk: str) -> list[Any]:
        """
        Feed a text chunk (may be partial), return any complete decoded actions.

        Args:
            chunk: Raw text from the stream

        Returns:
            List of actions, one per complete valid line
        """
        self.buffer += chunk
        actions = []
        while "\n" in self.buffer:
            line, self.buffer = self.buffer.split("\n", 1)
            action = self._decode(line)
            if action is not None:
                actions.append(action)
        return actions

    def flush(self) -> list[Any]:
        """
        Decode whatever is left in the buffer as a final line.

        Call this after the stream ends to handle input with no trailing newline.
        """
        line, self.buffer = self.buffer, ""
        action = self._decode(line)
        return [] if action is None else [action]

    @staticmethod
    def _decode(line: str) -> Any:
        stripped = line.strip()
        if not stripped:
            return None
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            logger.warning("ActionStreamParser: skipping malformed line: %r", stripped[:200])
            return None
        try:
            return parse_action(data)
        except UnknownActionError as e:
            logger.warning("ActionStreamParser: skipping unknown action %r", e.action_type)
        except InvalidActionError as e:
            logger.warning("ActionStreamParser: skipping invalid action: %s", e)
        return None


def read_actions(lines: Iterable[str]) -> Iterator[Any]:
    """Decode an iterable of text lines (e.g. an open file) into actions."""
    parser = ActionStreamParser()
    for line in lines:
        yield from parser.feed(line if line.endswith("\n") else line + "\n")
    yield from parser.flush()
