"""Cursor engine: source text plus position, last match, and one-step undo."""

from __future__ import annotations

from typing import Optional, TypeVar

from scan_engine.runtime import telemetry

from .history import StepHistory
from .state import ScannerState
from .validation import clamp_position, ensure_state

EngineT = TypeVar("EngineT", bound="CursorEngine")


class CursorEngine:
    """Owns the scanned text and every field that describes the cursor.

    All position changes go through ``move_position``/``set_position``/
    ``load_state``, each of which captures the outgoing state first so that
    ``undo_last_step`` can reverse exactly one step.
    """

    def __init__(self, text: str = "", *, logger_name: str | None = None) -> None:
        self._text = text
        self._pos = 0
        self._last_pos = 0
        self._last_match: Optional[str] = None
        self._history = StepHistory()
        self._logger_name = logger_name
        self.insensitive = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pos={self._pos}, length={len(self._text)}, "
            f"last_match={self._last_match!r})"
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def last_pos(self) -> int:
        return self._last_pos

    @property
    def last_match(self) -> Optional[str]:
        return self._last_match

    @property
    def last_state(self) -> ScannerState:
        return self._history.previous

    @property
    def state(self) -> ScannerState:
        return ScannerState(
            pos=self._pos, last_pos=self._last_pos, last_match=self._last_match
        )

    @property
    def unscanned_text(self) -> str:
        return self._text[self._pos :]

    @property
    def scanned_text(self) -> str:
        return self._text[: self._pos]

    @property
    def eos(self) -> bool:
        return self._pos >= len(self._text)

    def _apply(self, state: ScannerState) -> None:
        self._pos = state.pos
        self._last_pos = state.last_pos
        self._last_match = state.last_match

    def load_state(self, state: ScannerState) -> None:
        ensure_state(len(self._text), state)
        self._history.capture(self.state)
        self._apply(state)

    def move_position(self, n: int) -> None:
        if n == 0:
            return
        self._history.capture(self.state)
        self._last_pos = self._pos
        self._pos = clamp_position(len(self._text), self._pos + n)

    def set_position(self, n: int) -> None:
        self._history.capture(self.state)
        self._last_pos = self._pos
        self._pos = clamp_position(len(self._text), n)

    def peek(self, n: int = 1) -> str:
        return self.unscanned_text[:n]

    def grab(self, n: int = 1) -> str:
        text = self.peek(n)
        self.update_match(text)
        return text

    def update_match(self, text: str) -> None:
        """Advance past ``text`` and record it as the latest match."""

        self.move_position(len(text))
        self._last_match = text

    def undo_last_step(self) -> None:
        """Swap the live state with the one captured before the last change."""

        self._apply(self._history.swap(self.state))

    def reset(self) -> None:
        self._pos = 0
        self._last_pos = 0
        self._last_match = None
        self._history.clear()
        self.insensitive = False
        telemetry.record_event(
            "cursor.reset", level="debug", logger_name=self._logger_name
        )

    def terminate(self, *, clear: bool = False) -> None:
        self.set_position(len(self._text))
        if clear:
            self._last_match = None

    def append(self, text: str) -> None:
        self._text += text
        telemetry.record_event(
            "cursor.append",
            level="debug",
            data={"added": len(text), "length": len(self._text)},
            logger_name=self._logger_name,
        )

    def prepend(self, text: str, *, reset: bool = False) -> None:
        """Insert ``text`` before the source.

        Without ``reset`` every recorded position (including the undo slot)
        moves forward by ``len(text)`` so it keeps pointing at the same
        characters.
        """

        self._text = text + self._text
        if reset:
            self.reset()
        else:
            offset = len(text)
            self._pos += offset
            self._last_pos += offset
            self._history.shift(offset)
        telemetry.record_event(
            "cursor.prepend",
            level="debug",
            data={"added": len(text), "reset": reset},
            logger_name=self._logger_name,
        )

    def duplicate(self: EngineT) -> EngineT:
        """Return an independent engine positioned exactly like this one."""

        dup = type(self)(self._text, logger_name=self._logger_name)
        dup._apply(self.state)
        dup._history.capture(self._history.previous)
        dup.insensitive = self.insensitive
        return dup
