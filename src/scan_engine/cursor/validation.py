"""Bounds helpers shared by cursor operations."""

from __future__ import annotations

from .state import ScannerState


class ScannerStateError(RuntimeError):
    """Raised when a snapshot cannot be loaded onto the scanner text."""

    def __init__(self, message: str, *, state: ScannerState | None = None) -> None:
        super().__init__(message)
        self.state = state


def clamp_position(length: int, pos: int) -> int:
    if pos < 0:
        return 0
    if pos > length:
        return length
    return pos


def ensure_state(length: int, state: ScannerState) -> ScannerState:
    if state.pos < 0 or state.pos > length:
        raise ScannerStateError("Position out of range", state=state)
    if state.last_pos < 0 or state.last_pos > length:
        raise ScannerStateError("Last position out of range", state=state)
    return state
