"""Cursor state, one-step undo, and the cursor engine."""

from .engine import CursorEngine
from .history import StepHistory
from .state import INITIAL_STATE, ScannerState
from .validation import ScannerStateError, clamp_position, ensure_state

__all__ = [
    "CursorEngine",
    "INITIAL_STATE",
    "ScannerState",
    "ScannerStateError",
    "StepHistory",
    "clamp_position",
    "ensure_state",
]
