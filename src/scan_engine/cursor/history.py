"""Single-step undo slot for cursor engines."""

from __future__ import annotations

from dataclasses import dataclass

from .state import INITIAL_STATE, ScannerState


@dataclass(slots=True)
class StepHistory:
    """Holds the state captured just before the latest position change.

    Only one level is kept: ``capture`` overwrites the slot and ``swap``
    exchanges it with the live state, so two swaps in a row cancel out.
    """

    previous: ScannerState = INITIAL_STATE

    def capture(self, current: ScannerState) -> None:
        self.previous = current

    def swap(self, current: ScannerState) -> ScannerState:
        restored = self.previous
        self.previous = current
        return restored

    def shift(self, offset: int) -> None:
        self.previous = self.previous.shifted(offset)

    def clear(self) -> None:
        self.previous = INITIAL_STATE
