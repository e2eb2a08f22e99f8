"""Cursor snapshot captured before and after every position change."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True, slots=True)
class ScannerState:
    """Immutable record of where a scanner is and what it last matched."""

    pos: int = 0
    last_pos: int = 0
    last_match: Optional[str] = None

    def shifted(self, offset: int) -> "ScannerState":
        """Return a copy with both positions moved by ``offset``."""

        return replace(self, pos=self.pos + offset, last_pos=self.last_pos + offset)


INITIAL_STATE = ScannerState()
