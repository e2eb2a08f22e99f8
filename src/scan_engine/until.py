"""Consume text up to the first of several terminators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from scan_engine.cursor import ScannerState
from scan_engine.patterns import PatternLike, as_patterns

if TYPE_CHECKING:  # pragma: no cover
    from scan_engine.scanner import Scanner


def scan_until(
    scanner: "Scanner",
    patterns: Iterable[PatternLike],
    *,
    fail_if_none: bool = False,
    include_pattern: bool = False,
) -> Optional[str]:
    terminators = as_patterns(patterns)
    dup = scanner.duplicate()
    pieces: list[str] = []
    terminator: Optional[str] = None

    while not dup.eos:
        found = dup.scan(*terminators)
        if found:
            terminator = found
            break
        pieces.append(dup.grab())

    if terminator is None and fail_if_none:
        return None

    consumed = "".join(pieces)
    if terminator is None:
        result = consumed
    elif include_pattern:
        result = consumed + terminator
    else:
        # Leave the terminator for the next scan.
        dup.undo_last_step()
        result = consumed

    scanner.load_state(ScannerState(pos=dup.pos, last_pos=scanner.pos, last_match=result))
    return result
