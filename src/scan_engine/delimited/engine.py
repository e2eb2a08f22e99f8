"""Recursive-descent scanning of start/end delimited spans."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

from scan_engine.cursor import ScannerState
from scan_engine.patterns import backscan

from .grammar import DelimiterGrammar

if TYPE_CHECKING:  # pragma: no cover
    from scan_engine.scanner import Scanner


def _find_nested(
    scanner: "Scanner", candidates: Sequence[DelimiterGrammar]
) -> Optional[DelimiterGrammar]:
    """Return the first candidate whose start delimiter sits at the cursor."""

    if scanner.scan(*(candidate.start for candidate in candidates)) is None:
        return None
    # Rewind so the nested scan sees its own start delimiter.
    scanner.undo_last_step()
    for candidate in candidates:
        if scanner.check_string(candidate.start) is not None:
            return candidate
    return None  # pragma: no cover - scan above guarantees a hit


def scan_delimited(scanner: "Scanner", grammar: DelimiterGrammar) -> Optional[str]:
    """Scan one span described by ``grammar`` starting at the cursor.

    Works on a duplicate and commits back onto ``scanner`` only when the span
    (and every nested span inside it) matched. Returns the full span when
    ``keep_delimiters`` is set, otherwise the text between the delimiters.
    """

    dup = scanner.duplicate()
    start = dup.scan_string(grammar.start)
    if start is None:
        return None

    candidates = grammar.nested()
    pieces: list[str] = []
    end: Optional[str] = None
    escaped = False

    while not dup.eos:
        if escaped:
            pieces.append(dup.grab())
            escaped = False
            continue

        end = dup.scan_string(grammar.end)
        if end is not None:
            break

        if grammar.escape is not None and dup.scan_string(grammar.escape) is not None:
            escaped = True
            continue

        nested = _find_nested(dup, candidates) if candidates else None
        if nested is None:
            pieces.append(dup.grab())
            continue

        outcome = scan_delimited(dup, nested)
        if outcome is None:
            return None

        # A nested span with a different closer may have run over the outer
        # closer; drop it again unless the outer span keeps its delimiters.
        if nested.end != grammar.end and not grammar.keep_delimiters:
            swallowed = backscan(outcome, grammar.end)
            if swallowed.matched:
                outcome = swallowed.new_text
        pieces.append(outcome)

    if end is None and grammar.no_end_fail:
        return None

    inner_text = "".join(pieces)
    full_match = start + inner_text + (end or "")
    scanner.load_state(
        ScannerState(pos=dup.pos, last_pos=scanner.pos, last_match=full_match)
    )
    return full_match if grammar.keep_delimiters else inner_text
