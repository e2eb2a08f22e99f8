"""Reverse matching: find a pattern at the tail of a string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .models import PatternLike, as_pattern


@dataclass(frozen=True, slots=True)
class BackscanResult:
    """Matched tail (``None`` on miss) and the input with that tail removed."""

    result: Optional[str]
    new_text: str

    @property
    def matched(self) -> bool:
        return self.result is not None


def backscan(text: str, pattern: PatternLike) -> BackscanResult:
    """Match ``pattern`` against the shortest possible suffix of ``text``.

    Suffixes are tried from length 1 upwards, stopping short of the whole
    string; a one-character ``text`` is instead tested as a whole. The
    shortest-first order lets numeric scanners peel off one digit at a time.

    >>> backscan("aab0", "0")
    BackscanResult(result='0', new_text='aab')
    """

    compiled = as_pattern(pattern)

    if len(text) == 1:
        if compiled.matches_whole(text):
            return BackscanResult(result=text, new_text="")
        return BackscanResult(result=None, new_text=text)

    for offset in range(1, len(text)):
        tail = text[-offset:]
        if compiled.matches_head(tail):
            return BackscanResult(result=tail, new_text=text[:-offset])

    return BackscanResult(result=None, new_text=text)


def backscan_any(text: str, patterns: Iterable[PatternLike]) -> BackscanResult:
    """Backscan each pattern in order and return the first hit."""

    for pattern in patterns:
        outcome = backscan(text, pattern)
        if outcome.matched:
            return outcome
    return BackscanResult(result=None, new_text=text)
