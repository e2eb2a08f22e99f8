"""Literal and regex pattern variants matched against the unscanned text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain text that must appear verbatim at the cursor."""

    text: str

    def match(self, subject: str, *, insensitive: bool = False) -> Optional[str]:
        if not self.text:
            return None
        head = subject[: len(self.text)]
        if insensitive:
            found = head.casefold() == self.text.casefold()
        else:
            found = head == self.text
        return head if found else None

    def matches_whole(self, subject: str) -> bool:
        return subject == self.text

    def matches_head(self, subject: str) -> bool:
        return subject == self.text


@dataclass(frozen=True, slots=True)
class Regex:
    """Compiled expression matched anchored at the cursor."""

    pattern: re.Pattern[str]

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, re.Pattern):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    @property
    def is_empty(self) -> bool:
        return self.pattern.pattern == ""

    def compiled(self, *, insensitive: bool = False) -> re.Pattern[str]:
        if insensitive and not self.pattern.flags & re.IGNORECASE:
            return re.compile(self.pattern.pattern, self.pattern.flags | re.IGNORECASE)
        return self.pattern

    def match(self, subject: str, *, insensitive: bool = False) -> Optional[str]:
        if self.is_empty:
            return None
        found = self.compiled(insensitive=insensitive).match(subject)
        return found.group(0) if found else None

    def matches_whole(self, subject: str) -> bool:
        return self.pattern.fullmatch(subject) is not None

    def matches_head(self, subject: str) -> bool:
        return self.pattern.match(subject) is not None


Pattern = Union[Literal, Regex]
PatternLike = Union[str, "re.Pattern[str]", Literal, Regex]


def as_pattern(value: PatternLike) -> Pattern:
    """Coerce a caller-supplied pattern into one of the two variants."""

    if isinstance(value, (Literal, Regex)):
        return value
    if isinstance(value, str):
        return Literal(value)
    if isinstance(value, re.Pattern):
        return Regex(value)
    raise TypeError(f"Unsupported pattern type {type(value).__name__!r}")


def as_patterns(values: Iterable[PatternLike]) -> tuple[Pattern, ...]:
    return tuple(as_pattern(value) for value in values)


__all__ = [
    "Literal",
    "Regex",
    "Pattern",
    "PatternLike",
    "as_pattern",
    "as_patterns",
]
