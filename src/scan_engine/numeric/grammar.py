"""Configuration for the integer and decimal recognizers."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Optional, TypeVar

from scan_engine.patterns import Literal, Pattern, PatternLike, as_pattern

SIGN = re.compile(r"[+-]?")
DIGITS = re.compile(r"\d")

GrammarT = TypeVar("GrammarT", bound="NumericGrammar")


def _optional(value: Optional[PatternLike]) -> Optional[Pattern]:
    return None if value is None else as_pattern(value)


@dataclass(frozen=True, slots=True)
class NumericGrammar:
    """Parts shared by integers and decimals.

    Every optional part may be ``None`` to disable it. ``digits`` given as a
    plain string is a character set: each character is tried as its own
    literal, so ``"01"`` recognizes binary digits.
    """

    sign: Optional[PatternLike] = SIGN
    prefix: Optional[PatternLike] = None
    leading: Optional[PatternLike] = "0"
    digits: PatternLike = DIGITS
    separator: Optional[PatternLike] = ","
    postfix: Optional[PatternLike] = None
    remove_separators: bool = True
    split: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.digits, str) and not self.digits:
            raise ValueError("digits cannot be empty")

    @property
    def digit_patterns(self) -> tuple[Pattern, ...]:
        if isinstance(self.digits, str):
            return tuple(Literal(char) for char in self.digits)
        return (as_pattern(self.digits),)

    @property
    def sign_pattern(self) -> Optional[Pattern]:
        return _optional(self.sign)

    @property
    def prefix_pattern(self) -> Optional[Pattern]:
        return _optional(self.prefix)

    @property
    def leading_pattern(self) -> Optional[Pattern]:
        return _optional(self.leading)

    @property
    def separator_pattern(self) -> Optional[Pattern]:
        return _optional(self.separator)

    @property
    def postfix_pattern(self) -> Optional[Pattern]:
        return _optional(self.postfix)


@dataclass(frozen=True, slots=True)
class IntegerGrammar(NumericGrammar):
    """Sign, prefix, leading text, digits with separators, postfix."""


@dataclass(frozen=True, slots=True)
class DecimalGrammar(NumericGrammar):
    """Integer parts plus a radix point and trailing text (``1.500`` -> ``00``)."""

    radix: PatternLike = "."
    trailing: Optional[PatternLike] = "0"

    @property
    def radix_pattern(self) -> Pattern:
        return as_pattern(self.radix)

    @property
    def trailing_pattern(self) -> Optional[Pattern]:
        return _optional(self.trailing)


def build_numeric(
    default: type[GrammarT], grammar: Optional[GrammarT] = None, **options: Any
) -> GrammarT:
    """Return ``grammar`` (or ``default()``) with ``options`` applied on top."""

    base = grammar or default()
    return replace(base, **options) if options else base


__all__ = [
    "DIGITS",
    "SIGN",
    "DecimalGrammar",
    "IntegerGrammar",
    "NumericGrammar",
    "build_numeric",
]
