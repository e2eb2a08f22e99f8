"""Integer and decimal recognition on a speculative duplicate cursor.

Both recognizers run forward over sign, prefix, leading text and the digit
loop, then fix up ambiguous boundaries after the fact with ``backscan``: when
``leading`` and ``digits`` accept the same characters (leading zeros vs. the
digit ``0``) the forward pass cannot know where one ends, so digits are pulled
back off the tail of ``leading`` (and, for decimals, trailing text off the
tail of the fractional part).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from scan_engine.patterns import Literal, Pattern, backscan, backscan_any

from .grammar import DecimalGrammar, IntegerGrammar, NumericGrammar
from .results import DecimalSplitResult, IntegerSplitResult

if TYPE_CHECKING:  # pragma: no cover
    from scan_engine.scanner import Scanner

SplitResult = Union[IntegerSplitResult, DecimalSplitResult]


@dataclass(frozen=True, slots=True)
class NumericMatch:
    """A recognized number and the cursor position just past it."""

    result: SplitResult
    end: int

    def value(self, *, split: bool) -> Union[str, SplitResult]:
        return self.result if split else self.result.text


def _scan_optional(dup: "Scanner", pattern: Optional[Pattern]) -> Optional[str]:
    return None if pattern is None else dup.scan(pattern)


def _scan_repeated(dup: "Scanner", pattern: Optional[Pattern]) -> Optional[str]:
    """Literal patterns accumulate repeated matches; a regex matches once."""

    if pattern is None:
        return None
    if not isinstance(pattern, Literal):
        return dup.scan(pattern)
    collected: list[str] = []
    while True:
        found = dup.scan(pattern)
        if not found:
            return "".join(collected)
        collected.append(found)


def _scan_head(dup: "Scanner", grammar: NumericGrammar) -> tuple[Optional[str], ...]:
    sign = _scan_optional(dup, grammar.sign_pattern)
    prefix = _scan_optional(dup, grammar.prefix_pattern)
    leading = _scan_repeated(dup, grammar.leading_pattern)
    return sign, prefix, leading


def match_integer(scanner: "Scanner", grammar: IntegerGrammar) -> Optional[NumericMatch]:
    dup = scanner.duplicate()
    sign, prefix, leading = _scan_head(dup, grammar)
    digits = grammar.digit_patterns
    separator = grammar.separator_pattern

    number = ""
    found_digit = False
    while not dup.eos:
        digit = dup.scan(*digits)
        if digit:
            number += digit
            found_digit = True
            continue
        found_separator = _scan_optional(dup, separator)
        if found_separator:
            if not grammar.remove_separators:
                number += found_separator
            continue
        break

    # "0" alone lands in leading; hand its last digit back to the number.
    if not found_digit and leading:
        reclaimed = backscan_any(leading, digits)
        if reclaimed.matched:
            number = reclaimed.result + number
            leading = reclaimed.new_text
            found_digit = True

    if not found_digit:
        return None

    postfix = _scan_optional(dup, grammar.postfix_pattern)
    result = IntegerSplitResult.from_parts(
        sign=sign, prefix=prefix, leading=leading, number=number, postfix=postfix
    )
    return NumericMatch(result=result, end=dup.pos)


def match_decimal(scanner: "Scanner", grammar: DecimalGrammar) -> Optional[NumericMatch]:
    dup = scanner.duplicate()
    sign, prefix, leading = _scan_head(dup, grammar)
    digits = grammar.digit_patterns
    separator = grammar.separator_pattern
    radix_pattern = grammar.radix_pattern

    whole = ""
    fractional = ""
    radix: Optional[str] = None
    found_digit = False
    while not dup.eos:
        digit = dup.scan(*digits)
        if digit:
            if radix is None:
                whole += digit
            else:
                fractional += digit
            found_digit = True
            continue
        found_separator = _scan_optional(dup, separator)
        if found_separator:
            if not grammar.remove_separators:
                if radix is None:
                    whole += found_separator
                else:
                    fractional += found_separator
            continue
        if radix is None:
            found_radix = dup.scan(radix_pattern)
            if found_radix:
                radix = found_radix
                continue
        break

    # Keep at least one character of leading text once the whole part has a
    # digit, so "00.5" splits as leading "0" / whole "0".
    if not whole and leading:
        reclaimed = backscan_any(leading, digits)
        while reclaimed.matched and (not whole or len(leading) > 1):
            leading = reclaimed.new_text
            whole = reclaimed.result + whole
            found_digit = True
            reclaimed = backscan_any(leading, digits)

    if not found_digit:
        return None

    trailing: Optional[str] = None
    trailing_pattern = grammar.trailing_pattern
    if trailing_pattern is not None:
        trailing = ""
        # The fractional part always keeps one character: ".0" is a number.
        tail = backscan(fractional, trailing_pattern)
        while tail.matched and len(fractional) > 1:
            fractional = tail.new_text
            trailing = tail.result + trailing
            tail = backscan(fractional, trailing_pattern)
        trailing += _scan_repeated(dup, trailing_pattern) or ""

    postfix = _scan_optional(dup, grammar.postfix_pattern)
    result = DecimalSplitResult.from_parts(
        sign=sign,
        prefix=prefix,
        leading=leading,
        whole=whole,
        radix=radix,
        fractional=fractional,
        trailing=trailing,
        postfix=postfix,
    )
    return NumericMatch(result=result, end=dup.pos)
