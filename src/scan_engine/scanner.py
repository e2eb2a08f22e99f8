"""High-level scanner façade: cursor engine plus every match operator."""

from __future__ import annotations

import re
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, Optional, Union

from scan_engine.cursor import CursorEngine
from scan_engine.delimited import DelimiterGrammar, build_grammar, scan_delimited
from scan_engine.numeric import (
    DecimalGrammar,
    DecimalSplitResult,
    IntegerGrammar,
    IntegerSplitResult,
    NumericMatch,
    build_numeric,
    match_decimal,
    match_integer,
)
from scan_engine.patterns import (
    BackscanResult,
    Literal,
    PatternLike,
    Regex,
    as_pattern,
    backscan,
)
from scan_engine.runtime.telemetry import SpanHandle, span
from scan_engine.until import scan_until

IntegerValue = Union[str, IntegerSplitResult]
DecimalValue = Union[str, DecimalSplitResult]


class Scanner(CursorEngine):
    """Lexical scanner over an in-memory string.

    ``check*`` operators never move the cursor; ``scan*`` operators commit a
    successful match and leave the scanner untouched on failure. Composite
    operators (delimited text, scan-until, numbers) work on a ``duplicate()``
    and commit with a single state update, so a failed attempt has no visible
    effect.
    """

    # -- primitives ---------------------------------------------------------

    def check_string(self, s: str) -> Optional[str]:
        return Literal(s).match(self.unscanned_text, insensitive=self.insensitive)

    def scan_string(self, s: str) -> Optional[str]:
        match = self.check_string(s)
        if match is not None:
            self.update_match(match)
        return match

    def check_regex(self, r: Union["re.Pattern[str]", Regex]) -> Optional[str]:
        regex = r if isinstance(r, Regex) else Regex(r)
        return regex.match(self.unscanned_text, insensitive=self.insensitive)

    def scan_regex(self, r: Union["re.Pattern[str]", Regex]) -> Optional[str]:
        match = self.check_regex(r)
        if match is not None:
            self.update_match(match)
        return match

    def check(self, *patterns: PatternLike) -> Optional[str]:
        """Return the match of the first pattern that matches, in given order."""

        remainder = self.unscanned_text
        for pattern in patterns:
            match = as_pattern(pattern).match(remainder, insensitive=self.insensitive)
            if match is not None:
                return match
        return None

    def scan(self, *patterns: PatternLike) -> Optional[str]:
        match = self.check(*patterns)
        if match:
            self.update_match(match)
        return match

    def skip(self, *patterns: PatternLike) -> int:
        """Move past the first matching pattern without touching ``last_match``."""

        match = self.check(*patterns)
        if match:
            self.move_position(len(match))
        return len(match or "")

    @staticmethod
    def backscan(text: str, pattern: PatternLike) -> BackscanResult:
        return backscan(text, pattern)

    # -- composite operators --------------------------------------------------

    @contextmanager
    def _operation(self, name: str, **metadata: Any) -> Iterator[SpanHandle]:
        with span(
            f"scanner::{name}",
            logger_name=self._logger_name,
            component="scanner",
            metadata={"pos": self.pos, **metadata},
        ) as handle:
            yield handle

    def scan_delimited(
        self, grammar: Optional[DelimiterGrammar] = None, **options: Any
    ) -> Optional[str]:
        """Scan text between a start and end delimiter.

        ``options`` are ``DelimiterGrammar`` fields applied over ``grammar``
        (or over the defaults, a backslash-escaped double-quoted string)::

            scanner.scan_delimited(
                start="[", end="]", inner=[{"start": '"', "end": '"'}]
            )

        Returns the inner text (or the full span with ``keep_delimiters``), or
        ``None`` when the span does not start here, never ends while
        ``no_end_fail`` is set, or a nested span fails.
        """

        resolved = build_grammar(grammar, **options)
        start = self.pos
        with self._operation(
            "scan_delimited", start=resolved.start, end=resolved.end
        ) as handle:
            outcome = scan_delimited(self, resolved)
            handle.report(matched=outcome is not None, consumed=self.pos - start)
            return outcome

    def scan_until(
        self,
        patterns: Iterable[PatternLike],
        *,
        fail_if_none: bool = False,
        include_pattern: bool = False,
    ) -> Optional[str]:
        """Consume text up to (optionally including) the first terminator."""

        start = self.pos
        with self._operation("scan_until") as handle:
            outcome = scan_until(
                self,
                patterns,
                fail_if_none=fail_if_none,
                include_pattern=include_pattern,
            )
            handle.report(matched=outcome is not None, consumed=self.pos - start)
            return outcome

    def _commit_number(self, match: NumericMatch) -> None:
        self.update_match(self.text[self.pos : match.end])

    def check_integer(
        self, grammar: Optional[IntegerGrammar] = None, **options: Any
    ) -> Optional[IntegerValue]:
        """Recognize an integer at the cursor without moving it.

        See ``IntegerGrammar`` for the configurable parts. Returns the matched
        text, an ``IntegerSplitResult`` when ``split`` is set, or ``None``.
        """

        resolved = build_numeric(IntegerGrammar, grammar, **options)
        with self._operation("check_integer") as handle:
            match = match_integer(self, resolved)
            handle.report(matched=match is not None)
            return None if match is None else match.value(split=resolved.split)

    def scan_integer(
        self, grammar: Optional[IntegerGrammar] = None, **options: Any
    ) -> Optional[IntegerValue]:
        resolved = build_numeric(IntegerGrammar, grammar, **options)
        start = self.pos
        with self._operation("scan_integer") as handle:
            match = match_integer(self, resolved)
            if match is not None:
                self._commit_number(match)
            handle.report(matched=match is not None, consumed=self.pos - start)
            return None if match is None else match.value(split=resolved.split)

    def check_decimal(
        self, grammar: Optional[DecimalGrammar] = None, **options: Any
    ) -> Optional[DecimalValue]:
        """Recognize a decimal number at the cursor without moving it.

        Like ``check_integer`` with a radix point (``radix``) and trailing
        text (``trailing``, trailing zeros by default).
        """

        resolved = build_numeric(DecimalGrammar, grammar, **options)
        with self._operation("check_decimal") as handle:
            match = match_decimal(self, resolved)
            handle.report(matched=match is not None)
            return None if match is None else match.value(split=resolved.split)

    def scan_decimal(
        self, grammar: Optional[DecimalGrammar] = None, **options: Any
    ) -> Optional[DecimalValue]:
        resolved = build_numeric(DecimalGrammar, grammar, **options)
        start = self.pos
        with self._operation("scan_decimal") as handle:
            match = match_decimal(self, resolved)
            if match is not None:
                self._commit_number(match)
            handle.report(matched=match is not None, consumed=self.pos - start)
            return None if match is None else match.value(split=resolved.split)


__all__ = ["Scanner"]
