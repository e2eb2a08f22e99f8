"""Dataclasses describing delimited spans and how nested spans inherit."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional, Union


class _Inherit:
    """Sentinel for fields resolved from the enclosing grammar at scan time."""

    _instance: Optional["_Inherit"] = None

    def __new__(cls) -> "_Inherit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INHERIT"

    def __reduce__(self) -> str:
        return "INHERIT"


INHERIT: Any = _Inherit()


def _pick(value: Any, fallback: Any) -> Any:
    return fallback if value is INHERIT else value


def _check_delimiter(name: str, value: Any, *, allow_inherit: bool = True) -> None:
    if value is INHERIT and allow_inherit:
        return
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty string")


def _check_escape(value: Any, *, allow_inherit: bool = True) -> None:
    if value is None or (value is INHERIT and allow_inherit):
        return
    if not isinstance(value, str) or not value:
        raise ValueError("escape must be a non-empty string or None")


def _normalize_inner(items: Any) -> Any:
    if items is INHERIT:
        return items
    return tuple(
        item if isinstance(item, InnerDelimiterGrammar) else InnerDelimiterGrammar(**item)
        for item in items
    )


def _normalize_auto_nest(value: Any) -> Any:
    if value is INHERIT or value is None or isinstance(value, AutoNest):
        return value
    return AutoNest(**value)


@dataclass(frozen=True, slots=True)
class DelimiterGrammar:
    """Fully resolved description of one delimited span.

    The defaults scan a double-quoted string with backslash escapes and return
    the text between the quotes.
    """

    start: str = '"'
    end: str = '"'
    escape: Optional[str] = "\\"
    keep_delimiters: bool = False
    inner: tuple["InnerDelimiterGrammar", ...] = ()
    auto_nest: Optional["AutoNest"] = None
    no_end_fail: bool = True

    def __post_init__(self) -> None:
        _check_delimiter("start", self.start, allow_inherit=False)
        _check_delimiter("end", self.end, allow_inherit=False)
        _check_escape(self.escape, allow_inherit=False)
        if self.inner is INHERIT or self.auto_nest is INHERIT:
            raise ValueError("top-level grammars cannot inherit inner or auto_nest")
        object.__setattr__(self, "inner", _normalize_inner(self.inner))
        object.__setattr__(self, "auto_nest", _normalize_auto_nest(self.auto_nest))

    def nested(self) -> tuple["DelimiterGrammar", ...]:
        """Concrete grammars that may open inside this span, in priority order."""

        resolved = [item.resolve(self) for item in self.inner]
        if self.auto_nest is not None:
            resolved.append(self.auto_nest.materialize(self))
        return tuple(resolved)


@dataclass(frozen=True, slots=True)
class InnerDelimiterGrammar:
    """A span allowed inside another one.

    ``start``/``end`` are required. ``escape`` and ``no_end_fail`` left as
    ``INHERIT`` take the enclosing grammar's value. The rest do not inherit:
    ``keep_delimiters`` falls back to ``True`` so nested text survives
    verbatim in the outer match, ``inner`` to no nested spans and
    ``auto_nest`` to none.
    """

    start: str
    end: str
    escape: Union[str, None, _Inherit] = INHERIT
    keep_delimiters: Union[bool, _Inherit] = INHERIT
    inner: Union[tuple["InnerDelimiterGrammar", ...], _Inherit] = INHERIT
    auto_nest: Union["AutoNest", None, _Inherit] = INHERIT
    no_end_fail: Union[bool, _Inherit] = INHERIT

    def __post_init__(self) -> None:
        _check_delimiter("start", self.start)
        _check_delimiter("end", self.end)
        _check_escape(self.escape)
        object.__setattr__(self, "inner", _normalize_inner(self.inner))
        object.__setattr__(self, "auto_nest", _normalize_auto_nest(self.auto_nest))

    def resolve(self, parent: DelimiterGrammar) -> DelimiterGrammar:
        return DelimiterGrammar(
            start=self.start,
            end=self.end,
            escape=_pick(self.escape, parent.escape),
            keep_delimiters=_pick(self.keep_delimiters, True),
            inner=_pick(self.inner, ()),
            auto_nest=_pick(self.auto_nest, None),
            no_end_fail=_pick(self.no_end_fail, parent.no_end_fail),
        )


@dataclass(frozen=True, slots=True)
class AutoNest:
    """Template for a span that nests copies of its enclosing span.

    With every field left as ``INHERIT`` the nested span is identical to the
    one it appears in, which is how balanced ``{ ... { ... } ... }`` blocks
    are matched. The materialized grammar carries this template forward, so
    each level re-derives the next one instead of referencing itself.
    """

    start: Union[str, _Inherit] = INHERIT
    end: Union[str, _Inherit] = INHERIT
    escape: Union[str, None, _Inherit] = INHERIT
    keep_delimiters: Union[bool, _Inherit] = INHERIT
    inner: Union[tuple[InnerDelimiterGrammar, ...], _Inherit] = INHERIT
    no_end_fail: Union[bool, _Inherit] = INHERIT

    def __post_init__(self) -> None:
        _check_delimiter("start", self.start)
        _check_delimiter("end", self.end)
        _check_escape(self.escape)
        object.__setattr__(self, "inner", _normalize_inner(self.inner))

    def materialize(self, parent: DelimiterGrammar) -> DelimiterGrammar:
        return DelimiterGrammar(
            start=_pick(self.start, parent.start),
            end=_pick(self.end, parent.end),
            escape=_pick(self.escape, parent.escape),
            keep_delimiters=_pick(self.keep_delimiters, parent.keep_delimiters),
            inner=_pick(self.inner, parent.inner),
            auto_nest=self,
            no_end_fail=_pick(self.no_end_fail, parent.no_end_fail),
        )


def build_grammar(
    grammar: Optional[DelimiterGrammar] = None, **options: Any
) -> DelimiterGrammar:
    """Return ``grammar`` (or the defaults) with ``options`` applied on top."""

    base = grammar or DelimiterGrammar()
    return replace(base, **options) if options else base


__all__ = [
    "INHERIT",
    "AutoNest",
    "DelimiterGrammar",
    "InnerDelimiterGrammar",
    "build_grammar",
]
