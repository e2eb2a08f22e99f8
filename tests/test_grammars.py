import pickle

import pytest

from scan_engine import INHERIT, AutoNest, DelimiterGrammar, InnerDelimiterGrammar
from scan_engine.delimited import build_grammar
from scan_engine.numeric import DecimalGrammar, IntegerGrammar, build_numeric


def make_parent(**overrides: object) -> DelimiterGrammar:
    return DelimiterGrammar(**overrides)  # type: ignore[arg-type]


def test_mappings_are_coerced_into_grammars() -> None:
    grammar = DelimiterGrammar(
        inner=[{"start": "[", "end": "]"}],  # type: ignore[arg-type]
        auto_nest={"start": "'"},  # type: ignore[arg-type]
    )

    assert grammar.inner == (InnerDelimiterGrammar(start="[", end="]"),)
    assert grammar.auto_nest == AutoNest(start="'")


def test_inner_grammar_inherits_from_parent() -> None:
    parent = make_parent(
        escape="/",
        no_end_fail=False,
        keep_delimiters=False,
        inner=(InnerDelimiterGrammar(start="<", end=">"),),
        auto_nest=AutoNest(),
    )
    inner = InnerDelimiterGrammar(start="[", end="]")

    resolved = inner.resolve(parent)

    assert resolved.escape == "/"
    assert resolved.no_end_fail is False
    assert resolved.keep_delimiters is True
    assert resolved.inner == ()
    assert resolved.auto_nest is None


def test_inner_grammar_explicit_values_win() -> None:
    parent = make_parent(escape="/")
    inner = InnerDelimiterGrammar(start="[", end="]", escape=None, keep_delimiters=False)

    resolved = inner.resolve(parent)

    assert resolved.escape is None
    assert resolved.keep_delimiters is False


def test_auto_nest_materializes_parent_copy() -> None:
    template = AutoNest()
    parent = make_parent(start="{", end="}", auto_nest=template)

    (nested,) = parent.nested()

    assert (nested.start, nested.end) == ("{", "}")
    assert nested.auto_nest is template
    assert nested.nested()[0] == nested


def test_nested_orders_inner_before_auto_nest() -> None:
    parent = make_parent(
        inner=(InnerDelimiterGrammar(start="<", end=">"),), auto_nest=AutoNest()
    )

    starts = [grammar.start for grammar in parent.nested()]

    assert starts == ["<", '"']


@pytest.mark.parametrize(
    "kwargs",
    [
        {"start": ""},
        {"end": ""},
        {"escape": ""},
        {"start": INHERIT},
        {"inner": INHERIT},
        {"auto_nest": INHERIT},
    ],
)
def test_delimiter_grammar_validation(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        DelimiterGrammar(**kwargs)


def test_inner_grammar_requires_delimiters() -> None:
    with pytest.raises(ValueError):
        InnerDelimiterGrammar(start="", end="]")


def test_build_grammar_applies_options() -> None:
    base = DelimiterGrammar(start="(", end=")")

    assert build_grammar() == DelimiterGrammar()
    assert build_grammar(base) is base
    assert build_grammar(base, keep_delimiters=True).keep_delimiters is True
    assert base.keep_delimiters is False


def test_inherit_sentinel_survives_pickling() -> None:
    assert pickle.loads(pickle.dumps(INHERIT)) is INHERIT
    assert repr(INHERIT) == "INHERIT"


def test_build_numeric_defaults() -> None:
    assert build_numeric(IntegerGrammar) == IntegerGrammar()
    decimal = build_numeric(DecimalGrammar, split=True)

    assert isinstance(decimal, DecimalGrammar)
    assert decimal.split is True
    assert decimal.radix == "."
