"""Delimited-text grammars and the recursive span scanner."""

from .engine import scan_delimited
from .grammar import INHERIT, AutoNest, DelimiterGrammar, InnerDelimiterGrammar, build_grammar

__all__ = [
    "INHERIT",
    "AutoNest",
    "DelimiterGrammar",
    "InnerDelimiterGrammar",
    "build_grammar",
    "scan_delimited",
]
