"""Configurable integer and decimal scanners."""

from .grammar import DIGITS, SIGN, DecimalGrammar, IntegerGrammar, NumericGrammar, build_numeric
from .results import DecimalSplitResult, IntegerSplitResult
from .scanners import NumericMatch, match_decimal, match_integer

__all__ = [
    "DIGITS",
    "SIGN",
    "DecimalGrammar",
    "DecimalSplitResult",
    "IntegerGrammar",
    "IntegerSplitResult",
    "NumericGrammar",
    "NumericMatch",
    "build_numeric",
    "match_decimal",
    "match_integer",
]
