"""Stateful lexical scanning engine over in-memory text."""

from .cursor import CursorEngine, ScannerState, ScannerStateError
from .delimited import INHERIT, AutoNest, DelimiterGrammar, InnerDelimiterGrammar
from .numeric import DecimalGrammar, DecimalSplitResult, IntegerGrammar, IntegerSplitResult
from .patterns import BackscanResult, Literal, Regex, backscan
from .scanner import Scanner

__all__ = [
    "AutoNest",
    "BackscanResult",
    "CursorEngine",
    "DecimalGrammar",
    "DecimalSplitResult",
    "DelimiterGrammar",
    "INHERIT",
    "InnerDelimiterGrammar",
    "IntegerGrammar",
    "IntegerSplitResult",
    "Literal",
    "Regex",
    "Scanner",
    "ScannerState",
    "ScannerStateError",
    "backscan",
]

__version__ = "0.1.0"
