"""Pattern variants and the reverse matcher."""

from .backscan import BackscanResult, backscan, backscan_any
from .models import Literal, Pattern, PatternLike, Regex, as_pattern, as_patterns

__all__ = [
    "BackscanResult",
    "Literal",
    "Pattern",
    "PatternLike",
    "Regex",
    "as_pattern",
    "as_patterns",
    "backscan",
    "backscan_any",
]
