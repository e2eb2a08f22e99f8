"""Split results exposing every recognized part of a number."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _part(value: Optional[str]) -> Optional[str]:
    return value or None


@dataclass(frozen=True, slots=True)
class IntegerSplitResult:
    sign: Optional[str]
    prefix: Optional[str]
    leading: Optional[str]
    number: str
    postfix: Optional[str]

    @classmethod
    def from_parts(
        cls,
        *,
        sign: Optional[str],
        prefix: Optional[str],
        leading: Optional[str],
        number: str,
        postfix: Optional[str],
    ) -> "IntegerSplitResult":
        return cls(
            sign=_part(sign),
            prefix=_part(prefix),
            leading=_part(leading),
            number=number,
            postfix=_part(postfix),
        )

    @property
    def text(self) -> str:
        return "".join(
            part or ""
            for part in (self.sign, self.prefix, self.leading, self.number, self.postfix)
        )


@dataclass(frozen=True, slots=True)
class DecimalSplitResult:
    """Decimal parts; ``number`` is ``whole + radix + fractional``."""

    sign: Optional[str]
    prefix: Optional[str]
    leading: Optional[str]
    whole: Optional[str]
    radix: Optional[str]
    fractional: Optional[str]
    number: str
    trailing: Optional[str]
    postfix: Optional[str]

    @classmethod
    def from_parts(
        cls,
        *,
        sign: Optional[str],
        prefix: Optional[str],
        leading: Optional[str],
        whole: str,
        radix: Optional[str],
        fractional: str,
        trailing: Optional[str],
        postfix: Optional[str],
    ) -> "DecimalSplitResult":
        return cls(
            sign=_part(sign),
            prefix=_part(prefix),
            leading=_part(leading),
            whole=_part(whole),
            radix=_part(radix),
            fractional=_part(fractional),
            number=whole + (radix or "") + fractional,
            trailing=_part(trailing),
            postfix=_part(postfix),
        )

    @property
    def text(self) -> str:
        return "".join(
            part or ""
            for part in (
                self.sign,
                self.prefix,
                self.leading,
                self.number,
                self.trailing,
                self.postfix,
            )
        )
