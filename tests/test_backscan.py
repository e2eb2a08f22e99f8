import re

from scan_engine import BackscanResult, Scanner, backscan
from scan_engine.patterns import backscan_any


def test_backscan_literal_tail() -> None:
    assert backscan("aab0", "0") == BackscanResult(result="0", new_text="aab")


def test_backscan_miss_returns_input() -> None:
    outcome = backscan("aab0", "z")

    assert outcome == BackscanResult(result=None, new_text="aab0")
    assert outcome.matched is False


def test_backscan_single_character_is_tested_whole() -> None:
    assert backscan("0", "0") == BackscanResult(result="0", new_text="")
    assert backscan("7", re.compile(r"\d")) == BackscanResult(result="7", new_text="")
    assert backscan("x", re.compile(r"\d")).matched is False


def test_backscan_prefers_shortest_suffix() -> None:
    assert backscan("1234", re.compile(r"\d+")) == BackscanResult(
        result="4", new_text="123"
    )
    assert backscan("a00", "00") == BackscanResult(result="00", new_text="a")


def test_backscan_never_consumes_whole_multichar_text() -> None:
    assert backscan("ab", "ab").matched is False


def test_backscan_empty_text() -> None:
    assert backscan("", "a") == BackscanResult(result=None, new_text="")


def test_backscan_any_uses_first_hit() -> None:
    outcome = backscan_any("x12", ["3", "2", "1"])

    assert outcome == BackscanResult(result="2", new_text="x1")
    assert backscan_any("x12", ["9"]).new_text == "x12"


def test_scanner_exposes_backscan() -> None:
    assert Scanner.backscan("end;", ";") == BackscanResult(result=";", new_text="end")
