import pytest

from scan_engine import Scanner, ScannerState, ScannerStateError

TEXT = "hello world"


def make_scanner(text: str = TEXT) -> Scanner:
    return Scanner(text)


def test_initial_state() -> None:
    scanner = make_scanner()

    assert scanner.text == TEXT
    assert scanner.state == ScannerState(pos=0, last_pos=0, last_match=None)
    assert scanner.last_state == ScannerState()
    assert scanner.insensitive is False


def test_scan_string_updates_position_and_last_pos() -> None:
    scanner = make_scanner()

    result = scanner.scan_string("hello")

    assert result == "hello"
    assert scanner.pos == 5
    assert scanner.last_pos == 0
    assert scanner.last_match == "hello"


def test_last_state_tracks_previous_match() -> None:
    scanner = make_scanner()

    scanner.scan("hello")
    assert scanner.last_state == ScannerState()

    scanner.scan(" ")
    assert scanner.last_state == ScannerState(pos=5, last_pos=0, last_match="hello")


def test_scanned_and_unscanned_text() -> None:
    scanner = make_scanner()
    scanner.scan("hello")

    assert scanner.scanned_text == "hello"
    assert scanner.unscanned_text == " world"


def test_move_position_round_trip() -> None:
    scanner = make_scanner()

    scanner.move_position(4)
    scanner.move_position(-4)

    assert scanner.pos == 0
    assert scanner.last_pos == 4


def test_move_position_clamps_to_bounds() -> None:
    scanner = make_scanner()

    scanner.move_position(-1000)
    assert scanner.pos == 0

    scanner.move_position(len(TEXT) + 10)
    assert scanner.pos == len(TEXT)
    assert scanner.eos is True


def test_move_position_zero_is_noop() -> None:
    scanner = make_scanner()
    scanner.scan("hello")
    before = scanner.state
    before_last = scanner.last_state

    scanner.move_position(0)

    assert scanner.state == before
    assert scanner.last_state == before_last


def test_move_position_keeps_last_match() -> None:
    scanner = make_scanner()
    scanner.scan("hello")

    scanner.move_position(-4)

    assert scanner.pos == 1
    assert scanner.last_pos == 5
    assert scanner.last_match == "hello"


def test_set_position_clamps() -> None:
    scanner = make_scanner()

    scanner.set_position(-3)
    assert scanner.pos == 0

    scanner.set_position(100)
    assert scanner.pos == len(TEXT)
    assert scanner.last_pos == 0


def test_peek_does_not_mutate() -> None:
    scanner = make_scanner()

    assert scanner.peek() == "h"
    assert scanner.peek(5) == "hello"
    assert scanner.peek(100) == TEXT
    assert scanner.state == ScannerState()

    scanner.terminate()
    assert scanner.peek(3) == ""


def test_grab_records_match() -> None:
    scanner = make_scanner()
    scanner.set_position(len(TEXT) - 1)

    assert scanner.grab(2) == "d"
    assert scanner.last_match == "d"
    assert scanner.eos is True


def test_update_match_moves_by_length() -> None:
    scanner = make_scanner()

    scanner.update_match("hel")

    assert scanner.pos == 3
    assert scanner.last_match == "hel"


def test_undo_last_step_is_its_own_inverse() -> None:
    scanner = make_scanner()
    start = scanner.state
    scanner.scan("hello")
    after = scanner.state

    scanner.undo_last_step()
    assert scanner.state == start
    assert scanner.last_state == after

    scanner.undo_last_step()
    assert scanner.state == after
    assert scanner.last_state == start


def test_reset_restores_defaults() -> None:
    scanner = make_scanner()
    scanner.insensitive = True
    scanner.scan("hello")

    scanner.reset()
    once = (scanner.state, scanner.last_state, scanner.insensitive)
    scanner.reset()

    assert once == (ScannerState(), ScannerState(), False)
    assert (scanner.state, scanner.last_state, scanner.insensitive) == once


def test_terminate_optionally_clears_last_match() -> None:
    scanner = make_scanner()
    scanner.scan("hello")

    scanner.terminate()
    assert scanner.pos == len(TEXT)
    assert scanner.last_match == "hello"

    scanner.terminate(clear=True)
    assert scanner.last_match is None


def test_load_state_captures_previous_state() -> None:
    scanner = make_scanner()
    start = scanner.state
    scanner.scan("hello")
    after = scanner.state

    scanner.load_state(start)

    assert scanner.state == start
    assert scanner.last_state == after


def test_load_state_rejects_out_of_range_snapshot() -> None:
    scanner = make_scanner()
    bad = ScannerState(pos=len(TEXT) + 1)

    with pytest.raises(ScannerStateError) as excinfo:
        scanner.load_state(bad)

    assert excinfo.value.state == bad
    assert scanner.state == ScannerState()


def test_duplicate_is_independent() -> None:
    scanner = make_scanner()
    scanner.insensitive = True
    scanner.scan("hello")

    dup = scanner.duplicate()

    assert dup is not scanner
    assert isinstance(dup, Scanner)
    assert dup.text == scanner.text
    assert dup.state == scanner.state
    assert dup.last_state == scanner.last_state
    assert dup.insensitive is True

    dup.scan(" WORLD")
    dup.insensitive = False

    assert dup.eos is True
    assert scanner.pos == 5
    assert scanner.last_match == "hello"
    assert scanner.insensitive is True


def test_append_keeps_cursor() -> None:
    scanner = make_scanner()
    scanner.scan("hello")
    before = scanner.state

    scanner.append("!")

    assert scanner.text == TEXT + "!"
    assert scanner.state == before


def test_prepend_shifts_positions() -> None:
    scanner = make_scanner()
    scanner.scan("hello")

    scanner.prepend(">> ")

    assert scanner.text == ">> " + TEXT
    assert scanner.pos == 8
    assert scanner.last_pos == 3
    assert scanner.unscanned_text == " world"
    assert scanner.last_state.pos == 3


def test_prepend_with_reset() -> None:
    scanner = make_scanner()
    scanner.scan("hello")

    scanner.prepend(">> ", reset=True)

    assert scanner.pos == 0
    assert scanner.last_match is None
