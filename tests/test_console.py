import io

import pytest

from eorzeos.console import CLEAR_SEQUENCE, TICKS_PER_DAY, Console


def make(text, **kwargs):
    out = io.StringIO()
    return Console(io.StringIO(text), out, **kwargs), out


def test_read_plain_line_with_echo():
    console, out = make("abc\r")
    assert console.read_string() == "abc"
    assert out.getvalue() == "abc\r\n"


def test_newline_also_ends_line():
    console, _ = make("hello world\nnext\n", echo=False)
    assert console.read_string() == "hello world"
    assert console.read_string() == "next"


def test_backspace_removes_character_and_erases():
    console, out = make("ab\x08c\r")
    assert console.read_string() == "ac"
    assert out.getvalue() == "ab\x08 \x08c\r\n"


def test_backspace_on_empty_line_is_ignored():
    console, out = make("\x08\x08a\r")
    assert console.read_string() == "a"
    assert out.getvalue() == "a\r\n"


def test_no_echo_writes_nothing():
    console, out = make("xy\x08z\r", echo=False)
    assert console.read_string() == "xz"
    assert out.getvalue() == ""


def test_empty_line():
    console, _ = make("\r", echo=False)
    assert console.read_string() == ""


def test_eof_before_input_raises():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_string()


def test_eof_after_partial_line_returns_it():
    console, _ = make("partial", echo=False)
    assert console.read_string() == "partial"
    with pytest.raises(EOFError):
        console.read_string()


def test_print_string_writes_text():
    console, out = make("")
    console.print_string("Welcome\n")
    assert out.getvalue() == "Welcome\n"


def test_clear_screen_writes_sequence():
    console, out = make("")
    console.clear_screen()
    assert out.getvalue() == CLEAR_SEQUENCE


def test_tick_uses_clock():
    console, _ = make("", clock=lambda: 1234)
    assert console.tick() == 1234


def test_default_tick_in_range():
    console, _ = make("")
    value = console.tick()
    assert 0 <= value < TICKS_PER_DAY