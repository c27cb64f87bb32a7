"""The interactive command shell."""

from __future__ import annotations

import argparse
import operator
from functools import partial
from typing import Callable, Optional

from .console import Console
from .numutil import format_int, parse_int, trunc_div, trunc_mod

__all__ = [
    "Shell",
    "parse_command",
    "main",
    "DEFAULT_USERNAME",
    "RESPONSES",
    "GRAND_COMPANIES",
]

DEFAULT_USERNAME = "user"
RESPONSES = ("yo", "ts unami gng </3", "sygau")
GRAND_COMPANIES = {
    "maelstrom": "@Storm",
    "twinadder": "@Serpent",
    "immortalflames": "@Flame",
}

_ARG_LIMIT = 63
_ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": trunc_div,
}


def _take_word(text: str, limit: Optional[int] = None) -> tuple[str, str]:
    end = text.find(" ")
    if end < 0:
        end = len(text)
    if limit is not None:
        end = min(end, limit)
    return text[:end], text[end:]


def parse_command(line: str) -> tuple[str, str, str]:
    """Split a line into a command and up to two arguments.

    Words are separated by spaces. Each argument holds at most 63 characters;
    anything past the second argument is ignored. Missing parts are empty.
    """
    command, rest = _take_word(line.lstrip(" "))
    if not rest:
        return command, "", ""
    first, rest = _take_word(rest.lstrip(" "), _ARG_LIMIT)
    if not rest:
        return command, first, ""
    second, _ = _take_word(rest.lstrip(" "), _ARG_LIMIT)
    return command, first, second


class Shell:
    """Reads commands from a console and carries them out."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()
        self.username = DEFAULT_USERNAME
        self.suffix = ""
        self._handlers: dict[str, Callable[[str, str], None]] = {
            "yo": lambda _a, _b: self._say("gurt"),
            "gurt": lambda _a, _b: self._say("yo"),
            "user": self._change_user,
            "grandcompany": self._join_company,
            "clear": self._clear,
            "yogurt": self._yogurt,
        }
        for name, op in _ARITHMETIC.items():
            self._handlers[name] = partial(self._calculate, name, op)

    def prompt(self) -> str:
        """The prompt text, such as ``user> `` or ``Tia@Storm> ``."""
        return f"{self.username}{self.suffix}> "

    def execute(self, line: str) -> None:
        """Carry out one input line; unknown commands echo the line back."""
        command, first, second = parse_command(line)
        handler = self._handlers.get(command)
        if handler is None:
            self._say(line)
        else:
            handler(first, second)

    def run(self) -> None:
        """Greet, then read and execute lines until the input ends."""
        self.console.print_string("Welcome to EorzeOS!\n")
        while True:
            self.console.print_string(self.prompt())
            try:
                line = self.console.read_string()
            except EOFError:
                return
            self.execute(line)

    def _say(self, text: str) -> None:
        self.console.print_string(text + "\n")

    def _change_user(self, first: str, _second: str) -> None:
        self.username = first or DEFAULT_USERNAME
        self._say(f"Username changed to {self.username}")

    def _join_company(self, first: str, _second: str) -> None:
        suffix = GRAND_COMPANIES.get(first)
        if suffix is None:
            self._say("Error: invalid grandcompany")
            return
        self.console.clear_screen()
        self.suffix = suffix

    def _clear(self, _first: str, _second: str) -> None:
        self.console.clear_screen()
        self.suffix = ""

    def _calculate(
        self, name: str, op: Callable[[int, int], int], first: str, second: str
    ) -> None:
        if not (first and second):
            self._say(f"Usage: {name} <x> <y>")
            return
        x, y = parse_int(first), parse_int(second)
        if name == "div" and y == 0:
            self._say("Error: divide by zero")
            return
        self._say(format_int(op(x, y)))

    def _yogurt(self, _first: str, _second: str) -> None:
        self._say(RESPONSES[trunc_mod(self.console.tick(), len(RESPONSES))])


def main(argv: Optional[list[str]] = None) -> int:
    """Start an interactive shell on standard input and output."""
    parser = argparse.ArgumentParser(prog="eorzeos", description="EorzeOS command shell")
    parser.parse_args(argv)
    console = Console(echo=False)
    console.clear_screen()
    try:
        Shell(console).run()
    except KeyboardInterrupt:
        console.print_string("\n")
        return 130
    return 0