# eorzeos

A small interactive shell that runs in your terminal. It greets you, shows a
prompt and answers a handful of commands. It echoes back any input it does
not recognise.

## Installation

```
pip install eorzeos
```

For the test suite:

```
pip install "eorzeos[test]"
pytest
```

## Running

```
eorzeos
```

The shell clears the screen, prints `Welcome to EorzeOS!` and then shows the
prompt `user> `. It reads lines until the input ends. Ctrl-D on an empty line
ends the session with exit status 0. Ctrl-C ends it with exit status 130.
`eorzeos --help` shows the usage text. The command takes no other options.

## Commands

| Command | Effect |
| --- | --- |
| `yo` | prints `gurt` |
| `gurt` | prints `yo` |
| `user <name>` | changes the name shown in the prompt; without a name it goes back to `user` |
| `grandcompany maelstrom` | clears the screen and adds `@Storm` to the prompt |
| `grandcompany twinadder` | clears the screen and adds `@Serpent` to the prompt |
| `grandcompany immortalflames` | clears the screen and adds `@Flame` to the prompt |
| `clear` | clears the screen and removes the Grand Company suffix |
| `add <x> <y>` | prints `x + y` |
| `sub <x> <y>` | prints `x - y` |
| `mul <x> <y>` | prints `x * y` |
| `div <x> <y>` | prints `x / y`, rounded toward zero; a zero divisor prints `Error: divide by zero` |
| `yogurt` | prints one of three canned replies, picked by the clock |

If a calculator command is missing an argument, the shell prints a usage line
such as `Usage: add <x> <y>`. A `grandcompany` name that is not in the table
prints `Error: invalid grandcompany`. The shell prints any other input back as
typed.

Words are separated by spaces. Only the command and the next two words are
used; the shell ignores anything after them. An argument keeps at most 63
characters.

Numbers are read by a simple decimal parser. It accepts an optional `+` or
`-`, then digits, and stops at the first character that is not a digit. For
example, `12abc` reads as `12` and `abc` reads as `0`.

## Example session

```
Welcome to EorzeOS!
user> user Tia
Username changed to Tia
Tia> add 2 40
42
Tia> div 7 -2
-3
Tia> hello there
hello there
```

After `grandcompany maelstrom` the screen is cleared, and the prompt then
reads `Tia@Storm> `.

## Using it from Python

```python
import io

from eorzeos.console import Console
from eorzeos.shell import Shell, parse_command

out = io.StringIO()
shell = Shell(Console(io.StringIO(), out))
shell.execute("add 2 3")      # writes "5\n" to out
shell.prompt()                # "user> "

parse_command("  add 1 2 3")  # ("add", "1", "2")
```

`Shell.run()` prints the greeting, then shows the prompt and executes lines
until the console input ends. `Shell()` with no console reads standard input
and writes standard output.

`eorzeos.console.Console(stdin=None, stdout=None, *, echo=True, clock=None)`
wraps a pair of text streams and provides these methods:

- `print_string` writes text to the output stream.
- `read_string` reads one line up to Enter. It handles backspace, and echoes
  the input when `echo` is true. It raises `EOFError` if the input ends
  before any character was read.
- `clear_screen` writes the ANSI clear-and-home sequence.
- `tick` returns clock ticks since midnight, or the value of `clock()` when
  a clock is given.

`eorzeos.numutil` provides the integer helpers the shell uses:

- `trunc_div` divides and rounds toward zero.
- `trunc_mod` returns the matching remainder.
- `parse_int` reads a number as described above.
- `format_int` renders an integer in decimal.

`trunc_div` and `trunc_mod` both return 0 for a zero divisor.

## What it does not do

This is a toy shell. It only has the built-in commands listed above. It does
not:

- run other programs or scripts;
- keep a command history;
- support quoting, pipes or redirection;
- read or write files.