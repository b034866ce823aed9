"""Line-based REPL for Egg.

Each non-empty line is one complete program. Lines share a session scope,
so `define` on one line is visible on the next.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    pass

from egg.debug_utils.pprint import colorize, show
from egg.errors import EggError
from egg.interpreter import Interpreter

PROMPT = "egg> "

BANNER = """Egg Programming Language REPL
Type .exit to quit, .help for help"""

HELP = """
Egg Language Help:
- Variables: define(x, 10)
- Functions: define(add, fun(a, b, +(a, b)))
- Conditionals: if(>(x, 5), print("big"), print("small"))
- Loops: while(<(x, 10), do(print(x), set(x, +(x, 1))))
- Arrays: array(1, 2, 3), length(arr), element(arr, 0)
- Classes: class(Point, fun(self, x, setField(self, "x", x)), method("getX", fun(self, getField(self, "x"))))
- Comments: # This is a comment
"""


class Exit(Exception):
    """Raised by the .exit command to leave the loop."""


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        color: bool = False,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.session = self.interp.new_session()
        self.render: Callable = colorize if color else show
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr

    def handle_line(self, line: str) -> Optional[str]:
        """Process one input line; returns the text to display, if any.

        Raises Exit on `.exit`. Egg errors are reported, not raised.
        """
        text = line.strip()
        if not text:
            return None
        if text == ".exit":
            raise Exit()
        if text == ".help":
            return HELP
        try:
            return self.render(self.interp.run(text, self.session))
        except EggError as ex:
            print(f"Error: {ex}", file=self.err)
            return None

    def run(self, read: Callable[[str], str] = input) -> None:
        print(BANNER, file=self.out)
        while True:
            try:
                line = read(PROMPT)
            except (EOFError, KeyboardInterrupt):
                print(file=self.out)
                break
            try:
                result = self.handle_line(line)
            except Exit:
                break
            except RecursionError:
                print("Error: Maximum recursion depth exceeded", file=self.err)
                continue
            if result is not None:
                print(result, file=self.out)
        print("Goodbye!", file=self.out)
