"""
Terminal - Line-oriented prompt/read primitives.

All user interaction goes through a Terminal so the session code
can be driven from any pair of text streams.
"""

from __future__ import annotations
import re
import sys
from typing import TextIO

from .errors import InputClosedError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> int:
    """Parse a signed ASCII decimal integer. Raises ValueError otherwise."""
    if not INTEGER_PATTERN.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


class Terminal:
    """Reads answers from one stream and writes messages to another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def write(self, line: str = "") -> None:
        """Print one line of text."""
        self.stdout.write(line + "\n")

    def read_line(self, prompt: str) -> str:
        """
        Show "prompt: " and return the trimmed answer.

        Raises InputClosedError at end of input.
        """
        self.stdout.write(f"{prompt}: ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise InputClosedError()
        return line.strip()

    def prompt_with_default(self, prompt: str, default: str) -> str:
        answer = self.read_line(f"{prompt} [{default}]")
        return answer or default

    def prompt_required(self, prompt: str) -> str:
        while True:
            answer = self.read_line(prompt)
            if answer:
                return answer
            self.write("A value is required.")

    def prompt_int(self, prompt: str, default: int) -> int:
        """Prompt until the answer parses as an integer; empty means default."""
        while True:
            answer = self.prompt_with_default(prompt, str(default))
            try:
                return parse_int(answer)
            except ValueError:
                self.write("Please enter a valid number.")
