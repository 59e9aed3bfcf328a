"""
handlers/console.py
-------------------
Line-oriented prompts and tab-separated output over a pair of text streams.
"""

import sys
from datetime import date
from typing import Callable, Optional, TextIO

from models.result import ResultTable

INVALID_INPUT = "Your input is invalid!"


class Console:
    """
    Wraps the shell's input and output streams.

    Numeric and date prompts repeat until the answer parses. An empty answer
    returns `default` when one is given. End of input raises EOFError.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def say(self, text: str = "") -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        self.stdout.write(f"\t{prompt}: ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _ask_parsed(self, prompt: str, parse: Callable, default=None):
        if default is not None:
            prompt = f"{prompt} [{default}]"
        while True:
            raw = self.ask(prompt).strip()
            if not raw and default is not None:
                return default
            try:
                return parse(raw)
            except ValueError:
                self.say(INVALID_INPUT)

    def ask_int(self, prompt: str, default: Optional[int] = None) -> int:
        return self._ask_parsed(prompt, int, default)

    def ask_float(self, prompt: str, default: Optional[float] = None) -> float:
        return self._ask_parsed(prompt, float, default)

    def ask_date(self, prompt: str, default: Optional[date] = None) -> date:
        """Ask for a YYYY-MM-DD date."""
        return self._ask_parsed(prompt, date.fromisoformat, default)

    def show_table(self, table: ResultTable, empty_message: Optional[str] = "No records found.") -> None:
        """Print headers and rows tab-separated, or `empty_message` when there are no rows."""
        if not table.rows:
            if empty_message:
                self.say(empty_message)
            return
        for line in table.to_lines():
            self.say(line)
