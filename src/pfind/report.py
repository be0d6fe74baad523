from __future__ import annotations

import sys
from typing import TextIO

from .config import Debug
from .errors import ArgumentError


class Reporter:
    """Writes diagnostics to standard error on behalf of one program name.

    Per-entry I/O failures are recoverable and only produce a line; argument
    errors are fatal and the caller exits with status 1 after reporting them.
    """

    def __init__(
        self,
        prog: str,
        stream: TextIO | None = None,
        debug: Debug | None = None,
    ) -> None:
        self.prog = prog
        self._stream = stream
        self.debug = debug or Debug()

    @property
    def stream(self) -> TextIO:
        # resolved late so a swapped sys.stderr is honoured
        return self._stream if self._stream is not None else sys.stderr

    def usage_line(self) -> str:
        return (
            f"usage: {self.prog} starting_path "
            "[-name filename-or-pattern] [-type {f|d|b|c|p|l|s}]"
        )

    def file_error(self, path: str, err: OSError) -> None:
        reason = err.strerror or str(err)
        print(f"{self.prog}: `{path}': {reason}", file=self.stream)

    def fatal(self, err: ArgumentError) -> int:
        msg = err.message()
        if msg:
            print(f"{self.prog}: {msg}", file=self.stream)
        if err.show_usage:
            print(self.usage_line(), file=self.stream)
        return 1

    def trace(self, cat: str, msg: str) -> None:
        if self.debug.on(cat):
            print(f"[DEBUG:{cat}] {msg}", file=self.stream)
