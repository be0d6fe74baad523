from __future__ import annotations

import contextlib
import os
import sys
from collections.abc import Sequence

from .args import parse_args
from .config import load_debug
from .core import search
from .errors import ArgumentError
from .report import Reporter

VERSION = "0.1.0"

HELP_TEXT = """\
Search a directory tree, printing every entry that matches.

Tests:
      -name PATTERN   shell glob matched against the entry name; a leading
                      '.' in the name must be matched by a leading '.'
      -type C         entry type, one of:
                      b block device   c character device   d directory
                      f regular file   l symbolic link      p FIFO
                      s socket

The starting path must come before any test. Symbolic links are not followed.
Set PFIND_DEBUG=search,stat (or all) to trace the walk on standard error."""


def main(argv: Sequence[str] | None = None, prog: str | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
        if prog is None:
            prog = os.path.basename(sys.argv[0]) or "pfind"
    if prog is None:
        prog = "pfind"
    argv = list(argv)
    reporter = Reporter(prog, debug=load_debug(os.environ))

    if argv == ["--help"]:
        print(reporter.usage_line())
        print(HELP_TEXT)
        return 0
    if argv == ["--version"]:
        print(f"{prog} {VERSION}")
        return 0

    try:
        start, criteria = parse_args(argv)
    except ArgumentError as e:
        return reporter.fatal(e)

    try:
        for path in search(start, criteria, reporter):
            sys.stdout.write(path)
            sys.stdout.write("\n")
        sys.stdout.flush()
    except BrokenPipeError:
        with contextlib.suppress(Exception):
            sys.stdout.close()
        return 0

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
