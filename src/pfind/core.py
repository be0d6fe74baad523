from __future__ import annotations

import errno
import itertools
import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from .pattern import match as glob_match
from .report import Reporter

PSEUDO_ENTRIES = (".", "..")


class FileType(IntEnum):
    """File-type bits as reported in ``st_mode`` by a non-following stat."""

    BLOCK_DEVICE = stat.S_IFBLK
    CHAR_DEVICE = stat.S_IFCHR
    DIRECTORY = stat.S_IFDIR
    REGULAR = stat.S_IFREG
    SYMLINK = stat.S_IFLNK
    FIFO = stat.S_IFIFO
    SOCKET = stat.S_IFSOCK


TYPE_CODES = {
    "b": FileType.BLOCK_DEVICE,
    "c": FileType.CHAR_DEVICE,
    "d": FileType.DIRECTORY,
    "f": FileType.REGULAR,
    "l": FileType.SYMLINK,
    "p": FileType.FIFO,
    "s": FileType.SOCKET,
}


@dataclass(frozen=True)
class SearchCriteria:
    name_pattern: str | None = None
    type_filter: FileType | None = None


def join_path(parent: str, child: str) -> str:
    """Combine a directory path and an entry name into one path.

    An identical parent and child collapse to a single copy, so the start
    path examined as its own ``.`` or ``..`` entry keeps its spelling.
    Raises ``OSError(ENOMEM)`` if the string cannot be built.
    """
    try:
        if parent == child:
            return parent
        if parent.endswith("/") or child.startswith("/"):
            return parent + child
        return parent + "/" + child
    except MemoryError:
        raise OSError(errno.ENOMEM, os.strerror(errno.ENOMEM), child) from None


def _match_name(name: str, pattern: str | None) -> bool:
    if pattern is None:
        return True
    return glob_match(name, pattern)


def _match_type(mode: int, type_filter: FileType | None) -> bool:
    if type_filter is None:
        return True
    return stat.S_IFMT(mode) == type_filter


def matches(criteria: SearchCriteria, dirname: str, name: str, mode: int) -> bool:
    """Return True if entry ``name`` inside ``dirname`` should be printed.

    ``.`` and ``..`` only qualify when ``dirname`` is literally the same
    string, i.e. when the user started the walk from ``.`` or ``..``.
    """
    if not _match_name(name, criteria.name_pattern):
        return False
    if not _match_type(mode, criteria.type_filter):
        return False
    if name == ".." and dirname != "..":
        return False
    if name == "." and dirname != ".":
        return False
    return True


def _trace_mode(reporter: Reporter, path: str, mode: int) -> None:
    if reporter.debug.on("stat"):
        reporter.trace("stat", f"{path}: mode {stat.filemode(mode)}")


class _DirScan:
    """An open directory: its path and its entry names, pseudo-entries first."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._it = os.scandir(path)
        self.names: Iterator[str] = itertools.chain(
            PSEUDO_ENTRIES, (entry.name for entry in self._it)
        )

    def close(self) -> None:
        self._it.close()


def _process_file(
    path: str,
    criteria: SearchCriteria,
    reporter: Reporter,
    open_error: OSError,
) -> Iterator[str]:
    try:
        mode = os.lstat(path).st_mode
    except OSError as e:
        reporter.file_error(path, e)
        return
    _trace_mode(reporter, path, mode)

    if stat.S_ISDIR(mode):
        # a directory we were not allowed to open
        reporter.file_error(path, open_error)
        return

    if matches(criteria, path, path, mode):
        yield path


def _open(path: str, reporter: Reporter) -> _DirScan:
    scan = _DirScan(path)
    reporter.trace("search", f"opened {path}")
    return scan


def _close(scan: _DirScan, reporter: Reporter) -> None:
    scan.close()
    reporter.trace("search", f"closed {scan.path}")


def search(
    start: str,
    criteria: SearchCriteria,
    reporter: Reporter | None = None,
) -> Iterator[str]:
    """Walk ``start`` depth-first and yield the path of every matching entry.

    Entries come out in directory enumeration order, each one before its own
    descendants. I/O failures are reported through ``reporter`` and skipped.
    """
    if reporter is None:
        reporter = Reporter("pfind")

    try:
        top = _open(start, reporter)
    except OSError as e:
        yield from _process_file(start, criteria, reporter, e)
        return

    stack: list[_DirScan] = [top]
    try:
        while stack:
            scan = stack[-1]
            try:
                name = next(scan.names)
            except StopIteration:
                _close(stack.pop(), reporter)
                continue
            except OSError as e:
                reporter.file_error(scan.path, e)
                _close(stack.pop(), reporter)
                continue

            try:
                path = join_path(scan.path, name)
            except OSError as e:
                reporter.file_error(name, e)
                continue

            try:
                mode = os.lstat(path).st_mode
            except OSError as e:
                reporter.file_error(path, e)
                continue
            _trace_mode(reporter, path, mode)

            if matches(criteria, scan.path, name, mode):
                yield path

            if stat.S_ISDIR(mode) and name not in PSEUDO_ENTRIES:
                try:
                    stack.append(_open(path, reporter))
                except OSError as e:
                    reporter.file_error(path, e)
    finally:
        while stack:
            _close(stack.pop(), reporter)
