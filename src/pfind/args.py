from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .core import TYPE_CODES, FileType, SearchCriteria
from .errors import (
    DuplicateOptionError,
    MissingArgumentError,
    PathOrderError,
    UnknownPredicateError,
    UnknownTypeError,
    UsageError,
)

# one start path, then at most "-name PATTERN" and "-type C"
MAX_ARGS = 5


@dataclass(frozen=True)
class ParseState:
    path: str | None = None
    name: str | None = None
    type: FileType | None = None
    seen_name: bool = False
    seen_type: bool = False

    def criteria(self) -> SearchCriteria:
        return SearchCriteria(name_pattern=self.name, type_filter=self.type)


def parse_type(value: str) -> FileType:
    """Map the first character of a ``-type`` value to a FileType."""
    code = value[:1]
    try:
        return TYPE_CODES[code]
    except KeyError:
        raise UnknownTypeError(code) from None


def parse_option(state: ParseState, args: Sequence[str], i: int) -> ParseState:
    """Consume ``args[i]`` and its value, returning the updated state.

    The value is taken verbatim even when it looks like another option.
    """
    option = args[i]
    value = args[i + 1] if i + 1 < len(args) else None

    if option == "-name":
        if value is None:
            raise MissingArgumentError(option)
        if state.seen_name:
            raise DuplicateOptionError(option)
        return replace(state, name=value, seen_name=True)

    if option == "-type":
        if value is None:
            raise MissingArgumentError(option)
        if state.seen_type:
            raise DuplicateOptionError(option)
        return replace(state, type=parse_type(value), seen_type=True)

    raise UnknownPredicateError(option)


def _looks_like_option(token: str) -> bool:
    return token.startswith("-")


def parse_args(args: Sequence[str]) -> tuple[str, SearchCriteria]:
    """Interpret ``pfind`` arguments (program name excluded).

    Returns ``(start_path, criteria)`` or raises an ``ArgumentError``.
    """
    if len(args) > MAX_ARGS or not args:
        raise UsageError()

    state = ParseState()

    if _looks_like_option(args[0]):
        # options given before any path: read them all, then complain
        i = 0
        while i < len(args) and _looks_like_option(args[i]):
            state = parse_option(state, args, i)
            i += 2
        if i < len(args):
            raise PathOrderError(args[i])
        raise UsageError()

    state = replace(state, path=args[0])
    i = 1
    while i < len(args):
        state = parse_option(state, args, i)
        i += 2

    assert state.path is not None
    return state.path, state.criteria()
