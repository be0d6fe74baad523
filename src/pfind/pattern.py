"""Shell glob matching for single file names.

Follows ``fnmatch(3)`` with ``FNM_PERIOD``: a backslash quotes the next
character, ``[!...]`` and ``[^...]`` negate a bracket expression, POSIX
classes such as ``[[:digit:]]`` are understood, and a leading ``.`` in the
name is only matched by a literal ``.`` in the pattern. ``*`` and ``?``
may match ``/`` since names are not split into components.
"""

from __future__ import annotations

import functools
import re

_CLASSES = {
    "alnum": "a-zA-Z0-9",
    "alpha": "a-zA-Z",
    "blank": " \\t",
    "cntrl": "\\x00-\\x1f\\x7f",
    "digit": "0-9",
    "graph": "\\x21-\\x7e",
    "lower": "a-z",
    "print": "\\x20-\\x7e",
    "punct": re.escape("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"),
    "space": " \\t\\n\\r\\f\\v",
    "upper": "A-Z",
    "xdigit": "0-9A-Fa-f",
}

# never matches anything
_NOTHING = "(?!)"


def _bracket(pat: str, i: int) -> tuple[str, int] | None:
    """Translate the bracket expression opening just before ``pat[i]``.

    Returns ``(regex, index after ']')`` or None when the bracket is not
    closed, in which case the ``[`` is an ordinary character.
    """
    n = len(pat)
    negate = False
    if i < n and pat[i] in "!^":
        negate = True
        i += 1

    items: list[str] = []
    first = True
    while i < n:
        c = pat[i]
        if c == "]" and not first:
            break
        first = False

        if c == "[" and pat.startswith(":", i + 1):
            end = pat.find(":]", i + 2)
            if end != -1 and pat[i + 2 : end] in _CLASSES:
                items.append(_CLASSES[pat[i + 2 : end]])
                i = end + 2
                continue

        if c == "\\":
            i += 1
            if i >= n:
                return None
            c = pat[i]
        i += 1

        if i + 1 < n and pat[i] == "-" and pat[i + 1] != "]":
            hi = pat[i + 1]
            i += 2
            if hi == "\\":
                if i >= n:
                    return None
                hi = pat[i]
                i += 1
            if c <= hi:
                items.append(f"{re.escape(c)}-{re.escape(hi)}")
        else:
            items.append(re.escape(c))
    else:
        return None

    if not items:
        return ("." if negate else _NOTHING), i + 1
    return f"[{'^' if negate else ''}{''.join(items)}]", i + 1


@functools.lru_cache(maxsize=256)
def translate(pat: str) -> re.Pattern[str] | None:
    """Compile a glob into a regex, or None if the pattern can never match.

    A trailing unpaired backslash makes the whole pattern fail, as in glibc.
    """
    parts: list[str] = []
    i, n = 0, len(pat)
    while i < n:
        c = pat[i]
        i += 1
        if c == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif c == "?":
            parts.append(".")
        elif c == "\\":
            if i >= n:
                return None
            parts.append(re.escape(pat[i]))
            i += 1
        elif c == "[":
            bracket = _bracket(pat, i)
            if bracket is None:
                parts.append(re.escape(c))
            else:
                regex, i = bracket
                parts.append(regex)
        else:
            parts.append(re.escape(c))
    return re.compile(f"(?s:{''.join(parts)})\\Z")


def _literal_period(pat: str) -> bool:
    return pat.startswith(".") or pat.startswith("\\.")


def match(name: str, pat: str) -> bool:
    """Return True if ``name`` matches glob ``pat`` (case-sensitive)."""
    if name.startswith(".") and not _literal_period(pat):
        return False
    regex = translate(pat)
    return regex is not None and regex.match(name) is not None
