from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

DEBUG_ENV = "PFIND_DEBUG"
DEBUG_CATEGORIES = frozenset({"search", "stat", "all"})


@dataclass(frozen=True)
class Debug:
    cats: frozenset[str] = field(default_factory=frozenset)

    def on(self, cat: str) -> bool:
        return "all" in self.cats or cat in self.cats


def load_debug(environ: Mapping[str, str] | None = None) -> Debug:
    """Read debug categories from ``PFIND_DEBUG``; unknown names are ignored."""
    if environ is None:
        environ = os.environ
    raw = environ.get(DEBUG_ENV, "")
    cats = {c.strip() for c in raw.split(",") if c.strip()}
    return Debug(cats=frozenset(cats & DEBUG_CATEGORIES))
