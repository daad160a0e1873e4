from __future__ import annotations

import sys
from collections.abc import Iterable

from .path import Path
from .provider import FilesystemProvider
from .rules import PathRules

SYSTEM_LIBRARY_DIRS: tuple[str, ...] = ("/usr/lib/", "/lib/")
STATIC_SUFFIXES: tuple[str, ...] = ("a", "o", "bc")


def _log(msg: str) -> None:
    from .runtime import get_verbose_logging

    if get_verbose_logging():
        print(f"[library] {msg}", file=sys.stderr, flush=True)


def library_suffixes(rules: PathRules) -> tuple[str, ...]:
    """Suffixes tried for a library stem, highest priority first."""
    return (rules.shared_library_suffix, *STATIC_SUFFIXES)


def is_library(path: Path, basename: str) -> bool:
    """
    Turn the directory ``path`` into a readable library file for ``basename``.
    Tries ``lib<basename>`` and falls back to ``<basename>`` when that name
    can't be appended. On a miss ``path`` is cleared.
    """
    if path.append_file(f"lib{basename}") or path.append_file(basename):
        for suffix in library_suffixes(path.rules):
            if not path.append_suffix(suffix):
                continue
            if path.readable():
                return True
            _log(f"no {path}")
            path.elide_suffix()
    path.clear()
    return False


def get_library_path(
    basename: str,
    candidate_dirs: Iterable[str],
    *,
    rules: PathRules | None = None,
    provider: FilesystemProvider | None = None,
) -> Path:
    """Locate library ``basename``; first hit wins, cleared Path when none."""
    result = Path(rules=rules, provider=provider)

    for directory in (*candidate_dirs, *SYSTEM_LIBRARY_DIRS):
        if result.set_directory(directory) and is_library(result, basename):
            _log(f"found {basename} at {result}")
            return result

    result.clear()
    return result
