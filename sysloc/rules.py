"""Path-legality rule sets.

A rule set decides how raw strings are normalized and which normalized
strings are legal paths. ``Path`` only ever asks the rule set, so a
different target platform can be supported by passing another one.
"""

from __future__ import annotations

import string
from typing import Protocol, runtime_checkable

SEPARATOR = "/"

_WIN32_FORBIDDEN: frozenset[str] = frozenset(
    '\\<>"|' + "".join(chr(code) for code in range(0x00, 0x20))
)


@runtime_checkable
class PathRules(Protocol):
    name: str
    shared_library_suffix: str

    def normalize(self, raw: str) -> str: ...
    def is_valid(self, path: str) -> bool: ...


class Win32Rules:
    name = "win32"
    shared_library_suffix = "dll"

    def normalize(self, raw: str) -> str:
        return raw.replace("\\", SEPARATOR)

    def is_valid(self, path: str) -> bool:
        if not path:
            return True

        # drive letter: "X:" followed by something
        length = len(path)
        colon = path.rfind(":")
        if colon != -1:
            if colon != 1 or path[0] not in string.ascii_letters or length < 3:
                return False

        if any(ch in _WIN32_FORBIDDEN for ch in path):
            return False

        if path[-1] == "." or path.endswith("./"):
            return False
        if path[-1] == " " or path.endswith(" /"):
            return False

        return True

    def __repr__(self) -> str:
        return "Win32Rules()"


class PosixRules:
    name = "posix"
    shared_library_suffix = "so"

    def normalize(self, raw: str) -> str:
        return raw

    def is_valid(self, path: str) -> bool:
        return "\x00" not in path

    def __repr__(self) -> str:
        return "PosixRules()"


RULE_SETS: dict[str, type] = {
    Win32Rules.name: Win32Rules,
    PosixRules.name: PosixRules,
}


def get_rules(name: str) -> PathRules:
    key = (name or "").strip().lower()
    try:
        return RULE_SETS[key]()
    except KeyError:
        known = ", ".join(sorted(RULE_SETS))
        raise ValueError(f"Unknown rule set {name!r} (expected one of: {known})") from None
