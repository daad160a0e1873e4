from __future__ import annotations

from contextvars import ContextVar, Token
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .provider import FilesystemProvider
    from .rules import PathRules

_VERBOSE_LOGGING: ContextVar[bool | None] = ContextVar(
    "sysloc_verbose_logging", default=None
)
_RULES: ContextVar[PathRules | None] = ContextVar("sysloc_rules", default=None)
_PROVIDER: ContextVar[FilesystemProvider | None] = ContextVar(
    "sysloc_provider", default=None
)

_DEFAULT_RULES = "win32"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def read_bool_env(name: str) -> bool | None:
    raw = (os.environ.get(name) or "").strip().lower()
    if not raw:
        return None
    return raw in _TRUE_VALUES


def get_verbose_logging() -> bool:
    value = _VERBOSE_LOGGING.get()
    if value is None:
        return bool(read_bool_env("SYSLOC_VERBOSE"))
    return value


def set_verbose_logging(enabled: bool) -> Token[bool | None]:
    return _VERBOSE_LOGGING.set(bool(enabled))


def reset_verbose_logging(token: Token[bool | None]) -> None:
    _VERBOSE_LOGGING.reset(token)


def get_default_rules() -> PathRules:
    rules = _RULES.get()
    if rules is not None:
        return rules
    from .rules import get_rules

    return get_rules(os.environ.get("SYSLOC_RULES") or _DEFAULT_RULES)


def set_default_rules(rules: PathRules) -> Token[PathRules | None]:
    return _RULES.set(rules)


def reset_default_rules(token: Token[PathRules | None]) -> None:
    _RULES.reset(token)


def get_default_provider() -> FilesystemProvider:
    provider = _PROVIDER.get()
    if provider is not None:
        return provider
    from .provider import LocalFilesystem

    return LocalFilesystem()


def set_default_provider(
    provider: FilesystemProvider,
) -> Token[FilesystemProvider | None]:
    return _PROVIDER.set(provider)


def reset_default_provider(token: Token[FilesystemProvider | None]) -> None:
    _PROVIDER.reset(token)
