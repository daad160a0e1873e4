from __future__ import annotations

import logging
import sys
import threading

from .errors import ProviderError
from .path import Path
from .provider import FilesystemProvider

TEMP_DIR_PREFIX = "SYSLOC"
DEFAULT_CONFIG_DIR = "/etc/sysloc/"

_TEMP_DIRECTORY: Path | None = None
_TEMP_DIRECTORY_LOCK = threading.Lock()


def _log(msg: str) -> None:
    from .runtime import get_verbose_logging

    if get_verbose_logging():
        print(f"[locations] {msg}", file=sys.stderr, flush=True)


def get_root_directory() -> Path:
    result = Path()
    result.set_directory("/")
    return result


def get_user_home_directory(provider: FilesystemProvider | None = None) -> Path:
    result = Path(provider=provider)
    home = result.provider.get_env_var("HOME")
    if home and result.set_directory(home):
        return result
    return get_root_directory()


def get_system_library_paths() -> list[Path]:
    return [Path("/lib/"), Path("/usr/lib/")]


def get_default_config_directory() -> Path:
    return Path(DEFAULT_CONFIG_DIR)


def get_config_directory() -> Path:
    return get_default_config_directory()


def get_temporary_directory(provider: FilesystemProvider | None = None) -> Path:
    """
    Return this process's private scratch directory.
    The first call creates ``<temp root>/SYSLOC_<pid>/`` (replacing a leftover
    from an earlier process with the same id); the result is cached for the
    life of the process and never recomputed.
    """
    global _TEMP_DIRECTORY

    with _TEMP_DIRECTORY_LOCK:
        if _TEMP_DIRECTORY is None:
            _TEMP_DIRECTORY = _create_temporary_directory(provider)
        return _TEMP_DIRECTORY.copy()


def _create_temporary_directory(provider: FilesystemProvider | None) -> Path:
    result = Path(provider=provider)
    root = result.provider.get_temp_root()
    if not root or not result.set_directory(root):
        raise ProviderError(root or "", "Can't determine temporary directory")

    name = f"{TEMP_DIR_PREFIX}_{result.provider.get_current_process_id()}"
    if not result.append_directory(name):
        raise ProviderError(str(result) + name, "Can't determine temporary directory")

    if result.exists():
        logging.getLogger(__name__).warning(
            "Removing stale temporary directory %s.", result
        )
    result.destroy_directory(True)
    result.create_directory(False)
    _log(f"temporary directory is {result}")
    return result
