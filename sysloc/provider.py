"""Filesystem provider - the OS calls ``Path`` is built on."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Attributes:
    read_only: bool = False
    readable: bool = True
    executable: bool = True
    is_directory: bool = False


@runtime_checkable
class FilesystemProvider(Protocol):
    """
    Operations a provider must supply.
    Failing mutations raise ``OSError`` (``FileExistsError`` when the target
    is already there); ``query_attributes`` returns None for a missing path.
    """

    def query_attributes(self, path: str) -> Attributes | None: ...
    def create_directory(self, path: str) -> None: ...
    def remove_directory(self, path: str) -> None: ...
    def remove_directory_recursive(self, path: str) -> None: ...
    def create_file(self, path: str) -> None: ...
    def delete_file(self, path: str) -> None: ...
    def clear_read_only(self, path: str) -> None: ...
    def get_temp_root(self) -> str: ...
    def get_current_process_id(self) -> int: ...
    def get_env_var(self, name: str) -> str | None: ...
    def read_bytes(self, path: str, n: int) -> bytes: ...


class LocalFilesystem:
    """Provider backed by the local operating system."""

    def query_attributes(self, path: str) -> Attributes | None:
        try:
            st = os.stat(path)
        except OSError:
            return None
        read_only = not (st.st_mode & stat.S_IWUSR) or not os.access(path, os.W_OK)
        return Attributes(
            read_only=read_only,
            readable=os.access(path, os.R_OK),
            executable=os.access(path, os.X_OK),
            is_directory=stat.S_ISDIR(st.st_mode),
        )

    def create_directory(self, path: str) -> None:
        os.mkdir(path)

    def remove_directory(self, path: str) -> None:
        os.rmdir(path)

    def remove_directory_recursive(self, path: str) -> None:
        shutil.rmtree(path)

    def create_file(self, path: str) -> None:
        with open(path, "xb"):
            pass

    def delete_file(self, path: str) -> None:
        os.remove(path)

    def clear_read_only(self, path: str) -> None:
        mode = os.stat(path).st_mode
        os.chmod(path, mode | stat.S_IWUSR)

    def get_temp_root(self) -> str:
        return tempfile.gettempdir()

    def get_current_process_id(self) -> int:
        return os.getpid()

    def get_env_var(self, name: str) -> str | None:
        return os.environ.get(name)

    def read_bytes(self, path: str, n: int) -> bytes:
        with open(path, "rb") as f:
            return f.read(n)

    def __repr__(self) -> str:
        return "LocalFilesystem()"
