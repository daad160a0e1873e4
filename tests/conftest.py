from __future__ import annotations

import errno

import pytest

from sysloc.provider import Attributes


class MemoryFilesystem:
    """In-memory provider; paths are stored without trailing slashes."""

    def __init__(self) -> None:
        self.dirs: set[str] = set()
        self.files: dict[str, bytes] = {}
        self.read_only: set[str] = set()
        self.unreadable: set[str] = set()
        self.env: dict[str, str] = {}
        self.temp_root = "/tmp/"
        self.pid = 4242
        self.calls: list[tuple[str, str]] = []

    @staticmethod
    def _key(path: str) -> str:
        return path.rstrip("/") or "/"

    def add_dir(self, path: str) -> None:
        self.dirs.add(self._key(path))

    def add_file(
        self,
        path: str,
        data: bytes = b"",
        *,
        read_only: bool = False,
        readable: bool = True,
    ) -> None:
        self.files[path] = data
        if read_only:
            self.read_only.add(path)
        if not readable:
            self.unreadable.add(path)

    def _children(self, key: str) -> list[str]:
        prefix = key.rstrip("/") + "/"
        return [p for p in (*self.dirs, *self.files) if p.startswith(prefix)]

    def query_attributes(self, path: str) -> Attributes | None:
        key = self._key(path)
        if key not in self.dirs and key not in self.files:
            return None
        return Attributes(
            read_only=key in self.read_only,
            readable=key not in self.unreadable,
            executable=key in self.dirs,
            is_directory=key in self.dirs,
        )

    def create_directory(self, path: str) -> None:
        self.calls.append(("create_directory", path))
        key = self._key(path)
        if key in self.dirs or key in self.files:
            raise FileExistsError(errno.EEXIST, "File exists", path)
        self.dirs.add(key)

    def remove_directory(self, path: str) -> None:
        self.calls.append(("remove_directory", path))
        key = self._key(path)
        if key not in self.dirs:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        if self._children(key):
            raise OSError(errno.ENOTEMPTY, "Directory not empty", path)
        self.dirs.discard(key)

    def remove_directory_recursive(self, path: str) -> None:
        self.calls.append(("remove_directory_recursive", path))
        key = self._key(path)
        for child in self._children(key):
            self.dirs.discard(child)
            self.files.pop(child, None)
        self.dirs.discard(key)

    def create_file(self, path: str) -> None:
        self.calls.append(("create_file", path))
        if path in self.files or path in self.dirs:
            raise FileExistsError(errno.EEXIST, "File exists", path)
        self.files[path] = b""

    def delete_file(self, path: str) -> None:
        self.calls.append(("delete_file", path))
        if path in self.read_only:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        del self.files[path]

    def clear_read_only(self, path: str) -> None:
        self.calls.append(("clear_read_only", path))
        self.read_only.discard(path)

    def get_temp_root(self) -> str:
        return self.temp_root

    def get_current_process_id(self) -> int:
        return self.pid

    def get_env_var(self, name: str) -> str | None:
        return self.env.get(name)

    def read_bytes(self, path: str, n: int) -> bytes:
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return self.files[path][:n]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("SYSLOC_RULES", "SYSLOC_VERBOSE", "SYSLOC_LIBRARY_PATH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def memfs() -> MemoryFilesystem:
    return MemoryFilesystem()
