"""Path - a validated, mutable filesystem location.

The value is a single string using ``/`` as separator. A trailing ``/``
marks a directory, anything else is a file. The empty string is the
cleared state: valid, but neither a file nor a directory.

Every mutator is transactional: it edits, revalidates and on failure
restores the previous value and returns False.
"""

from __future__ import annotations

import sys
from typing import Callable

from .errors import InvalidPathError, ProviderError
from .provider import Attributes, FilesystemProvider
from .rules import SEPARATOR, PathRules

ARCHIVE_MAGIC = b"!<arch>\n"
BYTECODE_SIGNATURES: tuple[bytes, ...] = (b"llvc", b"llvm")


def _log(msg: str) -> None:
    from .runtime import get_verbose_logging

    if get_verbose_logging():
        print(f"[path] {msg}", file=sys.stderr, flush=True)


class Path:
    __slots__ = ("_path", "rules", "provider")

    def __init__(
        self,
        raw: str = "",
        *,
        rules: PathRules | None = None,
        provider: FilesystemProvider | None = None,
    ) -> None:
        from .runtime import get_default_provider, get_default_rules

        self.rules = rules if rules is not None else get_default_rules()
        self.provider = provider if provider is not None else get_default_provider()
        self._path = self.rules.normalize(raw)
        if raw and not self.is_valid():
            self._path = ""
            raise InvalidPathError(f"{raw}: path is not valid", path=raw)

    # -- value behaviour -------------------------------------------------

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Path({self._path!r})"

    def __fspath__(self) -> str:
        return self._path

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._path == other._path
        if isinstance(other, str):
            return self._path == other
        return NotImplemented

    def __lt__(self, other: Path) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._path < other._path

    __hash__ = None  # mutable

    def copy(self) -> Path:
        clone = Path.__new__(Path)
        clone._path = self._path
        clone.rules = self.rules
        clone.provider = self.provider
        return clone

    __copy__ = copy

    def to_string(self) -> str:
        return self._path

    def clear(self) -> None:
        self._path = ""

    def is_empty(self) -> bool:
        return not self._path

    # -- validity & classification ---------------------------------------

    def is_valid(self) -> bool:
        return self.rules.is_valid(self._path)

    def is_file(self) -> bool:
        return bool(self._path) and self.is_valid() and self._path[-1] != SEPARATOR

    def is_directory(self) -> bool:
        return bool(self._path) and self.is_valid() and self._path[-1] == SEPARATOR

    # -- transactional mutators ------------------------------------------

    def _commit(self, candidate: str) -> bool:
        saved = self._path
        self._path = candidate
        if not self.is_valid():
            self._path = saved
            return False
        return True

    def set_directory(self, a_path: str) -> bool:
        if not a_path:
            return False
        candidate = self.rules.normalize(a_path)
        if not candidate.endswith(SEPARATOR):
            candidate += SEPARATOR
        return self._commit(candidate)

    def set_file(self, a_path: str) -> bool:
        if not a_path:
            return False
        candidate = self.rules.normalize(a_path)
        end = len(candidate)
        while end > 1 and candidate[end - 1] == SEPARATOR:
            end -= 1
        return self._commit(candidate[:end])

    def append_directory(self, name: str) -> bool:
        if self.is_file():
            return False
        return self._commit(self._path + name + SEPARATOR)

    def elide_directory(self) -> bool:
        """Drop the last directory segment: ``/a/b/`` becomes ``/a/``.

        Fails rather than erase the root separator, so ``/a/`` and ``a/``
        cannot be elided.
        """
        if self.is_file():
            return False
        slash = self._path.rfind(SEPARATOR)
        if slash <= 0:
            return False
        if slash == len(self._path) - 1:
            slash = self._path.rfind(SEPARATOR, 0, slash)
            if slash <= 0:
                return False
        return self._commit(self._path[: slash + 1])

    def append_file(self, name: str) -> bool:
        if not self.is_directory():
            return False
        return self._commit(self._path + name)

    def elide_file(self) -> bool:
        if self.is_directory():
            return False
        slash = self._path.rfind(SEPARATOR)
        if slash == -1:
            return False
        return self._commit(self._path[: slash + 1])

    def append_suffix(self, suffix: str) -> bool:
        if self.is_directory():
            return False
        return self._commit(f"{self._path}.{suffix}")

    def elide_suffix(self) -> bool:
        if self.is_directory():
            return False
        dot = self._path.rfind(".")
        slash = self._path.rfind(SEPARATOR)
        # a leading dot names a hidden file, not a suffix
        if dot == -1 or dot <= slash + 1:
            return False
        return self._commit(self._path[:dot])

    # -- name extraction -------------------------------------------------

    def get_basename(self) -> str:
        segment = self._path[self._path.rfind(SEPARATOR) + 1 :]
        dot = segment.rfind(".")
        if dot == -1:
            return segment
        return segment[:dot]

    def get_last(self) -> str:
        path = self._path
        slash = path.rfind(SEPARATOR)
        if slash == -1:
            return path
        if slash == len(path) - 1:
            previous = path.rfind(SEPARATOR, 0, slash)
            return path[previous + 1 : slash]
        return path[slash + 1 :]

    # -- filesystem probes -----------------------------------------------

    def _attributes(self) -> Attributes | None:
        return self.provider.query_attributes(self._path)

    def exists(self) -> bool:
        return self._attributes() is not None

    def readable(self) -> bool:
        attrs = self._attributes()
        return attrs is not None and attrs.readable

    def writable(self) -> bool:
        attrs = self._attributes()
        return attrs is not None and not attrs.read_only

    def executable(self) -> bool:
        attrs = self._attributes()
        return attrs is not None and attrs.executable

    def has_magic_number(self, magic: bytes | str) -> bool:
        if isinstance(magic, str):
            magic = magic.encode("latin-1")
        try:
            head = self.provider.read_bytes(self._path, len(magic))
        except OSError as exc:
            _log(f"can't read {self._path}: {exc}")
            return False
        return head == magic

    def is_archive(self) -> bool:
        return self.readable() and self.has_magic_number(ARCHIVE_MAGIC)

    def is_bytecode_file(self) -> bool:
        try:
            head = self.provider.read_bytes(self._path, 4)
        except OSError as exc:
            raise ProviderError.from_os_error(
                self._path, "can't read file signature", exc
            ) from exc
        return head in BYTECODE_SIGNATURES

    # -- tree creation/destruction ---------------------------------------

    def _call(self, action: str, target: str, op: Callable[[str], None]) -> None:
        try:
            op(target)
        except OSError as exc:
            raise ProviderError.from_os_error(target, action, exc) from exc

    def _first_component_offset(self) -> int:
        path = self._path
        if path.startswith("//"):
            host_end = path.find(SEPARATOR, 2)
            share_end = path.find(SEPARATOR, host_end + 1) if host_end != -1 else -1
            if share_end == -1 or share_end + 1 >= len(path):
                raise InvalidPathError(
                    f"{path}: badly formed remote directory", path=path
                )
            return share_end + 1
        offset = 0
        if len(path) > 1 and path[1] == ":":
            offset = 2
        if path[offset : offset + 1] == SEPARATOR:
            offset += 1
        return offset

    def create_directory(self, create_parents: bool = False) -> bool:
        """
        Create the directory this path names.
        With ``create_parents`` every missing ancestor is created too and
        directories that already exist are accepted; otherwise only the final
        directory is created and any failure (including "already exists")
        raises ProviderError.
        """
        if not self.is_directory():
            return False

        path = self._path
        if create_parents:
            position = self._first_component_offset()
            while position < len(path):
                position = path.index(SEPARATOR, position)
                prefix = path[:position]
                try:
                    self.provider.create_directory(prefix)
                except FileExistsError:
                    attrs = self.provider.query_attributes(prefix)
                    if attrs is None or not attrs.is_directory:
                        raise ProviderError(
                            prefix,
                            "Can't create directory",
                            "exists and is not a directory",
                        )
                except OSError as exc:
                    raise ProviderError.from_os_error(
                        prefix, "Can't create directory", exc
                    ) from exc
                else:
                    _log(f"created {prefix}")
                position += 1
        else:
            # rejects a malformed UNC prefix
            self._first_component_offset()
            self._call("Can't create directory", path[:-1], self.provider.create_directory)
            _log(f"created {path[:-1]}")
        return True

    def create_file(self) -> bool:
        if not self.is_file():
            return False
        self._call("Can't create file", self._path, self.provider.create_file)
        return True

    def destroy_directory(self, remove_contents: bool = False) -> bool:
        if not self.is_directory():
            return False
        if not self.exists():
            return True

        target = self._path
        if len(target) > 1:
            target = target[:-1]
        if remove_contents:
            self._call(
                "Can't destroy directory",
                target,
                self.provider.remove_directory_recursive,
            )
        else:
            self._call("Can't destroy directory", target, self.provider.remove_directory)
        _log(f"removed {target}")
        return True

    def destroy_file(self) -> bool:
        if not self.is_file():
            return False
        attrs = self._attributes()
        if attrs is None:
            return True
        if attrs.read_only:
            self._call("Can't destroy file", self._path, self.provider.clear_read_only)
        self._call("Can't destroy file", self._path, self.provider.delete_file)
        return True
