from __future__ import annotations


class PathError(RuntimeError):
    def __init__(self, message: str, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class InvalidPathError(PathError, ValueError):
    pass


class ProviderError(PathError):
    """A filesystem provider call failed for ``path``."""

    def __init__(self, path: str, action: str, reason: str = "") -> None:
        message = f"{path}: {action}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path=path)
        self.action = action
        self.reason = reason

    @classmethod
    def from_os_error(cls, path: str, action: str, exc: OSError) -> ProviderError:
        return cls(path, action, exc.strerror or str(exc))
