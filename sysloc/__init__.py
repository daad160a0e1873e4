from .errors import InvalidPathError, PathError, ProviderError
from .library import get_library_path, is_library
from .locations import (
    get_config_directory,
    get_default_config_directory,
    get_root_directory,
    get_system_library_paths,
    get_temporary_directory,
    get_user_home_directory,
)
from .path import ARCHIVE_MAGIC, BYTECODE_SIGNATURES, Path
from .provider import Attributes, FilesystemProvider, LocalFilesystem
from .rules import PathRules, PosixRules, Win32Rules, get_rules

__all__ = [
    "Path",
    "PathRules",
    "Win32Rules",
    "PosixRules",
    "get_rules",
    "FilesystemProvider",
    "LocalFilesystem",
    "Attributes",
    "PathError",
    "InvalidPathError",
    "ProviderError",
    "get_library_path",
    "is_library",
    "get_root_directory",
    "get_user_home_directory",
    "get_system_library_paths",
    "get_default_config_directory",
    "get_config_directory",
    "get_temporary_directory",
    "ARCHIVE_MAGIC",
    "BYTECODE_SIGNATURES",
]
