"""
Platform path rules and component decomposition.

Whether a string is a single harmless filename or an anchored path depends on
which platform parses it: ``C:\\x`` is one ordinary segment under POSIX rules
and a drive-prefixed path under Windows rules. Everything in path_ratchet
validates under an explicit ``Platform`` so callers can check paths with the
rules of the system the path will finally be used on.

Parsing itself is delegated to pathlib; this module only classifies the parts
pathlib produces.
"""
from __future__ import annotations

import os
from enum import Enum
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Iterator, NamedTuple, Optional, Union

__all__ = [
    "Platform",
    "ComponentKind",
    "Component",
    "PathInput",
    "PlatformLike",
    "to_pure_path",
    "components",
]

# Anything os.fsdecode() understands
PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class Platform(str, Enum):
    """Path parsing rules a value is validated under."""
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def native(cls) -> Platform:
        """Rules of the running interpreter."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def parse(cls, value: PlatformLike) -> Platform:
        """
        Coerce a platform name (or ``None`` for native) into a Platform.

        Raises:
            ValueError: If the name is not a known platform
        """
        if value is None:
            return cls.native()
        if isinstance(value, Platform):
            return value
        key = str(value).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown platform: {value!r}") from None

    @classmethod
    def of(cls, path: PurePath) -> Platform:
        """Platform whose rules the given pure path follows."""
        return cls.WINDOWS if isinstance(path, PureWindowsPath) else cls.POSIX

    @property
    def path_class(self) -> type[PurePath]:
        return PureWindowsPath if self is Platform.WINDOWS else PurePosixPath


PlatformLike = Optional[Union[Platform, str]]

_ALIASES = {
    "posix": Platform.POSIX,
    "unix": Platform.POSIX,
    "linux": Platform.POSIX,
    "darwin": Platform.POSIX,
    "macos": Platform.POSIX,
    "windows": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "nt": Platform.WINDOWS,
}


class ComponentKind(str, Enum):
    """Classification of one element of a decomposed path."""
    PREFIX = "prefix"          # drive or UNC share ("C:", "\\\\server\\share")
    ROOT_DIR = "root_dir"      # "/" or "\\"
    CUR_DIR = "cur_dir"        # "."
    PARENT_DIR = "parent_dir"  # ".."
    NORMAL = "normal"          # an actual file or directory name


class Component(NamedTuple):
    kind: ComponentKind
    value: str


def to_pure_path(value: PathInput, platform: PlatformLike = None) -> PurePath:
    """
    Adapt any path-like input to a pure path parsed by the target platform.

    A ``PurePath`` that already follows the target rules is returned as-is,
    so wrappers built on it share the caller's object. When ``platform`` is
    None, a ``PurePath`` keeps its own rules and everything else is parsed
    with the native rules.

    Args:
        value: str, bytes or os.PathLike
        platform: Target platform rules (name, Platform or None)

    Returns:
        PurePosixPath or PureWindowsPath

    Raises:
        TypeError: If value is not path-like
        ValueError: If platform is unknown
    """
    if platform is None and isinstance(value, PurePath):
        target = Platform.of(value)
    else:
        target = Platform.parse(platform)

    path_class = target.path_class
    if isinstance(value, path_class):
        return value
    return path_class(os.fsdecode(value))


def _classify(part: str) -> ComponentKind:
    if part == "..":
        return ComponentKind.PARENT_DIR
    if part == ".":
        return ComponentKind.CUR_DIR
    return ComponentKind.NORMAL


def components(path: PurePath) -> Iterator[Component]:
    """
    Decompose a pure path into classified components.

    pathlib folds the drive and root into a single anchor part and drops
    redundant ``.`` markers and separators; the anchor is split back into
    PREFIX and ROOT_DIR here so every structural marker is visible.

    Examples:
        >>> list(components(PureWindowsPath("C:\\\\x")))
        [Component(kind=<ComponentKind.PREFIX: 'prefix'>, value='C:'),
         Component(kind=<ComponentKind.ROOT_DIR: 'root_dir'>, value='\\\\'),
         Component(kind=<ComponentKind.NORMAL: 'normal'>, value='x')]
    """
    if path.drive:
        yield Component(ComponentKind.PREFIX, path.drive)
    if path.root:
        yield Component(ComponentKind.ROOT_DIR, path.root)

    parts = path.parts[1:] if path.anchor else path.parts
    for part in parts:
        yield Component(_classify(part), part)
