"""
Validated path wrapper types.

Two families guard against directory traversal:

- ``SingleComponentPath`` / ``SingleComponentPathBuf``: exactly one normal
  segment (``"foo"``, ``"./bar.txt"``), suitable for a user-supplied filename.
- ``MultiComponentPath`` / ``MultiComponentPathBuf``: any number of normal
  segments and ``.`` markers (``"a/b/c"``, ``""``), with no ``..``, root or
  drive anywhere.

Each family has a borrowed variant, a view that shares the caller's path
object, and an owned variant that holds its own copy. Values are validated
once at construction and never change afterwards.

Example:
    >>> SingleComponentPath.new("/etc/shadow", platform="posix") is None
    True
    >>> SingleComponentPathBuf("./bar.txt", platform="posix").path
    PurePosixPath('bar.txt')
"""
from __future__ import annotations

import functools
from pathlib import PurePath
from typing import Any, Callable, ClassVar, Optional, TypeVar

from .errors import UnsafePathError
from .platforms import Component, ComponentKind, PathInput, Platform, PlatformLike, components, to_pure_path
from .validation import is_multi_component, is_single_component

__all__ = [
    "SingleComponentPath",
    "SingleComponentPathBuf",
    "MultiComponentPath",
    "MultiComponentPathBuf",
]

T = TypeVar("T", bound="_ValidatedPath")


def _copy_path(path: PurePath) -> PurePath:
    """Independent pure path with the same content and rules."""
    return Platform.of(path).path_class(str(path))


@functools.total_ordering
class _ValidatedPath:
    """Shared behavior of all four wrapper types."""

    __slots__ = ("_path",)

    family: ClassVar[str]
    _predicate: ClassVar[Callable[[PurePath], bool]]

    def __init__(self, value: PathInput, platform: PlatformLike = None):
        if isinstance(value, _ValidatedPath):
            value = value._path
        path = self._adapt(to_pure_path(value, platform))
        if not type(self)._predicate(path):
            raise UnsafePathError(value, self.family, Platform.of(path).value)
        object.__setattr__(self, "_path", path)

    @staticmethod
    def _adapt(path: PurePath) -> PurePath:
        return path

    @classmethod
    def new(cls: type[T], value: PathInput, platform: PlatformLike = None) -> Optional[T]:
        """
        Validate ``value`` and wrap it, or return None if it is unsafe.

        Args:
            value: str, bytes or os.PathLike (another wrapper included)
            platform: Rules to validate under; None keeps a PurePath's own
                rules and uses the native rules for everything else

        Returns:
            The wrapper, or None if the value fails validation
        """
        try:
            return cls(value, platform)
        except UnsafePathError:
            return None

    @classmethod
    def _trusted(cls: type[T], path: PurePath) -> T:
        # Only for paths that already passed the same family's predicate
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_path", path)
        return obj

    @property
    def path(self) -> PurePath:
        """The validated pure path."""
        return self._path

    @property
    def platform(self) -> Platform:
        return Platform.of(self._path)

    def components(self) -> list[Component]:
        return list(components(self._path))

    def __fspath__(self) -> str:
        return str(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r}, platform={self.platform.value!r})"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # Unpickling goes back through the validating constructor
        return (type(self), (str(self._path), self.platform.value))

    def _same_family(self, other: object) -> bool:
        return isinstance(other, _ValidatedPath) and other.family == self.family

    def __eq__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: object) -> bool:
        if not self._same_family(other):
            return NotImplemented
        return self._path < other._path

    def __hash__(self) -> int:
        return hash((self.family, self._path))


class _SingleComponent(_ValidatedPath):
    __slots__ = ()
    family = "single"
    _predicate = staticmethod(is_single_component)

    @property
    def name(self) -> str:
        """The one normal segment."""
        return self._path.name


class _MultiComponent(_ValidatedPath):
    __slots__ = ()
    family = "multi"
    _predicate = staticmethod(is_multi_component)

    @property
    def parts(self) -> tuple[str, ...]:
        """Normal segments in order (empty for the empty path)."""
        return tuple(c.value for c in components(self._path) if c.kind is ComponentKind.NORMAL)


class SingleComponentPath(_SingleComponent):
    """
    Borrowed view of a path with exactly one normal component.

    Allows ``.`` markers around the segment, rejects parent references,
    roots and drive prefixes. When given a ``PurePath`` of the target
    platform the view shares that object instead of copying it.
    """
    __slots__ = ()

    def to_owned(self) -> SingleComponentPathBuf:
        """Owned copy of this view (no revalidation)."""
        return SingleComponentPathBuf._trusted(_copy_path(self._path))


class SingleComponentPathBuf(_SingleComponent):
    """
    Owned path with exactly one normal component.

    Same rules as ``SingleComponentPath``; always holds its own path object.

    Example:
        >>> SingleComponentPathBuf.new("foo/bar.txt", platform="posix") is None
        True
    """
    __slots__ = ()

    _adapt = staticmethod(_copy_path)

    @classmethod
    def from_borrowed(cls, view: SingleComponentPath) -> SingleComponentPathBuf:
        return view.to_owned()

    def borrow(self) -> SingleComponentPath:
        """Borrowed view sharing this value's path (no copy, no revalidation)."""
        return SingleComponentPath._trusted(self._path)

    def __copy__(self) -> SingleComponentPathBuf:
        return type(self)._trusted(_copy_path(self._path))

    def __deepcopy__(self, memo: dict) -> SingleComponentPathBuf:
        return self.__copy__()


class MultiComponentPath(_MultiComponent):
    """
    Borrowed view of a relative path made only of normal segments.

    ``.`` markers are allowed and the empty path is valid; any ``..``, root
    or drive prefix rejects the whole path.
    """
    __slots__ = ()

    def to_owned(self) -> MultiComponentPathBuf:
        """Owned copy of this view (no revalidation)."""
        return MultiComponentPathBuf._trusted(_copy_path(self._path))


class MultiComponentPathBuf(_MultiComponent):
    """Owned relative path made only of normal segments."""
    __slots__ = ()

    _adapt = staticmethod(_copy_path)

    @classmethod
    def from_borrowed(cls, view: MultiComponentPath) -> MultiComponentPathBuf:
        return view.to_owned()

    def borrow(self) -> MultiComponentPath:
        """Borrowed view sharing this value's path (no copy, no revalidation)."""
        return MultiComponentPath._trusted(self._path)

    def __copy__(self) -> MultiComponentPathBuf:
        return type(self)._trusted(_copy_path(self._path))

    def __deepcopy__(self, memo: dict) -> MultiComponentPathBuf:
        return self.__copy__()
