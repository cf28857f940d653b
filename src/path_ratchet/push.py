"""
Appending validated components to a destination path.

``pathlib`` joins happily with anything, including absolute paths:

    >>> PurePosixPath("/tmp") / "/etc/shadow"
    PurePosixPath('/etc/shadow')

The helpers here only accept path_ratchet wrappers, so the appended suffix
has already been proven free of roots, drives and parent references and the
result cannot escape the directory it started in.
"""
from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import TypeVar, Union

from .components import (
    MultiComponentPath,
    MultiComponentPathBuf,
    SingleComponentPath,
    SingleComponentPathBuf,
)
from .errors import PlatformMismatchError
from .platforms import PathInput, Platform, PlatformLike, to_pure_path

logger = logging.getLogger(__name__)

__all__ = [
    "SingleComponentLike",
    "MultiComponentLike",
    "push_component",
    "push_components",
    "PathBuilder",
]

SingleComponentLike = Union[SingleComponentPath, SingleComponentPathBuf]
MultiComponentLike = Union[MultiComponentPath, MultiComponentPathBuf]

P = TypeVar("P", bound=PurePath)


def _join(dest: P, component, accepted: tuple[type, ...], what: str) -> P:
    if not isinstance(component, accepted):
        raise TypeError(
            f"expected {what}, got {type(component).__name__}; "
            f"validate untrusted input with {accepted[0].__name__}.new() first"
        )
    dest_platform = Platform.of(dest)
    if component.platform is not dest_platform:
        raise PlatformMismatchError(
            f"{component!r} was validated with {component.platform.value} rules "
            f"but the destination uses {dest_platform.value} rules",
            expected=dest_platform.value,
            actual=component.platform.value,
        )
    return dest / component.path


def push_component(dest: P, component: SingleComponentLike) -> P:
    """
    Append exactly one validated component to ``dest``.

    Args:
        dest: Destination path (pure or concrete); its type is preserved
        component: SingleComponentPath or SingleComponentPathBuf

    Returns:
        ``dest`` extended by the component's path

    Raises:
        TypeError: If component is not a single-component wrapper
        PlatformMismatchError: If component and dest use different rules

    Example:
        >>> push_component(PurePosixPath("/srv"), SingleComponentPath("./a.txt", "posix"))
        PurePosixPath('/srv/a.txt')
    """
    return _join(dest, component, (SingleComponentPath, SingleComponentPathBuf), "a single-component path")


def push_components(dest: P, components: MultiComponentLike) -> P:
    """
    Append a validated run of components to ``dest``.

    Appending the empty multi-component path returns ``dest`` unchanged.

    Raises:
        TypeError: If components is not a multi-component wrapper
        PlatformMismatchError: If components and dest use different rules
    """
    return _join(dest, components, (MultiComponentPath, MultiComponentPathBuf), "a multi-component path")


class PathBuilder:
    """
    Growable destination path that only grows by validated components.

    The base path belongs to the host application and is trusted as given;
    everything appended afterwards has to be a path_ratchet wrapper.

    Example:
        >>> builder = PathBuilder("/srv/uploads", platform="posix")
        >>> builder.push_component(SingleComponentPathBuf("report.pdf", "posix"))
        PathBuilder('/srv/uploads/report.pdf', platform='posix')
    """

    __slots__ = ("_path",)

    def __init__(self, base: PathInput, platform: PlatformLike = None):
        self._path = to_pure_path(base, platform)

    @property
    def path(self) -> PurePath:
        return self._path

    @property
    def platform(self) -> Platform:
        return Platform.of(self._path)

    def push_component(self, component: SingleComponentLike) -> PathBuilder:
        """Append one validated component in place; returns self for chaining."""
        self._path = push_component(self._path, component)
        logger.debug(f"Appended component {component} -> {self._path}")
        return self

    def push_components(self, components: MultiComponentLike) -> PathBuilder:
        """Append a validated run of components in place; returns self for chaining."""
        self._path = push_components(self._path, components)
        logger.debug(f"Appended components {components} -> {self._path}")
        return self

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"PathBuilder({str(self._path)!r}, platform={self.platform.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathBuilder):
            return NotImplemented
        return self._path == other._path

    __hash__ = None  # mutable
