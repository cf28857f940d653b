"""
Component-validity predicates.

Both predicates are pure and total: they look only at the component
decomposition of an already-parsed pure path and never touch the filesystem.
"""
from __future__ import annotations

from pathlib import PurePath

from .platforms import ComponentKind, components

__all__ = ["is_single_component", "is_multi_component"]

_MULTI_ALLOWED = frozenset({ComponentKind.NORMAL, ComponentKind.CUR_DIR})


def is_single_component(path: PurePath) -> bool:
    """
    True if the path is exactly one normal segment, ignoring ``.`` markers.

    Examples:
        >>> is_single_component(PurePosixPath("./bar.txt"))
        True
        >>> is_single_component(PurePosixPath("foo/bar"))
        False
        >>> is_single_component(PurePosixPath("."))
        False
    """
    remaining = [c for c in components(path) if c.kind is not ComponentKind.CUR_DIR]
    return len(remaining) == 1 and remaining[0].kind is ComponentKind.NORMAL


def is_multi_component(path: PurePath) -> bool:
    """
    True if every component is a normal segment or a ``.`` marker.

    The empty path has no components and is therefore valid.
    """
    return all(c.kind in _MULTI_ALLOWED for c in components(path))
