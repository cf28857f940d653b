"""
Error classes for path_ratchet.

Rejecting an unsafe path is a single, expected outcome: ``new()`` constructors
report it as ``None`` and direct construction raises ``UnsafePathError``.
The remaining errors indicate caller mistakes or internal bugs.
"""
from __future__ import annotations

from typing import Any, Optional


class PathRatchetError(Exception):
    """Base class for all path_ratchet errors."""
    pass


class UnsafePathError(PathRatchetError, ValueError):
    """
    Input does not satisfy the component-validity rule.

    Raised when a wrapper is constructed directly from a value that contains
    a parent reference, a root or drive anchor, or (for single-component
    wrappers) anything other than exactly one normal segment.
    """

    def __init__(self, value: Any, kind: str, platform: Optional[str] = None):
        super().__init__(f"unsafe path: {value}")
        self.value = value
        self.kind = kind
        self.platform = platform


class PlatformMismatchError(PathRatchetError, ValueError):
    """
    Component validated under different platform rules than the destination.

    A name validated with POSIX rules may contain backslashes that Windows
    rules read as separators, so it cannot be appended to a Windows path.
    """

    def __init__(self, message: str, expected: str | None = None, actual: str | None = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class SanitizerError(PathRatchetError, RuntimeError):
    """
    Sanitized output failed validation.

    The sanitizer promises output that always forms a single component, so
    this signals a bug in the sanitizer rather than bad input.
    """
    pass


__all__ = [
    "PathRatchetError",
    "UnsafePathError",
    "PlatformMismatchError",
    "SanitizerError",
]
