"""
path_ratchet: traversal-safe path components.

``pathlib`` lets any join escape its base:

    >>> PurePosixPath("/tmp") / "/etc/shadow"
    PurePosixPath('/etc/shadow')

Validate untrusted input into a wrapper first and append only wrappers:

    >>> name = SingleComponentPath.new("/etc/shadow", platform="posix")
    >>> name is None
    True
    >>> push_component(PurePosixPath("/tmp"), SingleComponentPath("notes.txt", "posix"))
    PurePosixPath('/tmp/notes.txt')
"""
from .components import (
    MultiComponentPath,
    MultiComponentPathBuf,
    SingleComponentPath,
    SingleComponentPathBuf,
)
from .errors import PathRatchetError, PlatformMismatchError, SanitizerError, UnsafePathError
from .platforms import Component, ComponentKind, Platform, components, to_pure_path
from .push import PathBuilder, push_component, push_components
from .validation import is_multi_component, is_single_component

__version__ = "0.1.0"

__all__ = [
    "SingleComponentPath",
    "SingleComponentPathBuf",
    "MultiComponentPath",
    "MultiComponentPathBuf",
    "PathRatchetError",
    "UnsafePathError",
    "PlatformMismatchError",
    "SanitizerError",
    "Platform",
    "Component",
    "ComponentKind",
    "components",
    "to_pure_path",
    "PathBuilder",
    "push_component",
    "push_components",
    "is_single_component",
    "is_multi_component",
]
