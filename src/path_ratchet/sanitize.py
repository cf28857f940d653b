"""
Best-effort conversion of arbitrary text into a single path component.

Prefer rejecting unsafe input with ``SingleComponentPathBuf.new()``. This
module exists for callers that must always end up with *some* filename (for
example when storing uploads under their original names). The exact output
is not stable across releases; only the guarantee that it forms one normal
component is.
"""
from __future__ import annotations

import logging
import re

from .components import SingleComponentPathBuf
from .errors import SanitizerError, UnsafePathError
from .platforms import PlatformLike

logger = logging.getLogger(__name__)

__all__ = ["MAX_COMPONENT_BYTES", "FALLBACK_NAME", "check_replacement", "sanitize_component"]

MAX_COMPONENT_BYTES = 255
FALLBACK_NAME = "unnamed"

_ILLEGAL = re.compile(r'[/\\?<>:*|"\x00-\x1f\x7f-\x9f]')
_ONLY_DOTS = re.compile(r"^\.+$")
_WINDOWS_RESERVED = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)
_TRAILING_DOTS_SPACES = re.compile(r"[. ]+$")


def check_replacement(replacement: str) -> str:
    """Reject replacement text that would itself need sanitizing."""
    if (
        _ILLEGAL.search(replacement)
        or _TRAILING_DOTS_SPACES.search(replacement)
        or _WINDOWS_RESERVED.match(replacement)
        or len(replacement.encode("utf-8", errors="surrogatepass")) > MAX_COMPONENT_BYTES
    ):
        raise ValueError(f"Invalid replacement: {replacement!r}")
    return replacement


def _truncate_utf8(value: str, limit: int) -> str:
    encoded = value.encode("utf-8", errors="surrogatepass")
    if len(encoded) <= limit:
        return value
    return encoded[:limit].decode("utf-8", errors="ignore")


def sanitize_component(
    raw: str,
    platform: PlatformLike = None,
    replacement: str = "_",
) -> SingleComponentPathBuf:
    """
    Rewrite ``raw`` into a name that is always a single normal component.

    Windows naming rules are applied regardless of ``platform`` so that the
    result is portable; ``platform`` only selects the rules used for the
    final validation.

    Args:
        raw: Untrusted text (filename, title, archive entry name...)
        platform: Rules the resulting wrapper is validated under
        replacement: Text substituted for illegal characters and names

    Returns:
        SingleComponentPathBuf wrapping the sanitized name

    Raises:
        ValueError: If replacement is illegal, reserved or too long
        SanitizerError: If the sanitized name still fails validation (a bug)

    Examples:
        >>> sanitize_component("../../etc/shadow", "posix").name
        '.._.._etc_shadow'
        >>> sanitize_component("CON.txt", "posix").name
        '_'
    """
    check_replacement(replacement)

    name = _ILLEGAL.sub(replacement, raw)
    if _ONLY_DOTS.match(name) or _WINDOWS_RESERVED.match(name):
        name = replacement
    name = _TRAILING_DOTS_SPACES.sub(replacement, name)

    # Replacements above can lengthen the name; cut last and drop what the cut exposes
    truncated = _truncate_utf8(name, MAX_COMPONENT_BYTES)
    if truncated != name:
        name = _TRAILING_DOTS_SPACES.sub("", truncated)
        if _WINDOWS_RESERVED.match(name):
            name = replacement
    if not name.strip():
        name = FALLBACK_NAME

    if name != raw:
        logger.debug(f"Sanitized component {raw!r} -> {name!r}")

    try:
        return SingleComponentPathBuf(name, platform)
    except UnsafePathError as e:
        raise SanitizerError(f"sanitizer produced an invalid component from {raw!r}: {name!r}") from e
