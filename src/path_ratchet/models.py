"""
Report models for validation results.

Used by the CLI for ``--json`` output and usable by host applications that
want to log or return why a path was rejected.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .components import MultiComponentPathBuf, SingleComponentPathBuf
from .platforms import ComponentKind, Platform, PlatformLike, components, to_pure_path

__all__ = ["ComponentReport", "PathReport"]

Kind = Literal["single", "multi"]


class ComponentReport(BaseModel):
    """One decomposed path component."""
    kind: ComponentKind = Field(..., description="Component classification")
    value: str = Field(..., description="Component text as parsed by the platform")


class PathReport(BaseModel):
    """Outcome of validating one input."""
    input: str = Field(..., description="Raw input as given")
    kind: Kind = Field(..., description="Wrapper family checked against")
    platform: Platform = Field(..., description="Path rules used for parsing")
    valid: bool = Field(..., description="True if the input passed validation")
    path: Optional[str] = Field(default=None, description="Normalized path when valid")
    components: List[ComponentReport] = Field(
        default_factory=list, description="Decomposition of the input"
    )

    @classmethod
    def build(cls, value: str, kind: Kind, platform: PlatformLike = None) -> PathReport:
        """
        Validate ``value`` and describe the result.

        Rejection is reported through ``valid=False``, never raised.

        Raises:
            ValueError: If platform is unknown
        """
        target = Platform.parse(platform)
        pure = to_pure_path(value, target)
        wrapper_cls = SingleComponentPathBuf if kind == "single" else MultiComponentPathBuf
        wrapper = wrapper_cls.new(pure)
        return cls(
            input=value,
            kind=kind,
            platform=target,
            valid=wrapper is not None,
            path=str(wrapper) if wrapper is not None else None,
            components=[ComponentReport(kind=c.kind, value=c.value) for c in components(pure)],
        )
