"""
Pydantic field types for validated paths.

Lets request and config models declare traversal-safe path fields directly:

    class Upload(BaseModel):
        filename: SafeFilename
        folder: SafeRelativePath = MultiComponentPathBuf("")

Unsafe input fails model validation with a regular pydantic ValidationError.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Annotated, Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .components import MultiComponentPathBuf, SingleComponentPathBuf, _ValidatedPath
from .errors import UnsafePathError
from .platforms import PlatformLike

__all__ = ["ValidatedPath", "SafeFilename", "SafeRelativePath"]


@dataclass(frozen=True)
class ValidatedPath:
    """
    ``Annotated`` marker that validates a field into an owned wrapper.

    Attributes:
        kind: SingleComponentPathBuf or MultiComponentPathBuf
        platform: Rules to validate under (None: native, or a PurePath's own)
    """
    kind: type[Union[SingleComponentPathBuf, MultiComponentPathBuf]]
    platform: PlatformLike = None

    def _validate(self, value: Any):
        if not isinstance(value, (str, PurePath, _ValidatedPath)):
            raise ValueError(f"expected a path string, got {type(value).__name__}")
        try:
            return self.kind(value, self.platform)
        except UnsafePathError as e:
            raise ValueError(str(e)) from e

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                self._validate, core_schema.str_schema()
            ),
            python_schema=core_schema.no_info_plain_validator_function(self._validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: str(value), info_arg=False
            ),
        )


SafeFilename = Annotated[SingleComponentPathBuf, ValidatedPath(SingleComponentPathBuf)]
SafeRelativePath = Annotated[MultiComponentPathBuf, ValidatedPath(MultiComponentPathBuf)]
