"""Runtime option models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator

from ffchain.models.context import RuntimeContext
from ffchain.models.verbosity import Verbosity

from .groups import RUNTIME_GROUP

if TYPE_CHECKING:
    from collections.abc import Callable


@Parameter(group=RUNTIME_GROUP)
class RuntimeOptions(BaseModel):
    """Runtime behavior options."""

    verbosity: Verbosity = Field(
        default=Verbosity.QUIET,
        description=("Increase logging verbosity. Commands: show FFmpeg commands; Output: also show FFmpeg output."),
    )
    dry_run: bool = Field(default=False, description="Print the FFmpeg command without executing it.")

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity:
        """Accept numeric values or case-insensitive enum names.

        Allows CLI usage like ``--runtime.verbosity commands`` in addition to
        ``--runtime.verbosity 1``.
        """
        if isinstance(v, Verbosity):
            return v
        if isinstance(v, int):
            return Verbosity(v)
        if isinstance(v, str):
            token = v.strip()
            try:
                return Verbosity[token.upper()]
            except KeyError:
                try:
                    return Verbosity(int(token))
                except (ValueError, KeyError):
                    pass
        raise ValueError("verbosity must be one of quiet, commands, output, or 0/1/2")

    def context(self, status_callback: Callable[[str], None] | None = None) -> RuntimeContext:
        """Return a runtime context carrying these flags."""
        return RuntimeContext(
            verbosity=self.verbosity,
            dry_run=self.dry_run,
            status_callback=status_callback,
        )


__all__ = ["RuntimeOptions"]
