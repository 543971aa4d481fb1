"""Options for the concatenation command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter
from pydantic import BaseModel, ConfigDict, Field

from .groups import INPUT_GROUP, OUTPUT_GROUP
from .runtime import RuntimeOptions


@Parameter(name="*")
class ConcatOptions(BaseModel):
    """Options for concatenating clips into one video."""

    inputs: Annotated[
        list[Path],
        Parameter(group=INPUT_GROUP),
    ] = Field(
        min_length=1,
        description="Clips to concatenate, in playback order. Repeat for each clip.",
    )
    output: Annotated[
        Path,
        Parameter(group=OUTPUT_GROUP),
    ] = Field(description="Path for the concatenated video.")
    runtime: RuntimeOptions = Field(default_factory=RuntimeOptions)

    model_config = ConfigDict(extra="forbid")


__all__ = ["ConcatOptions"]
