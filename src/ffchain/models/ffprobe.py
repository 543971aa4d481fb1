"""Dataclasses for ffprobe outputs."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Dimensions:
    """Frame size of a video stream.

    Either side is ``math.nan`` when ffprobe printed something that could not
    be read as an integer and the probe ran in permissive mode.
    """

    width: int | float
    height: int | float

    @property
    def is_valid(self) -> bool:
        """Whether both sides were parsed as numbers."""
        return not (math.isnan(self.width) or math.isnan(self.height))

    def __str__(self) -> str:
        """Return the ``WxH`` form ffprobe prints."""
        return f"{self.width}x{self.height}"


__all__ = ["Dimensions"]
