"""Options package exports."""

from __future__ import annotations

from .concat import ConcatOptions
from .runtime import RuntimeOptions
from .streams import AudioOptions, GlobalOptions, SubtitleOptions, VideoOptions

__all__ = [
    "AudioOptions",
    "ConcatOptions",
    "GlobalOptions",
    "RuntimeOptions",
    "SubtitleOptions",
    "VideoOptions",
]
