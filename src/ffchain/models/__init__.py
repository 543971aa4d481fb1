"""Expose models and type definitions."""

from .context import RuntimeContext
from .ffprobe import Dimensions
from .options import (
    AudioOptions,
    ConcatOptions,
    GlobalOptions,
    RuntimeOptions,
    SubtitleOptions,
    VideoOptions,
)
from .types import ConcatStage, CropMode, LogLevel
from .verbosity import Verbosity

__all__ = [
    "AudioOptions",
    "ConcatOptions",
    "ConcatStage",
    "CropMode",
    "Dimensions",
    "GlobalOptions",
    "LogLevel",
    "RuntimeContext",
    "RuntimeOptions",
    "SubtitleOptions",
    "Verbosity",
    "VideoOptions",
]
