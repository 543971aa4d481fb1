"""Fluent FFmpeg command builder and clip concatenation."""

from .backend import ConcatResult, FFmpeg, concat_videos
from .errors import FFchainError, ParseAmbiguity, PreconditionViolation, ProcessFailure
from .tools.probe import get_dimensions, has_audio_stream

__all__ = [
    "ConcatResult",
    "FFchainError",
    "FFmpeg",
    "ParseAmbiguity",
    "PreconditionViolation",
    "ProcessFailure",
    "concat_videos",
    "get_dimensions",
    "has_audio_stream",
]
