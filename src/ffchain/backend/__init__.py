"""Backend utilities for building and executing FFmpeg commands."""

from .builder import FFmpeg, build_concat_filtergraph
from .concatenate import ConcatResult, concat, concat_videos
from .info import info

__all__ = [
    "ConcatResult",
    "FFmpeg",
    "build_concat_filtergraph",
    "concat",
    "concat_videos",
    "info",
]
