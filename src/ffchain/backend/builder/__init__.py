"""Build FFmpeg command arguments."""

from .command_builder import FFmpeg
from .filtergraph import build_concat_filtergraph, target_dimensions

__all__ = ["FFmpeg", "build_concat_filtergraph", "target_dimensions"]
