"""FFmpeg-related helper utilities."""

from . import probe
from .cli import (
    format_ffmpeg_cmd,
    get_ffmpeg_version,
    get_ffprobe_version,
    run_ffmpeg,
    run_ffprobe,
)
from .helpers import emit_status

__all__ = [
    "emit_status",
    "format_ffmpeg_cmd",
    "get_ffmpeg_version",
    "get_ffprobe_version",
    "probe",
    "run_ffmpeg",
    "run_ffprobe",
]
