"""Constrained flag values understood by ffmpeg."""

from enum import Enum


class LogLevel(str, Enum):
    """Values accepted by ``-loglevel``."""

    QUIET = "quiet"
    PANIC = "panic"
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    VERBOSE = "verbose"
    DEBUG = "debug"
    TRACE = "trace"


class CropMode(str, Enum):
    """Values accepted by ``-apply_cropping``."""

    NONE = "none"
    ALL = "all"
    CODEC = "codec"
    CONTAINER = "container"


class ConcatStage(str, Enum):
    """Step of the concatenation workflow that produced a result."""

    PROBE = "probe"
    TRANSCODE = "transcode"


__all__ = ["ConcatStage", "CropMode", "LogLevel"]
