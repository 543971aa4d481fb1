"""ffprobe helpers and probing utilities."""

from __future__ import annotations

import logging
import math
import subprocess

from ffchain.errors import ParseAmbiguity
from ffchain.models.context import RuntimeContext
from ffchain.models.ffprobe import Dimensions
from ffchain.models.verbosity import Verbosity

from .cli import join_command, run_ffprobe
from .helpers import emit_status, format_action_label

_ERRORS_ONLY = ["-v", "error"]
_SELECT_STREAMS = ["-select_streams"]
_SHOW_ENTRIES = ["-show_entries"]
_SHOW_STREAMS = ["-show_streams"]
_FIRST_VIDEO = "v:0"
_AUDIO = "a"
_DIMENSION_ENTRIES = "stream=width,height"
_DIMENSION_OUTPUT = ["-of", "csv=s=x:p=0"]
_COMPACT_OUTPUT = ["-of", "compact=p=0:nk=1"]
DIMENSION_SEPARATOR = "x"

logger = logging.getLogger(__name__)


def dimensions_cmd(path: str) -> list[str]:
    """Return ffprobe args printing the first video stream size as ``WxH``."""
    return [
        *_ERRORS_ONLY,
        *_SELECT_STREAMS,
        _FIRST_VIDEO,
        *_SHOW_ENTRIES,
        _DIMENSION_ENTRIES,
        *_DIMENSION_OUTPUT,
        path,
    ]


def audio_streams_cmd(path: str) -> list[str]:
    """Return ffprobe args listing the audio streams of ``path``."""
    return [
        *_ERRORS_ONLY,
        *_SHOW_STREAMS,
        *_SELECT_STREAMS,
        _AUDIO,
        *_COMPACT_OUTPUT,
        path,
    ]


def _to_int(token: str) -> int | float:
    try:
        return int(token)
    except ValueError:
        return math.nan


def parse_dimensions(out: str, *, strict: bool = False) -> Dimensions:
    """Parse ffprobe ``WxH`` output.

    Only the first line is considered. In permissive mode a side that is not
    an integer becomes ``math.nan`` so an empty output yields a NaN pair.

    Raises:
        ParseAmbiguity: If ``strict`` is set and the output is not ``WxH``.

    """
    lines = out.strip().splitlines()
    line = lines[0].strip() if lines else ""
    parts = line.split(DIMENSION_SEPARATOR)
    width = _to_int(parts[0])
    height = _to_int(parts[1]) if len(parts) > 1 else math.nan
    dims = Dimensions(width=width, height=height)
    if not dims.is_valid:
        if strict:
            raise ParseAmbiguity(out, "WxH")
        logger.warning("Could not read frame size from ffprobe output %r", out)
    return dims


def _log_cmd(ctx: RuntimeContext, cmd: list[str]) -> None:
    """Log an ffprobe command banner with consistent labeling and routing."""
    if ctx.verbosity < Verbosity.COMMANDS:
        return
    action = format_action_label(dry_run=False)
    emit_status(f"{action}: {join_command('ffprobe', cmd)}", status_callback=ctx.status_callback)


async def get_dimensions(path: str, *, strict: bool = False, ctx: RuntimeContext | None = None) -> Dimensions:
    """Return width and height of the first video stream in ``path``.

    Probes run even in dry-run mode since they only read the file.

    Raises:
        ProcessFailure: If ffprobe exits with a non-zero status.
        ParseAmbiguity: If ``strict`` is set and the output is malformed.

    """
    ctx = ctx or RuntimeContext()
    cmd = dimensions_cmd(str(path))
    _log_cmd(ctx, cmd)
    out = await run_ffprobe(
        cmd,
        verbose=ctx.verbosity >= Verbosity.OUTPUT,
        status_callback=ctx.status_callback,
    )
    return parse_dimensions(out, strict=strict)


async def has_audio_stream(
    path: str,
    *,
    require_output: bool = False,
    ctx: RuntimeContext | None = None,
) -> bool:
    """Return whether ``path`` appears to contain an audio stream.

    A zero exit status counts as presence. ffprobe also exits with zero for
    files without audio, so pass ``require_output=True`` to additionally
    require at least one listed stream.

    Raises:
        OSError: If ffprobe cannot be started.

    """
    ctx = ctx or RuntimeContext()
    cmd = audio_streams_cmd(str(path))
    _log_cmd(ctx, cmd)
    try:
        out = await run_ffprobe(
            cmd,
            verbose=ctx.verbosity >= Verbosity.OUTPUT,
            status_callback=ctx.status_callback,
        )
    except subprocess.CalledProcessError as exc:
        logger.debug("ffprobe exited with %s for %s", exc.returncode, path)
        return False
    if require_output:
        return bool(out.strip())
    return True


__all__ = [
    "DIMENSION_SEPARATOR",
    "audio_streams_cmd",
    "dimensions_cmd",
    "get_dimensions",
    "has_audio_stream",
    "parse_dimensions",
]
