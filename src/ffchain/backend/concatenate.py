"""Concatenate clips of different sizes into one video."""

from __future__ import annotations

import asyncio
import logging
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from ffchain.errors import FFchainError, PreconditionViolation
from ffchain.models import ConcatOptions, ConcatStage, Dimensions, LogLevel, RuntimeContext, Verbosity
from ffchain.tools import probe
from ffchain.tools.helpers import emit_status

from .builder import FFmpeg, build_concat_filtergraph, target_dimensions
from .builder.filtergraph import CONCAT_OUTPUT
from .builder.stream_args import label

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

CONCAT_FAILED = "Concatenation failed"
CONCAT_VIDEO_CODEC = "libx264"  #: Encoder used for the joined video.
CONCAT_FPS = 30  #: Frame rate of the joined video.

logger = logging.getLogger(__name__)


@dataclass
class ConcatResult:
    """Outcome of :func:`concat_videos`.

    ``stage`` tells whether probing or transcoding failed and ``exception``
    keeps the original error for callers that need its details.
    """

    success: bool
    error: str = ""
    output: str | None = None
    stage: ConcatStage | None = None
    exception: Exception | None = None
    command: tuple[str, ...] = ()
    target: Dimensions | None = None


def _failure(stage: ConcatStage, exc: Exception, command: tuple[str, ...] = ()) -> ConcatResult:
    logger.error("%s during %s: %s", CONCAT_FAILED, stage.value, exc)
    return ConcatResult(
        success=False,
        error=f"{CONCAT_FAILED}: {exc}",
        stage=stage,
        exception=exc,
        command=command,
    )


def build_concat_command(
    inputs: Sequence[str | Path],
    output: str | Path,
    target: Dimensions,
    ctx: RuntimeContext | None = None,
) -> FFmpeg:
    """Return a fresh builder joining ``inputs`` letterboxed to ``target``."""
    ffmpeg = FFmpeg(ctx).log_level(LogLevel.INFO)
    for file in inputs:
        ffmpeg.input(file)
    return (
        ffmpeg.complex_filter(build_concat_filtergraph(len(inputs), target))
        .video_codec(CONCAT_VIDEO_CODEC)
        .video_fps(CONCAT_FPS)
        .add_map(label(CONCAT_OUTPUT))
        .output(output)
        .overwrite()
    )


async def concat_videos(
    inputs: Sequence[str | Path],
    output: str | Path,
    *,
    ctx: RuntimeContext | None = None,
) -> ConcatResult:
    """Concatenate ``inputs`` into ``output``, normalizing their frame size.

    Every input is probed concurrently, scaled to fit the largest width and
    height among them, padded to that size and joined in order. Audio is
    dropped. Errors are returned in the result rather than raised.
    """
    ctx = ctx or RuntimeContext()
    if not inputs:
        return _failure(ConcatStage.PROBE, PreconditionViolation("No input files given."))
    # Every probe runs to completion before the first failure is reported.
    results = await asyncio.gather(
        *(probe.get_dimensions(str(f), strict=True, ctx=ctx) for f in inputs),
        return_exceptions=True,
    )
    dims: list[Dimensions] = []
    for res in results:
        if isinstance(res, (FFchainError, subprocess.CalledProcessError, OSError)):
            return _failure(ConcatStage.PROBE, res)
        if isinstance(res, BaseException):
            raise res
        dims.append(res)
    target = target_dimensions(dims)
    if ctx.verbosity >= Verbosity.COMMANDS:
        emit_status(f"Target frame size: {target}", status_callback=ctx.status_callback)
    ffmpeg = build_concat_command(inputs, output, target, ctx)
    try:
        args = await ffmpeg.run()
    except (FFchainError, subprocess.CalledProcessError, OSError) as e:
        return _failure(ConcatStage.TRANSCODE, e, ffmpeg.args)
    logger.info("Concatenation complete: %s", ffmpeg.output_file)
    return ConcatResult(
        success=True,
        output=ffmpeg.output_file,
        stage=ConcatStage.TRANSCODE,
        command=args,
        target=target,
    )


def concat(
    opts: ConcatOptions,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(show=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Concatenate clips into one video, letterboxing them to a common size."""
    status_func = print if status_callback is None else status_callback
    ctx = opts.runtime.context(status_callback=status_func)
    result = asyncio.run(concat_videos(opts.inputs, opts.output, ctx=ctx))
    if not result.success:
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(result.error)
        return 1
    if not ctx.dry_run and result.output:
        emit_status(str(Path(result.output).absolute()), status_callback=status_func)
    return 0


__all__ = [
    "CONCAT_FPS",
    "CONCAT_VIDEO_CODEC",
    "ConcatResult",
    "build_concat_command",
    "concat",
    "concat_videos",
]
