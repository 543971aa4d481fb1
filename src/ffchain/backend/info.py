"""Report what ffprobe sees in a media file."""

from __future__ import annotations

import asyncio
import sys
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import Parameter

from ffchain.errors import FFchainError
from ffchain.models import Dimensions, RuntimeContext, RuntimeOptions
from ffchain.tools import probe
from ffchain.tools.helpers import emit_status

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable


async def describe(path: str, ctx: RuntimeContext) -> tuple[Dimensions, bool]:
    """Return the frame size and audio presence of ``path``."""
    dims, has_audio = await asyncio.gather(
        probe.get_dimensions(path, ctx=ctx),
        probe.has_audio_stream(path, require_output=True, ctx=ctx),
    )
    return dims, has_audio


def info(
    path: Path,
    /,
    runtime: RuntimeOptions | None = None,
    status_callback: Annotated[Callable[[str], None] | None, Parameter(show=False)] = None,  # type: ignore[call-arg]
) -> int:
    """Print the frame size of a file and whether it has audio."""
    status_func = print if status_callback is None else status_callback
    ctx = (runtime or RuntimeOptions()).context(status_callback=status_func)
    try:
        dims, has_audio = asyncio.run(describe(str(path), ctx))
    except (FFchainError, OSError) as e:
        err_func = partial(print, file=sys.stderr, flush=True) if status_callback is None else status_callback
        err_func(f"Probe failed: {e}")
        return 1
    emit_status(f"{path}: {dims}, audio: {'yes' if has_audio else 'no'}", status_callback=status_func)
    return 0


__all__ = ["describe", "info"]
