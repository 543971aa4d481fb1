"""Helpers for executing FFmpeg and ffprobe commands."""

from __future__ import annotations

import asyncio
import codecs
import logging
import os
import re
import shlex
import subprocess
from collections.abc import Callable, Sequence
from functools import partial
from pathlib import Path

from ffchain.errors import ProcessFailure

from .helpers import emit_status

_FFMPEG = os.getenv("FFCHAIN_FFMPEG", "ffmpeg")
_FFPROBE = os.getenv("FFCHAIN_FFPROBE", "ffprobe")

_FILTER_FLAGS = frozenset({"-vf", "-af", "-filter_complex"})

_CHUNK_SIZE = 4096
_LINE_END = re.compile(r"\r\n|\n|\r")

logger = logging.getLogger(__name__)


async def spawn(cmd: Sequence[str]) -> asyncio.subprocess.Process:
    """Start ``cmd`` without a shell, piping stdout and stderr."""
    return await asyncio.create_subprocess_exec(
        *cmd,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )


def _drain(buf: str, log: Callable[[str], None]) -> str:
    """Log every complete line in ``buf`` and return the unterminated rest.

    Lines ending in a bare carriage return are progress updates and keep the
    ``\\r`` so terminal output can overwrite them in place.
    """
    pos = 0
    for m in _LINE_END.finditer(buf):
        if m.group() == "\r" and m.end() == len(buf):
            # Could be the first half of a CRLF split across reads.
            break
        line = buf[pos : m.start()]
        log(line + "\r" if m.group() == "\r" else line)
        pos = m.end()
    return buf[pos:]


async def _pump(stream: asyncio.StreamReader | None, log: Callable[[str], None]) -> str:
    """Forward ``stream`` to ``log`` line by line and return everything read."""
    if stream is None:  # pragma: no cover - defensive
        return ""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    chunks: list[str] = []
    buf = ""
    while data := await stream.read(_CHUNK_SIZE):
        text = decoder.decode(data)
        chunks.append(text)
        buf = _drain(buf + text, log)
    tail = decoder.decode(b"", final=True)
    chunks.append(tail)
    buf = _drain(buf + tail, log)
    if buf.rstrip("\r"):
        log(buf.rstrip("\r"))
    return "".join(chunks)


async def run(
    exe: str | Path,
    args: Sequence[str | Path],
    *,
    verbose: bool = False,
    status_callback: Callable[[str], None] | None = None,
    list_cmd: bool = False,
) -> str:
    """Run an executable and return its standard output.

    Both output streams are read as the process runs. When ``verbose`` is
    ``True`` each line goes to ``status_callback`` (or the logger); otherwise
    lines are only logged at debug level.

    Raises:
        ProcessFailure: If the process exits with a non-zero status.
        OSError: If the executable cannot be started.

    """
    cmd = [str(exe), *[str(a) for a in args]]

    def log(message: str) -> None:
        if verbose:
            emit_status(message, status_callback=status_callback)
        else:
            logger.debug("%s: %s", Path(cmd[0]).name, message)

    # Only emit a one-line banner when explicitly requested via list_cmd.
    if list_cmd:
        emit_status(f"Running: {join_command(exe, args)}", status_callback=status_callback)

    proc = await spawn(cmd)
    stdout, stderr = await asyncio.gather(_pump(proc.stdout, log), _pump(proc.stderr, log))
    returncode = await proc.wait()
    if returncode:
        raise ProcessFailure(returncode, cmd, stdout, stderr)
    return stdout


run_ffmpeg = partial(run, _FFMPEG)
run_ffprobe = partial(run, _FFPROBE)


async def _get_version(run_func: Callable[..., object], name: str) -> str:
    """Return version string for an FF tool, raising if not available."""
    try:
        out = await run_func(["-version"])
    except FileNotFoundError as e:  # pragma: no cover - system-dependent
        raise FileNotFoundError(f"{name} not found") from e
    except subprocess.CalledProcessError as e:  # pragma: no cover - unlikely
        raise RuntimeError(f"{name} failed: {e}") from e
    return str(out).splitlines()[0].strip()


async def get_ffmpeg_version() -> str:
    """Return the ``ffmpeg`` version string."""
    return await _get_version(run_ffmpeg, "ffmpeg")


async def get_ffprobe_version() -> str:
    """Return the ``ffprobe`` version string."""
    return await _get_version(run_ffprobe, "ffprobe")


def quote_arg(arg: str, *, force: bool = False) -> str:
    """Quote argument if needed."""
    if os.name == "nt":
        quoted = subprocess.list2cmdline([arg])
        if force and quoted == arg:
            return f'"{arg}"'
        return quoted
    quoted = shlex.quote(arg)
    if force and quoted == arg:
        return f"'{arg}'"
    return quoted


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Format a command for display."""
    parts = [str(exe), *[str(a) for a in args]]
    return " ".join(
        quote_arg(part, force=i > 0 and parts[i - 1] in _FILTER_FLAGS) for i, part in enumerate(parts)
    )


def format_ffmpeg_cmd(args: Sequence[str | Path]) -> str:
    """Format an ``ffmpeg`` command for display."""
    return join_command(_FFMPEG, args)


__all__ = [
    "format_ffmpeg_cmd",
    "get_ffmpeg_version",
    "get_ffprobe_version",
    "join_command",
    "quote_arg",
    "run",
    "run_ffmpeg",
    "run_ffprobe",
    "spawn",
]
