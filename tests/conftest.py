"""Shared pytest fixtures.

External tools are never started: ``ffchain.tools.cli.spawn`` is replaced by
a recorder that hands back scripted fake processes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from ffchain.tools import cli


class FakeStream:
    """Minimal stand-in for ``asyncio.StreamReader``."""

    def __init__(self, data: bytes = b"", chunk_size: int | None = None) -> None:
        self._data = data
        self._chunk_size = chunk_size

    async def read(self, n: int = -1) -> bytes:
        size = n if self._chunk_size is None else min(n, self._chunk_size)
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk


class FakeProcess:
    """Process whose output and exit status are fixed up front."""

    def __init__(
        self,
        stdout: bytes = b"",
        stderr: bytes = b"",
        returncode: int = 0,
        chunk_size: int | None = None,
    ) -> None:
        self.stdout = FakeStream(stdout, chunk_size)
        self.stderr = FakeStream(stderr, chunk_size)
        self.returncode: int | None = None
        self._exit = returncode

    async def wait(self) -> int:
        self.returncode = self._exit
        return self._exit


@dataclass
class FakeSpawn:
    """Record spawned commands and answer them with ``handler``."""

    handler: Callable[[list[str]], FakeProcess] = field(default=lambda _cmd: FakeProcess())
    calls: list[list[str]] = field(default_factory=list)

    async def __call__(self, cmd: list[str]) -> FakeProcess:
        self.calls.append(list(cmd))
        return self.handler(list(cmd))

    def tool_calls(self, exe: str) -> list[list[str]]:
        """Return the recorded commands started with ``exe``."""
        return [c for c in self.calls if c[0] == exe]


@pytest.fixture
def fake_spawn(monkeypatch: pytest.MonkeyPatch) -> FakeSpawn:
    """Replace process creation with a recorder."""
    spawner = FakeSpawn()
    monkeypatch.setattr(cli, "spawn", spawner)
    return spawner


@pytest.fixture
def media_tools(fake_spawn: FakeSpawn) -> Callable[..., FakeSpawn]:
    """Script ffprobe sizes per file and the ffmpeg exit status.

    ``sizes`` maps a file name to the text ffprobe prints for it; files
    missing from the mapping make ffprobe exit with status 1.
    """

    def configure(sizes: dict[str, str], *, ffmpeg_exit: int = 0) -> FakeSpawn:
        def handler(cmd: list[str]) -> FakeProcess:
            if cmd[0] == cli._FFPROBE:
                name = Path(cmd[-1]).name
                if name not in sizes:
                    return FakeProcess(stderr=b"No such file or directory\n", returncode=1)
                return FakeProcess(stdout=f"{sizes[name]}\n".encode())
            return FakeProcess(stderr=b"frame=  10 fps=0.0\rframe=  20 fps=0.0\n", returncode=ffmpeg_exit)

        fake_spawn.handler = handler
        return fake_spawn

    return configure
