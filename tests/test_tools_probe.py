"""Tests for ffprobe helpers."""

from __future__ import annotations

import math

import pytest

from ffchain.errors import ParseAmbiguity, ProcessFailure
from ffchain.models import Dimensions, RuntimeContext, Verbosity
from ffchain.tools import cli, probe

from .conftest import FakeProcess, FakeSpawn


@pytest.mark.asyncio
async def test_get_dimensions_parses_output(fake_spawn: FakeSpawn) -> None:
    """Read ``WxH`` from ffprobe using the fixed query."""
    fake_spawn.handler = lambda _cmd: FakeProcess(stdout=b"1920x1080\n")
    dims = await probe.get_dimensions("clip.mp4")
    assert dims == Dimensions(1920, 1080)
    assert fake_spawn.calls == [
        [
            cli._FFPROBE,
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=width,height",
            "-of", "csv=s=x:p=0",
            "clip.mp4",
        ]
    ]  # fmt: skip


@pytest.mark.asyncio
async def test_get_dimensions_empty_output_is_nan(fake_spawn: FakeSpawn) -> None:
    """Empty output gives a NaN pair instead of an exception."""
    fake_spawn.handler = lambda _cmd: FakeProcess(stdout=b"")
    dims = await probe.get_dimensions("clip.mp4")
    assert math.isnan(dims.width)
    assert math.isnan(dims.height)
    assert not dims.is_valid


@pytest.mark.asyncio
async def test_get_dimensions_strict_rejects_garbage(fake_spawn: FakeSpawn) -> None:
    """Strict parsing raises on unexpected output."""
    fake_spawn.handler = lambda _cmd: FakeProcess(stdout=b"N/A\n")
    with pytest.raises(ParseAmbiguity):
        await probe.get_dimensions("clip.mp4", strict=True)


@pytest.mark.asyncio
async def test_get_dimensions_failure(fake_spawn: FakeSpawn) -> None:
    """A failing ffprobe raises with its exit code."""
    fake_spawn.handler = lambda _cmd: FakeProcess(stderr=b"clip.mp4: No such file\n", returncode=1)
    with pytest.raises(ProcessFailure) as info:
        await probe.get_dimensions("clip.mp4")
    assert info.value.returncode == 1


@pytest.mark.asyncio
async def test_get_dimensions_logs_command(fake_spawn: FakeSpawn) -> None:
    """Show the ffprobe command at command verbosity."""
    fake_spawn.handler = lambda _cmd: FakeProcess(stdout=b"640x480\n")
    messages: list[str] = []
    ctx = RuntimeContext(verbosity=Verbosity.COMMANDS, status_callback=messages.append)
    await probe.get_dimensions("clip.mp4", ctx=ctx)
    assert messages == ["Running: ffprobe -v error -select_streams v:0 -show_entries stream=width,height "
                        "-of csv=s=x:p=0 clip.mp4"]


@pytest.mark.parametrize(
    ("out", "expected"),
    [
        ("1920x1080", (1920, 1080)),
        ("  720x576\n", (720, 576)),
        ("1280x720x\n", (1280, 720)),
        ("640x360\n640x360\n", (640, 360)),
    ],
)
def test_parse_dimensions(out: str, expected: tuple[int, int]) -> None:
    """Accept the shapes ffprobe prints for a single video stream."""
    assert probe.parse_dimensions(out) == Dimensions(*expected)


def test_parse_dimensions_partial() -> None:
    """A missing height becomes NaN in permissive mode."""
    dims = probe.parse_dimensions("1920")
    assert dims.width == 1920
    assert math.isnan(dims.height)


@pytest.mark.asyncio
async def test_has_audio_stream_true_on_success(fake_spawn: FakeSpawn) -> None:
    """Exit status zero counts as having audio."""
    fake_spawn.handler = lambda _cmd: FakeProcess(stdout=b"")
    assert await probe.has_audio_stream("clip.mp4") is True
    assert fake_spawn.calls == [
        [
            cli._FFPROBE,
            "-v", "error",
            "-show_streams",
            "-select_streams", "a",
            "-of", "compact=p=0:nk=1",
            "clip.mp4",
        ]
    ]  # fmt: skip


@pytest.mark.asyncio
async def test_has_audio_stream_false_on_failure(fake_spawn: FakeSpawn) -> None:
    """A non-zero exit counts as no audio."""
    fake_spawn.handler = lambda _cmd: FakeProcess(returncode=1)
    assert await probe.has_audio_stream("clip.mp4") is False


@pytest.mark.asyncio
async def test_has_audio_stream_require_output(fake_spawn: FakeSpawn) -> None:
    """With ``require_output`` an empty listing means no audio."""
    fake_spawn.handler = lambda _cmd: FakeProcess(stdout=b"")
    assert await probe.has_audio_stream("clip.mp4", require_output=True) is False
    fake_spawn.handler = lambda _cmd: FakeProcess(stdout=b"1|aac|AAC (Advanced Audio Coding)|audio\n")
    assert await probe.has_audio_stream("clip.mp4", require_output=True) is True


@pytest.mark.asyncio
async def test_has_audio_stream_spawn_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing ffprobe binary propagates."""

    async def missing(_cmd: list[str]) -> FakeProcess:
        raise FileNotFoundError("ffprobe")

    monkeypatch.setattr(cli, "spawn", missing)
    with pytest.raises(FileNotFoundError):
        await probe.has_audio_stream("clip.mp4")
