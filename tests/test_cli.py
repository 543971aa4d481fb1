"""Tests for CLI entry point."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from ffchain.cli import main
from ffchain.tools import cli

from .conftest import FakeProcess, FakeSpawn


def test_cli_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Display help message without error."""
    code = main(["--help"])
    out = capsys.readouterr().out
    assert code in (0, None)
    assert "concat" in out
    assert "info" in out


def test_cli_concat(media_tools: Callable[..., FakeSpawn], capsys: pytest.CaptureFixture[str]) -> None:
    """Concatenate two clips and print the output path."""
    spawner = media_tools({"a.mp4": "100x200", "b.mp4": "300x150"})
    code = main(["concat", "--inputs", "a.mp4", "--inputs", "b.mp4", "--output", "out.mp4"])
    assert code == 0
    (cmd,) = spawner.tool_calls(cli._FFMPEG)
    assert cmd[-2:] == ["out.mp4", "-y"]
    assert capsys.readouterr().out.strip().endswith("out.mp4")


def test_cli_concat_dry_run(media_tools: Callable[..., FakeSpawn], capsys: pytest.CaptureFixture[str]) -> None:
    """Print the command without running ffmpeg."""
    spawner = media_tools({"a.mp4": "100x200", "b.mp4": "300x150"})
    code = main(
        ["concat", "--inputs", "a.mp4", "--inputs", "b.mp4", "--output", "out.mp4", "--runtime.dry-run"]
    )
    assert code == 0
    assert spawner.tool_calls(cli._FFMPEG) == []
    assert "-filter_complex" in capsys.readouterr().out


def test_cli_concat_failure(media_tools: Callable[..., FakeSpawn], capsys: pytest.CaptureFixture[str]) -> None:
    """Exit with status 1 and report the error on stderr."""
    media_tools({"a.mp4": "100x200", "b.mp4": "300x150"}, ffmpeg_exit=1)
    code = main(["concat", "--inputs", "a.mp4", "--inputs", "b.mp4", "--output", "out.mp4"])
    assert code == 1
    assert "Concatenation failed" in capsys.readouterr().err


def test_cli_info(fake_spawn: FakeSpawn, capsys: pytest.CaptureFixture[str]) -> None:
    """Print the frame size and audio presence of a file."""
    def handler(cmd: list[str]) -> FakeProcess:
        if "-show_streams" in cmd:
            return FakeProcess(stdout=b"1|aac|audio\n")
        return FakeProcess(stdout=b"1920x1080\n")

    fake_spawn.handler = handler
    code = main(["info", "clip.mp4"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "clip.mp4: 1920x1080, audio: yes"
