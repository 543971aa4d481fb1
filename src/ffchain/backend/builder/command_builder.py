"""Fluent builder accumulating FFmpeg command arguments."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Self

from ffchain.errors import PreconditionViolation
from ffchain.models.context import RuntimeContext
from ffchain.models.types import CropMode, LogLevel
from ffchain.models.verbosity import Verbosity
from ffchain.tools import cli
from ffchain.tools.helpers import format_action_label, maybe_log_command

from . import command_args as flags
from .stream_args import MAP_FLAG, bitrate_flag, codec_flag

if TYPE_CHECKING:
    from ffchain.models.options import AudioOptions, GlobalOptions, SubtitleOptions, VideoOptions

logger = logging.getLogger(__name__)

MISSING_INPUT = "Input file not specified. Use .input(file) method."
MISSING_OUTPUT = "Output file not specified. Use .output(file) method."


class FFmpeg:
    """Accumulate an FFmpeg argument list one flag at a time.

    Every setter appends its tokens in call order and returns the builder, so
    calls can be chained::

        await FFmpeg().input("a.mp4").video_codec("libx264").output("b.mp4").overwrite().run()

    Values are passed through as given; checking that a codec or preset
    exists is left to ffmpeg.
    """

    def __init__(self, ctx: RuntimeContext | None = None) -> None:
        self.ctx = ctx or RuntimeContext()
        self._args: list[str] = []
        self.input_file: str | None = None
        self.output_file: str | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._args!r})"

    @property
    def args(self) -> tuple[str, ...]:
        """Accumulated arguments, without the executable."""
        return tuple(self._args)

    @property
    def command(self) -> str:
        """The full command formatted for display."""
        return cli.format_ffmpeg_cmd(self._args)

    def _push(self, *tokens: str) -> Self:
        self._args.extend(tokens)
        return self

    # Files

    def input(self, file: str | Path) -> Self:
        """Add an input file."""
        self.input_file = str(file)
        return self._push(*flags.INPUT_FLAG, str(file))

    def output(self, file: str | Path) -> Self:
        """Add the output file."""
        self.output_file = str(file)
        return self._push(str(file))

    # Video

    def video_codec(self, codec: str) -> Self:
        return self._push(*codec_flag("v"), codec)

    def video_bitrate(self, bitrate: str) -> Self:
        return self._push(*bitrate_flag("v"), bitrate)

    def video_fps(self, fps: float) -> Self:
        return self._push(*flags.FPS, _number(fps))

    def video_fps_max(self, fps_max: float) -> Self:
        return self._push(*flags.FPS_MAX, _number(fps_max))

    def video_size(self, size: str) -> Self:
        return self._push(*flags.SIZE, size)

    def video_aspect(self, aspect: str) -> Self:
        return self._push(*flags.ASPECT, aspect)

    def video_crop(self, crop: CropMode | str | None) -> Self:
        """Select which cropping metadata to apply; ``None`` adds nothing."""
        if not crop:
            return self
        return self._push(*flags.APPLY_CROPPING, CropMode(crop).value)

    def video_tune(self, tune: str) -> Self:
        return self._push(*flags.TUNE, tune)

    def video_preset(self, preset: str) -> Self:
        return self._push(*flags.PRESET, preset)

    def video_pass(self, pass_num: int) -> Self:
        return self._push(*flags.PASS, str(pass_num))

    def video_passlogfile(self, passlogfile: str) -> Self:
        return self._push(*flags.PASSLOGFILE, passlogfile)

    # Audio

    def audio_codec(self, codec: str) -> Self:
        return self._push(*codec_flag("a"), codec)

    def audio_bitrate(self, bitrate: str) -> Self:
        return self._push(*bitrate_flag("a"), bitrate)

    def audio_sample_rate(self, sample_rate: int) -> Self:
        return self._push(*flags.SAMPLE_RATE, str(sample_rate))

    def audio_channels(self, channels: int) -> Self:
        return self._push(*flags.CHANNELS, str(channels))

    # Subtitles

    def subtitle_codec(self, codec: str) -> Self:
        return self._push(*codec_flag("s"), codec)

    # Global and muxing

    def complex_filter(self, filtergraph: str) -> Self:
        return self._push(*flags.FILTER_COMPLEX, filtergraph)

    def overwrite(self, overwrite: bool = True) -> Self:  # noqa: FBT001, FBT002
        """Add ``-y``, or ``-n`` when ``overwrite`` is false."""
        return self._push(*(flags.OVERWRITE_OUTPUT if overwrite else flags.NO_OVERWRITE))

    def log_level(self, level: LogLevel | str | None) -> Self:
        """Set ffmpeg's own log level; ``None`` adds nothing."""
        if not level:
            return self
        return self._push(*flags.LOG_LEVEL, LogLevel(level).value)

    def duration(self, duration: str) -> Self:
        return self._push(*flags.DURATION, duration)

    def seek(self, seek: str) -> Self:
        return self._push(*flags.SEEK, seek)

    def format(self, fmt: str) -> Self:
        return self._push(*flags.FORMAT, fmt)

    def add_metadata(self, metadata: Mapping[str, str]) -> Self:
        """Add one ``-metadata key=value`` pair per item."""
        for key, value in metadata.items():
            self._push(*flags.METADATA, f"{key}={value}")
        return self

    def add_map(self, stream: str) -> Self:
        return self._push(MAP_FLAG, stream)

    def add_argument(self, args: Iterable[str]) -> Self:
        """Append raw tokens for flags without a dedicated method."""
        return self._push(*args)

    # Option groups

    def apply_video(self, opts: VideoOptions) -> Self:
        """Apply every set field of ``opts``."""
        setters = {
            "codec": self.video_codec,
            "bitrate": self.video_bitrate,
            "fps": self.video_fps,
            "fps_max": self.video_fps_max,
            "size": self.video_size,
            "aspect": self.video_aspect,
            "crop": self.video_crop,
            "tune": self.video_tune,
            "preset": self.video_preset,
            "pass_num": self.video_pass,
            "passlogfile": self.video_passlogfile,
        }
        return self._apply(opts, setters)

    def apply_audio(self, opts: AudioOptions) -> Self:
        """Apply every set field of ``opts``."""
        setters = {
            "codec": self.audio_codec,
            "bitrate": self.audio_bitrate,
            "sample_rate": self.audio_sample_rate,
            "channels": self.audio_channels,
        }
        return self._apply(opts, setters)

    def apply_subtitles(self, opts: SubtitleOptions) -> Self:
        """Apply every set field of ``opts``."""
        return self._apply(opts, {"codec": self.subtitle_codec})

    def apply_globals(self, opts: GlobalOptions) -> Self:
        """Apply every set field of ``opts``; each map becomes its own ``-map``."""
        setters = {
            "overwrite": self.overwrite,
            "log_level": self.log_level,
            "duration": self.duration,
            "seek": self.seek,
            "format": self.format,
            "metadata": self.add_metadata,
        }
        self._apply(opts, setters)
        for stream in opts.maps:
            self.add_map(stream)
        return self

    def _apply(self, opts: object, setters: Mapping[str, object]) -> Self:
        for name in type(opts).model_fields:
            setter = setters.get(name)
            value = getattr(opts, name)
            if setter is None or value is None:
                continue
            setter(value)
        return self

    # Execution

    def check(self) -> None:
        """Raise if the command lacks an input or an output.

        Raises:
            PreconditionViolation: If ``input`` or ``output`` was never called.

        """
        if self.input_file is None:
            raise PreconditionViolation(MISSING_INPUT)
        if self.output_file is None:
            raise PreconditionViolation(MISSING_OUTPUT)

    async def run(self) -> tuple[str, ...]:
        """Run ffmpeg with exactly the accumulated arguments.

        In dry-run mode the command is only reported.

        Returns:
            The arguments that were run.

        Raises:
            PreconditionViolation: If no input or output was registered.
            ProcessFailure: If ffmpeg exits with a non-zero status.

        """
        self.check()
        args = self.args
        ctx = self.ctx
        if ctx.dry_run:
            maybe_log_command(
                verbosity=ctx.verbosity,
                dry_run=True,
                status_callback=ctx.status_callback,
                banner=f"{format_action_label(dry_run=True)}: {cli.format_ffmpeg_cmd(args)}",
            )
            return args
        logger.debug("Running ffmpeg with %d arguments", len(args))
        await cli.run_ffmpeg(
            args,
            verbose=ctx.verbosity >= Verbosity.OUTPUT,
            status_callback=ctx.status_callback,
            list_cmd=ctx.verbosity >= Verbosity.COMMANDS,
        )
        return args


def _number(value: float) -> str:
    """Format ``value`` without a trailing ``.0`` for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["FFmpeg", "MISSING_INPUT", "MISSING_OUTPUT"]
