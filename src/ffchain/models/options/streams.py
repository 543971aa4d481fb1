"""Option groups that map onto builder setters.

Each model mirrors one family of FFmpeg flags. Fields left as ``None`` are
skipped when a group is applied to a command, and the remaining fields are
applied in declaration order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ffchain.models.types import CropMode, LogLevel


class VideoOptions(BaseModel):
    """Options for the video stream."""

    codec: str | None = Field(None, description="Video encoder passed to ``-c:v``.")
    bitrate: str | None = Field(None, description="Target video bitrate such as ``2M``.")
    fps: float | None = Field(None, gt=0, description="Output frame rate.")
    fps_max: float | None = Field(None, gt=0, description="Maximum frame rate.")
    size: str | None = Field(None, description="Frame size such as ``1280x720``.")
    aspect: str | None = Field(None, description="Display aspect ratio such as ``16:9``.")
    crop: CropMode | None = Field(None, description="Which cropping metadata to apply.")
    tune: str | None = Field(None, description="Encoder tuning.")
    preset: str | None = Field(None, description="Encoder preset.")
    pass_num: int | None = Field(None, alias="pass", ge=1, le=3, description="Two-pass encoding pass number.")
    passlogfile: str | None = Field(None, description="Prefix for the two-pass log file.")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class AudioOptions(BaseModel):
    """Options for the audio stream."""

    codec: str | None = Field(None, description="Audio encoder passed to ``-c:a``.")
    bitrate: str | None = Field(None, description="Target audio bitrate such as ``128k``.")
    sample_rate: int | None = Field(None, gt=0, description="Sample rate in Hz.")
    channels: int | None = Field(None, gt=0, description="Number of output channels.")

    model_config = ConfigDict(extra="forbid")


class SubtitleOptions(BaseModel):
    """Options for subtitle streams."""

    codec: str | None = Field(None, description="Subtitle encoder passed to ``-c:s``.")

    model_config = ConfigDict(extra="forbid")


class GlobalOptions(BaseModel):
    """Options that are not tied to a single stream."""

    overwrite: bool | None = Field(None, description="``True`` for ``-y``, ``False`` for ``-n``.")
    log_level: LogLevel | None = Field(None, description="FFmpeg log level.")
    duration: str | None = Field(None, description="Limit the output duration.")
    seek: str | None = Field(None, description="Seek position.")
    format: str | None = Field(None, description="Force the container format.")
    metadata: dict[str, str] = Field(default_factory=dict, description="Metadata key/value pairs.")
    maps: list[str] = Field(default_factory=list, description="Stream specifiers passed to ``-map``.")

    model_config = ConfigDict(extra="forbid")


__all__ = ["AudioOptions", "GlobalOptions", "SubtitleOptions", "VideoOptions"]
