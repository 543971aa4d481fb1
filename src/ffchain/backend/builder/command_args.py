"""Common FFmpeg command arguments."""

INPUT_FLAG: tuple[str, ...] = ("-i",)  #: Introduce an input file path.
OVERWRITE_OUTPUT: tuple[str, ...] = ("-y",)  #: Overwrite existing files.
NO_OVERWRITE: tuple[str, ...] = ("-n",)  #: Never overwrite existing files.
LOG_LEVEL: tuple[str, ...] = ("-loglevel",)  #: Logging verbosity of ffmpeg itself.
FILTER_COMPLEX: tuple[str, ...] = ("-filter_complex",)  #: Filtergraph with multiple inputs or outputs.
DURATION: tuple[str, ...] = ("-t",)  #: Limit the duration read or written.
SEEK: tuple[str, ...] = ("-ss",)  #: Seek to a position.
FORMAT: tuple[str, ...] = ("-f",)  #: Force the container format.
METADATA: tuple[str, ...] = ("-metadata",)  #: Set a ``key=value`` metadata tag.
FPS: tuple[str, ...] = ("-r",)  #: Frame rate.
FPS_MAX: tuple[str, ...] = ("-fpsmax",)  #: Maximum frame rate.
SIZE: tuple[str, ...] = ("-s",)  #: Frame size.
ASPECT: tuple[str, ...] = ("-aspect",)  #: Display aspect ratio.
APPLY_CROPPING: tuple[str, ...] = ("-apply_cropping",)  #: Which cropping metadata to honor.
TUNE: tuple[str, ...] = ("-tune",)  #: Encoder tuning.
PRESET: tuple[str, ...] = ("-preset",)  #: Encoder preset.
PASS: tuple[str, ...] = ("-pass",)  #: Two-pass pass number.
PASSLOGFILE: tuple[str, ...] = ("-passlogfile",)  #: Two-pass log file prefix.
SAMPLE_RATE: tuple[str, ...] = ("-ar",)  #: Audio sample rate.
CHANNELS: tuple[str, ...] = ("-ac",)  #: Audio channel count.
