"""Stream argument helpers."""

MAP_FLAG = "-map"  #: Flag to map a stream.


def spec(kind: str, index: int | None = 0, *, input_index: int = 0, optional: bool = False) -> str:
    """Return a formatted stream spec.

    Args:
        kind: Stream type identifier (e.g. "v", "a", "s").
        index: Stream index within the type or ``None`` to omit the index.
        input_index: Input file index.
        optional: Whether the stream should be optional.

    Returns:
        Formatted stream selector like ``0:v:0`` or ``1:v``.

    """
    opt = "?" if optional else ""
    idx = "" if index is None else f":{index}"
    return f"{input_index}:{kind}{opt}{idx}"


def label(name: str) -> str:
    """Return a filtergraph pad label such as ``[outv]``."""
    return f"[{name}]"


def map_label(name: str) -> tuple[str, ...]:
    """Return ``-map`` argument selecting a labelled filter output."""
    return (MAP_FLAG, label(name))


def codec_flag(kind: str) -> tuple[str, ...]:
    """Return codec flag for a stream type."""
    return (f"-c:{kind}",)


def bitrate_flag(kind: str) -> tuple[str, ...]:
    """Return bitrate flag for a stream type."""
    return (f"-b:{kind}",)
