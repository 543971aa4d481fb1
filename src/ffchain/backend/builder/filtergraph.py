"""Filtergraph synthesis for concatenating clips of different sizes."""

from __future__ import annotations

from collections.abc import Iterable

from ffchain.models.ffprobe import Dimensions

from .stream_args import label, spec

CONCAT_OUTPUT = "outv"  #: Label of the concatenated video stream.
_CLIP_LABEL = "v{index}"


def target_dimensions(dims: Iterable[Dimensions]) -> Dimensions:
    """Return the smallest frame that fits every clip.

    Raises:
        ValueError: If ``dims`` is empty.

    """
    dims = list(dims)
    if not dims:
        raise ValueError("at least one clip is required")
    return Dimensions(
        width=max(d.width for d in dims),
        height=max(d.height for d in dims),
    )


def fit_clause(index: int, target: Dimensions) -> str:
    """Return the chain that letterboxes input ``index`` into ``target``.

    The clip is scaled down to fit while keeping its aspect ratio, padded to
    the exact target size with the picture centred, and given square pixels.
    """
    w, h = target.width, target.height
    return (
        f"{label(spec('v', None, input_index=index))}"
        f"scale={w}:{h}:force_original_aspect_ratio=decrease,"
        f"pad={w}:{h}:(ow-iw)/2:(oh-ih)/2,"
        f"setsar=1"
        f"{label(_CLIP_LABEL.format(index=index))}"
    )


def concat_clause(count: int) -> str:
    """Return the clause joining ``count`` fitted clips, video only."""
    pads = "".join(label(_CLIP_LABEL.format(index=i)) for i in range(count))
    return f"{pads}concat=n={count}:v=1{label(CONCAT_OUTPUT)}"


def build_concat_filtergraph(count: int, target: Dimensions) -> str:
    """Return the complete filtergraph concatenating ``count`` inputs.

    Audio is not carried over; the concat filter emits a single video stream
    labelled :data:`CONCAT_OUTPUT`.
    """
    if count < 1:
        raise ValueError("at least one clip is required")
    return "".join(f"{fit_clause(i, target)};" for i in range(count)) + concat_clause(count)


__all__ = [
    "CONCAT_OUTPUT",
    "build_concat_filtergraph",
    "concat_clause",
    "fit_clause",
    "target_dimensions",
]
