"""Runtime context shared across ffchain components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ffchain.models.verbosity import Verbosity

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(slots=True)
class RuntimeContext:
    """Runtime flags for probing and encoding."""

    verbosity: Verbosity = Verbosity.QUIET
    dry_run: bool = False
    status_callback: Callable[[str], None] | None = None


__all__ = ["RuntimeContext"]
