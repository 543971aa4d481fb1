"""Utility functions for status emission."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from ffchain.models.verbosity import Verbosity

logger = logging.getLogger(__name__)


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to the CLI, logger, or a custom callback.

    The caller controls where status lines go:

    * ``print`` - used by the CLI for direct terminal updates.
    * ``None`` - route messages through ``logger.info``.
    * Any other ``Callable[[str], None]`` - for embedding applications or
      tests that capture status output.
    """
    if status_callback is None:
        logger.info(message)
        return
    # Special handling for terminal-friendly in-place updates.
    if status_callback is print:
        print(  # noqa: T201
            message,
            end="" if "\r" in message and "\n" not in message else "\n",
            flush=True,
        )
        return
    status_callback(message)


def format_action_label(*, dry_run: bool) -> str:
    """Return a short action label for command banners.

    - Command: when in dry-run mode
    - Running: otherwise
    """
    if dry_run:
        return "Command"
    return "Running"


def maybe_log_command(
    *,
    verbosity: Verbosity,
    dry_run: bool,
    status_callback: Callable[[str], None] | None,
    banner: str,
) -> None:
    """Log a command banner when appropriate for verbosity/dry-run.

    Logs when verbosity is at least ``Verbosity.COMMANDS`` or in dry-run mode.
    """
    if verbosity >= Verbosity.COMMANDS or dry_run:
        emit_status(banner, status_callback=status_callback)


__all__ = [
    "emit_status",
    "format_action_label",
    "maybe_log_command",
]
