"""Exceptions raised by ffchain."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence


class FFchainError(Exception):
    """Base class for ffchain errors."""


class PreconditionViolation(FFchainError, ValueError):
    """A command was run before it was complete."""


class ProcessFailure(FFchainError, subprocess.CalledProcessError):
    """An external tool exited with a non-zero status."""

    def __init__(
        self,
        returncode: int,
        cmd: Sequence[str],
        output: str | None = None,
        stderr: str | None = None,
    ) -> None:
        subprocess.CalledProcessError.__init__(self, returncode, list(cmd), output, stderr)

    def __str__(self) -> str:
        """Return a short message naming the tool and exit code."""
        exe = self.cmd[0] if self.cmd else "process"
        return f"{exe} exited with code {self.returncode}"


class ParseAmbiguity(FFchainError, ValueError):
    """ffprobe printed output in an unexpected shape."""

    def __init__(self, output: str, expected: str) -> None:
        super().__init__(f"Unexpected ffprobe output {output!r}, expected {expected}")
        self.output = output
        self.expected = expected


__all__ = ["FFchainError", "ParseAmbiguity", "PreconditionViolation", "ProcessFailure"]
