"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

INPUT_GROUP = Group.create_ordered("Input")
OUTPUT_GROUP = Group.create_ordered("Output")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "INPUT_GROUP",
    "OUTPUT_GROUP",
    "RUNTIME_GROUP",
]
