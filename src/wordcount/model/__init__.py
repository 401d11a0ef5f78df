"""Enums shared across the engine, runner and report layers."""

from __future__ import annotations

from enum import Enum


class Counter(str, Enum):
    """The four counters, declared in their fixed output order."""

    LINES = "lines"
    WORDS = "words"
    BYTES = "bytes"
    MAX_LINE_LENGTH = "max_line_length"


class InputKind(str, Enum):
    """How an operand on the command line resolved."""

    STDIN = "stdin"
    FILE = "file"
    DIRECTORY = "directory"
    MISSING = "missing"
