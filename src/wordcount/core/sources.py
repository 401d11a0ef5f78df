"""Input resolution — classify command-line operands and open them."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator

from wordcount.model import InputKind

STDIN_OPERAND = "-"


@dataclass(frozen=True)
class InputSource:
    """One operand, resolved.

    ``label`` is the operand exactly as given; it is what the counts line
    and error messages display.
    """

    label: str
    kind: InputKind
    path: Path | None = None


def resolve_input(operand: str) -> InputSource:
    """Classify *operand*.

    Filesystem checks run before the ``-`` check, so a real file named
    ``-`` is read as a file.
    """
    path = Path(operand)
    try:
        if path.is_dir():
            return InputSource(operand, InputKind.DIRECTORY, path)
        if path.is_file():
            return InputSource(operand, InputKind.FILE, path)
    except OSError:
        pass
    if operand == STDIN_OPERAND:
        return InputSource(operand, InputKind.STDIN)
    return InputSource(operand, InputKind.MISSING, path)


def resolve_inputs(operands: list[str]) -> list[InputSource]:
    return [resolve_input(op) for op in operands]


def _stdin_buffer() -> BinaryIO:
    return getattr(sys.stdin, "buffer", sys.stdin)


@contextmanager
def open_source(
    source: InputSource, stdin: BinaryIO | None = None
) -> Iterator[BinaryIO]:
    """Yield a binary stream for *source* for the duration of one scan.

    Files are closed on exit whether or not the scan succeeded. Standard
    input is borrowed and left open.
    """
    if source.kind == InputKind.STDIN:
        yield stdin if stdin is not None else _stdin_buffer()
        return
    if source.kind != InputKind.FILE or source.path is None:
        raise ValueError(f"cannot open {source.kind.value} input {source.label!r}")
    with source.path.open("rb") as fh:
        yield fh
