"""Statistics engine — single-pass line/word/byte/width counting."""

from __future__ import annotations

import io
from typing import BinaryIO

from wordcount.core.charset import ByteClasses
from wordcount.core.config import CountConfig
from wordcount.model.stats import FileStatistics

TAB_WIDTH = 8

_LF = 0x0A
_TAB = 0x09
_VT = 0x0B
_SPACE = 0x20

# Bytes that end the current display line. Only LF counts as a line.
_LINE_BREAKS = frozenset(b"\n\r\f")


class ReadFailure(Exception):
    """The stream reported an error other than end-of-file mid-scan."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


def word_started(was_in_word: bool, byte: int, charset: ByteClasses) -> bool:
    """A word begins on the first non-whitespace byte after whitespace."""
    return not was_in_word and not charset.is_space(byte)


def _read_chunk(stream: BinaryIO, size: int) -> bytes:
    try:
        return stream.read(size) or b""
    except OSError as exc:
        raise ReadFailure(exc.strerror or str(exc)) from exc


def scan(stream: BinaryIO, config: CountConfig) -> FileStatistics:
    """Count *stream* to EOF and return its ``FileStatistics``.

    Raises ``ReadFailure`` if a read fails; no partial record escapes.
    The caller owns *stream* and is responsible for closing it.
    """
    charset = config.charset
    classify = config.needs_classification
    # Newline counting alone needs no per-byte state.
    lines_only = config.count_lines and not (
        config.count_words or config.count_max_line_length
    )

    lines = words = nbytes = max_line_length = 0
    column = 0
    in_word = False

    while True:
        chunk = _read_chunk(stream, config.chunk_size)
        if not chunk:
            break
        nbytes += len(chunk)

        if not classify:
            continue
        if lines_only:
            lines += chunk.count(b"\n")
            continue

        for byte in chunk:
            if byte in _LINE_BREAKS:
                if byte == _LF:
                    lines += 1
                max_line_length = max(max_line_length, column)
                column = 0
                in_word = False
            elif byte == _TAB:
                column += TAB_WIDTH - column % TAB_WIDTH
                in_word = False
            elif byte == _SPACE:
                column += 1
                in_word = False
            elif byte == _VT:
                in_word = False
            else:
                if charset.is_printable(byte):
                    column += 1
                if word_started(in_word, byte, charset):
                    words += 1
                in_word = not charset.is_space(byte)

    # Trailing line without a terminating newline.
    max_line_length = max(max_line_length, column)

    return FileStatistics(
        lines=lines,
        words=words,
        bytes=nbytes,
        max_line_length=max_line_length,
    )


def scan_bytes(data: bytes, config: CountConfig) -> FileStatistics:
    """Scan an in-memory buffer."""
    return scan(io.BytesIO(data), config)
