"""Count configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

from wordcount.core.charset import C_LOCALE, ByteClasses
from wordcount.model import Counter

# 256 KiB read buffer.
DEFAULT_CHUNK_SIZE = 262144


@dataclass(frozen=True)
class CountConfig:
    """Immutable per-run configuration: which counters to compute.

    Bytes are always tallied by the engine whatever ``count_bytes`` says;
    the flag only decides whether the byte column is printed.
    """

    count_lines: bool = False
    count_words: bool = False
    count_bytes: bool = False
    count_max_line_length: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE
    charset: ByteClasses = field(default=C_LOCALE)

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @property
    def any_selected(self) -> bool:
        return (
            self.count_lines
            or self.count_words
            or self.count_bytes
            or self.count_max_line_length
        )

    def with_defaults(self) -> CountConfig:
        """Return the config actually used for a run.

        With no counter selected, lines, words and bytes are enabled.
        Max line length is never part of the implicit set.
        """
        if self.any_selected:
            return self
        return replace(self, count_lines=True, count_words=True, count_bytes=True)

    @property
    def needs_classification(self) -> bool:
        """True when the engine has to look at individual bytes."""
        return self.count_lines or self.count_words or self.count_max_line_length

    def is_selected(self, counter: Counter) -> bool:
        return {
            Counter.LINES: self.count_lines,
            Counter.WORDS: self.count_words,
            Counter.BYTES: self.count_bytes,
            Counter.MAX_LINE_LENGTH: self.count_max_line_length,
        }[counter]

    def selected(self) -> Iterator[Counter]:
        """Yield enabled counters in output order."""
        for counter in Counter:
            if self.is_selected(counter):
                yield counter
