"""FileStatistics — the immutable per-input result record."""

from __future__ import annotations

from dataclasses import dataclass

from . import Counter

# Widest unsigned counter value (uintmax_t on LP64 platforms).
UINTMAX_MAX = 2**64 - 1


@dataclass(frozen=True, slots=True)
class FileStatistics:
    """Counters for one input stream, or the running total of several.

    A record depends only on the bytes scanned and the ``CountConfig``;
    how the stream was split into reads has no effect on it.
    """

    lines: int = 0
    words: int = 0
    bytes: int = 0
    max_line_length: int = 0

    def get(self, counter: Counter) -> int:
        return getattr(self, counter.value)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, int]:
        return {c.value: self.get(c) for c in Counter}


ZERO = FileStatistics()
