"""Counts-line formatting.

Uses the System V ``wc`` layout (``"%7d%7d%7d %s"``) with two extra spaces
before every field.
"""

from __future__ import annotations

import locale
from dataclasses import dataclass
from typing import IO

from wordcount.core.config import CountConfig
from wordcount.model.stats import FileStatistics

FIELD_WIDTH = 7
FIELD_GAP = "  "


@dataclass(frozen=True)
class NumberFormat:
    """Digit grouping for counters; empty separator means no grouping."""

    thousands_sep: str = ""
    grouping: int = 3

    def format_int(self, value: int) -> str:
        digits = str(value)
        if not self.thousands_sep or self.grouping <= 0:
            return digits
        groups = []
        while len(digits) > self.grouping:
            groups.append(digits[-self.grouping:])
            digits = digits[: -self.grouping]
        groups.append(digits)
        return self.thousands_sep.join(reversed(groups))

    @classmethod
    def from_locale(cls) -> NumberFormat:
        """Read the user's ``LC_NUMERIC`` grouping.

        Call once at startup; an unusable locale setting falls back to
        plain digits.
        """
        try:
            locale.setlocale(locale.LC_NUMERIC, "")
        except locale.Error:
            return cls()
        conv = locale.localeconv()
        sep = str(conv.get("thousands_sep") or "")
        grouping = conv.get("grouping") or []
        size = grouping[0] if grouping and grouping[0] > 0 else 3
        return cls(thousands_sep=sep, grouping=size)


def format_counts(
    stats: FileStatistics,
    config: CountConfig,
    label: str | None = None,
    number_format: NumberFormat = NumberFormat(),
) -> str:
    """Render one counts line, without the trailing newline."""
    parts = [
        FIELD_GAP + number_format.format_int(stats.get(c)).rjust(FIELD_WIDTH)
        for c in config.selected()
    ]
    if label is not None:
        parts.append(FIELD_GAP + label)
    return "".join(parts)


def write_counts(
    out: IO[str],
    stats: FileStatistics,
    config: CountConfig,
    label: str | None = None,
    number_format: NumberFormat = NumberFormat(),
) -> None:
    """Write one counts line in a single call and flush it.

    Parallel invocations sharing a terminal or pipe must not interleave
    within a line.
    """
    out.write(format_counts(stats, config, label, number_format) + "\n")
    out.flush()
