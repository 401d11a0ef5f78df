"""Accumulator — overflow-checked folding of per-input records into a total."""

from __future__ import annotations

from wordcount.model import Counter
from wordcount.model.stats import UINTMAX_MAX, ZERO, FileStatistics

# Summed counters, checked in this order; the first to overflow is reported.
_SUMMED = (Counter.LINES, Counter.WORDS, Counter.BYTES)


class CounterOverflowError(ArithmeticError):
    """Adding a record would wrap an unsigned counter of the total."""

    def __init__(self, field: Counter) -> None:
        self.field = field
        super().__init__(f"integer overflow in total {field.value}")


def checked_add(a: int, b: int, *, field: Counter, limit: int = UINTMAX_MAX) -> int:
    """Return ``a + b``, or raise if the sum does not fit in *limit*."""
    total = a + b
    if total > limit:
        raise CounterOverflowError(field)
    return total


def merge(
    total: FileStatistics,
    record: FileStatistics,
    *,
    limit: int = UINTMAX_MAX,
) -> FileStatistics:
    """Fold *record* into *total*.

    Lines, words and bytes add under ``checked_add``; max line length is
    the larger of the two and cannot overflow.
    """
    summed = {
        c.value: checked_add(total.get(c), record.get(c), field=c, limit=limit)
        for c in _SUMMED
    }
    return FileStatistics(
        max_line_length=max(total.max_line_length, record.max_line_length),
        **summed,
    )


class RunningTotal:
    """Running total for one multi-input run."""

    def __init__(self, *, limit: int = UINTMAX_MAX) -> None:
        self.limit = limit
        self.value = ZERO
        self.inputs = 0

    def add(self, record: FileStatistics) -> FileStatistics:
        """Merge *record*; on overflow the total is left unchanged."""
        self.value = merge(self.value, record, limit=self.limit)
        self.inputs += 1
        return self.value
