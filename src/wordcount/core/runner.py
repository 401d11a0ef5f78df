"""Runner — counts every input, prints counts lines, folds the total."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import IO, BinaryIO

from wordcount.core.accumulate import CounterOverflowError, RunningTotal
from wordcount.core.config import CountConfig
from wordcount.core.engine import ReadFailure, scan
from wordcount.core.sources import InputSource, open_source, resolve_inputs
from wordcount.model import Counter, InputKind
from wordcount.model.stats import UINTMAX_MAX, ZERO, FileStatistics
from wordcount.report.format import NumberFormat, write_counts
from wordcount.utils.exit_codes import ExitCode

_logger = logging.getLogger(__name__)

TOTAL_LABEL = "total"
# Label used in error messages for the no-operand stdin run.
STDIN_LABEL = "stdin"


@dataclass(frozen=True)
class InputResult:
    """What happened to one input. ``stats`` is None unless it was counted."""

    source: InputSource
    stats: FileStatistics | None = None
    error: str | None = None

    @property
    def status(self) -> str:
        if self.error is not None:
            return "read_failure"
        if self.source.kind in (InputKind.DIRECTORY, InputKind.MISSING):
            return self.source.kind.value
        return "ok"


@dataclass
class RunOutcome:
    results: list[InputResult] = field(default_factory=list)
    total: FileStatistics | None = None
    exit_code: int = ExitCode.SUCCESS
    overflow: Counter | None = None

    @property
    def read_failures(self) -> list[InputResult]:
        return [r for r in self.results if r.error is not None]


def _count_source(
    source: InputSource, config: CountConfig, stdin: BinaryIO | None
) -> InputResult:
    try:
        with open_source(source, stdin) as stream:
            stats = scan(stream, config)
    except ReadFailure as exc:
        return InputResult(source, error=exc.reason)
    except OSError as exc:
        # open() itself failed: permission denied, vanished file, ...
        return InputResult(source, error=exc.strerror or str(exc))
    _logger.debug("counted %r: %s", source.label, stats)
    return InputResult(source, stats=stats)


def _report_read_failure(result: InputResult, stderr: IO[str]) -> None:
    _logger.warning("read failure on %r: %s", result.source.label, result.error)
    print(
        f"error: failed to process '{result.source.label}': {result.error}",
        file=stderr,
        flush=True,
    )


def run_count(
    operands: list[str],
    config: CountConfig,
    *,
    stdout: IO[str],
    stderr: IO[str],
    stdin: BinaryIO | None = None,
    number_format: NumberFormat = NumberFormat(),
    emit_lines: bool = True,
    # Testing hook: overflow bound for the running total
    _total_limit: int = UINTMAX_MAX,
) -> RunOutcome:
    """Count *operands* (standard input when empty) and return the outcome.

    Exit status policy:
      - any read failure → ``FAILURE``, but the run continues
      - overflow of the total → ``FAILURE``, the run stops, no total row
      - directories and missing paths are reported and never fail the run
    """
    config = config.with_defaults()
    outcome = RunOutcome()

    def emit(stats: FileStatistics, label: str | None) -> None:
        if emit_lines:
            write_counts(stdout, stats, config, label, number_format)

    # ── single-input path: no operands, unlabeled stdin ─────────────
    if not operands:
        source = InputSource(STDIN_LABEL, InputKind.STDIN)
        result = _count_source(source, config, stdin)
        outcome.results.append(result)
        if result.stats is None:
            _report_read_failure(result, stderr)
            outcome.exit_code = ExitCode.FAILURE
        else:
            emit(result.stats, None)
        return outcome

    # ── operand path ────────────────────────────────────────────────
    track_total = len(operands) > 1
    total = RunningTotal(limit=_total_limit)

    for source in resolve_inputs(operands):
        _logger.debug("input %r resolved as %s", source.label, source.kind.value)

        if source.kind == InputKind.DIRECTORY:
            print(f"wc: {source.label}: Is a directory.", file=stderr, flush=True)
            outcome.results.append(InputResult(source, stats=ZERO))
            emit(ZERO, source.label)
            continue

        if source.kind == InputKind.MISSING:
            print(
                f"wc: {source.label}: No such file or directory.",
                file=stderr,
                flush=True,
            )
            outcome.results.append(InputResult(source))
            continue

        result = _count_source(source, config, stdin)
        outcome.results.append(result)
        if result.stats is None:
            _report_read_failure(result, stderr)
            outcome.exit_code = ExitCode.FAILURE
            continue

        emit(result.stats, source.label)

        if track_total:
            try:
                total.add(result.stats)
            except CounterOverflowError as exc:
                _logger.warning("total overflowed on %r (%s)", source.label, exc.field.value)
                print(f"Error: {exc}.", file=stderr, flush=True)
                outcome.overflow = exc.field
                outcome.exit_code = ExitCode.FAILURE
                return outcome

    if track_total:
        outcome.total = total.value
        emit(total.value, TOTAL_LABEL)

    return outcome
