"""JSON report — the ``--json`` alternative to counts lines."""

from __future__ import annotations

from typing import IO, Any

from wordcount import __version__
from wordcount.contracts.load import validate_instance
from wordcount.core.config import CountConfig
from wordcount.core.runner import RunOutcome
from wordcount.model.stats import FileStatistics
from wordcount.utils.json_norm import stable_json_dump

SCHEMA_VERSION = "count_report_v1"
SCHEMA_NAME = "count_report.schema.json"


def _counts(stats: FileStatistics, config: CountConfig) -> dict[str, int]:
    return {c.value: stats.get(c) for c in config.selected()}


def build_report(outcome: RunOutcome, config: CountConfig) -> dict[str, Any]:
    """Assemble the report dict for *outcome*. Only selected counters appear."""
    config = config.with_defaults()
    inputs: list[dict[str, Any]] = []
    for result in outcome.results:
        entry: dict[str, Any] = {
            "label": result.source.label,
            "kind": result.source.kind.value,
            "status": result.status,
        }
        if result.stats is not None:
            entry["counts"] = _counts(result.stats, config)
        if result.error is not None:
            entry["error"] = result.error
        inputs.append(entry)

    report: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "tool_version": __version__,
        "counters": [c.value for c in config.selected()],
        "inputs": inputs,
        "total": _counts(outcome.total, config) if outcome.total is not None else None,
        "exit_code": int(outcome.exit_code),
    }
    if outcome.overflow is not None:
        report["overflow"] = outcome.overflow.value
    return report


def write_report(out: IO[str], outcome: RunOutcome, config: CountConfig) -> dict[str, Any]:
    """Validate the report against its schema, then write it to *out*."""
    report = build_report(outcome, config)
    validate_instance(report, SCHEMA_NAME)
    stable_json_dump(report, out)
    return report
