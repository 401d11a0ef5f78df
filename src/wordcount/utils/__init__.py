"""Shared utilities for wordcount."""

from wordcount.utils.exit_codes import ExitCode
from wordcount.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
