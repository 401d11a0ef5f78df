"""Canonical JSON serialization — single dump path for the ``--json`` report.

Guarantees:
  - Stable key ordering (``sort_keys=True``)
  - Trailing newline at EOF
  - Enums → their values
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, IO, Mapping


def _to_builtin(obj: Any) -> Any:
    """Convert enums (possibly nested) into JSON-safe builtins."""
    if isinstance(obj, Enum):
        return _to_builtin(obj.value)
    if isinstance(obj, Mapping):
        return {str(_to_builtin(k)): _to_builtin(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(v) for v in obj]
    return obj


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """Serialize *obj* with sorted keys and a trailing newline."""
    s = json.dumps(
        _to_builtin(obj),
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )
    return s + "\n"


def stable_json_dump(obj: Any, fp: IO[str], *, indent: int | None = 2) -> None:
    fp.write(stable_json_dumps(obj, indent=indent))
    fp.flush()
