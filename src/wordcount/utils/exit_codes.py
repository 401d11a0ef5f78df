"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — every input counted (missing paths and directories included)
  1   Failure — a read failure on some input, or overflow of the total
  2   Usage — unrecognized option
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    USAGE = 2
