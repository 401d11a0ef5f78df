"""Byte classification tables.

The engine never consults process-wide locale state. Which bytes count as
printable (advance the display column) and which count as whitespace (end a
word) is an explicit ``ByteClasses`` value carried on ``CountConfig``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

_C_SPACE = frozenset(b" \t\n\v\f\r")
_C_PRINT = frozenset(range(0x20, 0x7F))

_LATIN1_CODESETS = frozenset({"iso88591", "iso885915", "latin1", "latin9"})


@dataclass(frozen=True)
class ByteClasses:
    """Printable and whitespace byte sets for one single-byte charset."""

    name: str
    printable: frozenset[int]
    whitespace: frozenset[int]

    def is_printable(self, byte: int) -> bool:
        return byte in self.printable

    def is_space(self, byte: int) -> bool:
        return byte in self.whitespace


C_LOCALE = ByteClasses(name="C", printable=_C_PRINT, whitespace=_C_SPACE)

LATIN1 = ByteClasses(
    name="ISO-8859-1",
    printable=_C_PRINT | frozenset(range(0xA0, 0x100)),
    whitespace=_C_SPACE,
)


def _codeset(locale_name: str) -> str:
    """``en_US.ISO-8859-1@euro`` → ``iso88591``."""
    _, _, rest = locale_name.partition(".")
    rest = rest.split("@", 1)[0]
    return "".join(ch for ch in rest.lower() if ch.isalnum())


def charset_from_env(env: Mapping[str, str] | None = None) -> ByteClasses:
    """Pick the byte classes the user's ``LC_CTYPE`` locale implies.

    Follows POSIX precedence: ``LC_ALL``, then ``LC_CTYPE``, then ``LANG``.
    Only Latin-1 style locales widen the printable set; in UTF-8 locales a
    lone high byte is never a printable character.
    """
    if env is None:
        env = os.environ
    for var in ("LC_ALL", "LC_CTYPE", "LANG"):
        value = env.get(var, "")
        if value:
            if _codeset(value) in _LATIN1_CODESETS:
                return LATIN1
            return C_LOCALE
    return C_LOCALE
