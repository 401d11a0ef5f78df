"""CLI entry-point for wordcount.

Usage:
    python -m wordcount [OPTION]... [FILE]...
    python -m wordcount -lw notes.txt README
    python -m wordcount --json a.txt b.txt
    cat notes.txt | python -m wordcount -L
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordcount import __version__
from wordcount.core.charset import charset_from_env
from wordcount.core.config import CountConfig
from wordcount.core.runner import run_count
from wordcount.report.format import NumberFormat
from wordcount.report.json_report import write_report
from wordcount.utils.exit_codes import ExitCode

PROG = "wc"

_DESCRIPTION = f"""\
NAME
    {PROG} - word, line, and byte count.

DESCRIPTION
    Print line, word, and byte counts for each FILE, and a total line if more
    than one FILE is specified. A line is a string of characters delimited by
    a <newline> character, and a word is a non-zero-length sequence of
    printable characters delimited by white space.

    When an option is specified, {PROG} only reports the information requested
    by that option. The default action is equivalent to all the flags -clw
    having been specified.

    When no FILE, or when FILE is -, read standard input.

    If more than one input file is specified, a line of cumulative counts for
    all the files is displayed on a separate line after the output for the
    last file.

    By default, the standard output contains a line for each input file of
    the form:
        lines    words    bytes    file_name
"""

_EPILOG = f"""\
EXIT STATUS:
    {ExitCode.SUCCESS:d}  every input was counted
    {ExitCode.FAILURE:d}  an input could not be read, or the total overflowed
    {ExitCode.USAGE:d}  the command line was not understood
"""


class UsageError(Exception):
    """An option the parser does not recognize."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog=PROG,
        usage="%(prog)s [OPTION]... [FILE]...",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    p.add_argument("files", nargs="*", metavar="FILE", help="Files to count; - is standard input.")
    p.add_argument(
        "-c",
        "--bytes",
        dest="count_bytes",
        action="store_true",
        help="print the byte counts.",
    )
    p.add_argument(
        "-l",
        "--lines",
        dest="count_lines",
        action="store_true",
        help="print the newline counts.",
    )
    p.add_argument(
        "-L",
        "--max-line-length",
        dest="count_max_line_length",
        action="store_true",
        help="print the maximum display width.",
    )
    p.add_argument(
        "-w",
        "--words",
        dest="count_words",
        action="store_true",
        help="print the word counts.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="print a JSON report instead of counts lines.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug diagnostics to standard error.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-h",
        "--help",
        dest="help",
        action="store_true",
        help="display this help and exit.",
    )
    return p


_SHORT_FLAGS = frozenset("clLwv")
_LONG_FLAGS = ("bytes", "lines", "max-line-length", "words", "json", "verbose", "version")


def _help_requested(argv: list[str]) -> bool:
    """Walk options left to right the way ``getopt_long`` does.

    Returns True at the first ``-h``/``--help`` seen before any unknown
    option. Raises ``UsageError`` for an unknown option, including short
    digit options like ``-1`` that argparse would take as a file name.
    """
    for tok in argv:
        if tok == "--":
            return False
        if tok == "-" or not tok.startswith("-"):
            continue
        if tok.startswith("--"):
            name = tok[2:].split("=", 1)[0]
            if name and "help".startswith(name):
                return True
            if not name or not any(opt.startswith(name) for opt in _LONG_FLAGS):
                raise UsageError(f"unrecognized option '{tok}'")
            continue
        for ch in tok[1:]:
            if ch == "h":
                return True
            if ch not in _SHORT_FLAGS:
                raise UsageError(f"invalid option -- '{ch}'")
    return False


def _usage_err(detail: str) -> None:
    print(f"{PROG}: {detail}", file=sys.stderr)
    print(
        f"The syntax of the command is incorrect.\nTry {PROG} -h for more information.",
        file=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``ExitCode``)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()

    try:
        if _help_requested(effective_argv):
            parser.print_help(sys.stdout)
            return ExitCode.SUCCESS
        args = parser.parse_intermixed_args(effective_argv)
    except UsageError as exc:
        _usage_err(str(exc))
        return ExitCode.USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = CountConfig(
        count_lines=args.count_lines,
        count_words=args.count_words,
        count_bytes=args.count_bytes,
        count_max_line_length=args.count_max_line_length,
        charset=charset_from_env(),
    ).with_defaults()

    outcome = run_count(
        args.files,
        config,
        stdout=sys.stdout,
        stderr=sys.stderr,
        number_format=NumberFormat.from_locale(),
        emit_lines=not args.json_out,
    )

    if args.json_out:
        write_report(sys.stdout, outcome, config)

    return outcome.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
