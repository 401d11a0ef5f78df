"""wordcount — line, word, byte and display-width counts over byte streams."""

__all__ = [
    "__version__",
    "CountConfig",
    "FileStatistics",
    "ReadFailure",
    "CounterOverflowError",
    "scan",
    "scan_bytes",
    "merge",
    "run_count",
]
__version__ = "0.1.0"

# Programmatic entrypoints (no argparse coupling).
from wordcount.core.accumulate import CounterOverflowError, merge  # noqa: E402, F401
from wordcount.core.config import CountConfig  # noqa: E402, F401
from wordcount.core.engine import ReadFailure, scan, scan_bytes  # noqa: E402, F401
from wordcount.core.runner import run_count  # noqa: E402, F401
from wordcount.model.stats import FileStatistics  # noqa: E402, F401
