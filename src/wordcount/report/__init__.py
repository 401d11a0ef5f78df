"""Rendering of counts: fixed-width text lines and the JSON report."""

from wordcount.report.format import NumberFormat, format_counts, write_counts

__all__ = ["NumberFormat", "format_counts", "write_counts"]
