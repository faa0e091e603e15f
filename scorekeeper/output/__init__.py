"""Report rendering for finished scoring runs."""

from scorekeeper.output.report import build_report, write_report

__all__ = ["build_report", "write_report"]
