"""Report sinks for whitelist findings."""

from .markdown import render_markdown
from .schema import REPORT_SCHEMA, validate_report
from .writer import build_report, render_text, write_report

__all__ = ["REPORT_SCHEMA", "build_report", "render_markdown", "render_text", "validate_report", "write_report"]
