"""Filesystem helpers for whitelist input and report output."""

from .fs import read_lines, read_optional_lines, write_json, write_lines, write_stdout, write_text

__all__ = ["read_lines", "read_optional_lines", "write_json", "write_lines", "write_stdout", "write_text"]
