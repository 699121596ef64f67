from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..errors import ScriptError
from ..exit_codes import ERR_IO


def read_lines(path: Path) -> list[str]:
    """One entry per line; only the trailing "\\n" or "\\r\\n" is stripped."""
    try:
        with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ScriptError(f"cannot read whitelist file {path}: {exc}", ERR_IO, kind="read_error") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_optional_lines(path: Path | None) -> list[str]:
    if path is None or not str(path):
        return []
    return read_lines(path)


def write_text(path: Path, content: str) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise ScriptError(f"cannot write report file {path}: {exc}", ERR_IO, kind="write_error") from exc
    return path


def write_lines(path: Path, lines: Iterable[str]) -> Path:
    return write_text(path, "".join(f"{line}\n" for line in lines))


def write_json(path: Path, payload: Any) -> Path:
    return write_text(path, json.dumps(payload, indent=2, sort_keys=True) + "\n")


def write_stdout(content: str) -> None:
    """Write to stdout, passing undecodable input bytes through unchanged."""
    stream = sys.stdout
    try:
        stream.write(content)
    except UnicodeEncodeError:
        stream.flush()
        stream.buffer.write(content.encode(stream.encoding or "utf-8", errors="surrogateescape"))
        stream.flush()
