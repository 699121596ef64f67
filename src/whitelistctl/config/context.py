from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from ..core.clock import utc_run_stamp
from ..core.policy import BAD_DATA_MARKER, MarkerPolicy
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG
from .loader import load_config_file

OutputFormat = Literal["text", "json", "markdown"]
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json", "markdown")


@dataclass(frozen=True)
class CheckConfig:
    updated_path: Path
    base_path: Path | None = None
    out_path: Path | None = None
    output_format: OutputFormat = "text"
    policy: MarkerPolicy = MarkerPolicy()
    run_id: str = "whitelist"
    verbose: bool = False
    quiet: bool = False
    log_json: bool = False

    @classmethod
    def from_args(
        cls,
        updated: str,
        base: str | None = None,
        out: str | None = None,
        output_format: str | None = None,
        marker: str | None = None,
        config_file: str | None = None,
        run_id: str | None = None,
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "CheckConfig":
        file_values: dict[str, Any] = load_config_file(Path(config_file)) if config_file else {}
        resolved_base = base or file_values.get("base") or os.environ.get("WHITELIST_BASE") or None
        resolved_marker = marker if marker is not None else file_values.get("marker")
        if resolved_marker is None:
            resolved_marker = os.environ.get("WHITELIST_MARKER", BAD_DATA_MARKER)
        if not isinstance(resolved_marker, str) or not resolved_marker.strip():
            raise ScriptError("marker token must be a non-empty string", ERR_CONFIG, kind="config_error")
        resolved_format = output_format or file_values.get("format") or ("json" if "CI" in os.environ else "text")
        if resolved_format not in OUTPUT_FORMATS:
            raise ScriptError(f"unsupported output format `{resolved_format}`", ERR_CONFIG, kind="config_error")
        return cls(
            updated_path=Path(updated),
            base_path=Path(str(resolved_base)) if resolved_base else None,
            out_path=Path(out) if out else None,
            output_format=resolved_format,
            policy=MarkerPolicy(resolved_marker),
            run_id=run_id or os.environ.get("RUN_ID", f"whitelist-{utc_run_stamp()}"),
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
        )
