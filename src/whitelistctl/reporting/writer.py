from __future__ import annotations

import json
from pathlib import Path

from ..config.context import CheckConfig
from ..core.logging import log_event
from ..core.validator import ValidationResult, render_findings
from ..io.fs import write_json, write_lines, write_stdout, write_text
from .markdown import render_markdown
from .schema import validate_report


def build_report(config: CheckConfig, result: ValidationResult) -> dict[str, object]:
    findings = result.findings
    payload: dict[str, object] = {
        "schema_version": 1,
        "tool": "whitelistctl",
        "kind": "whitelist-check",
        "run_id": config.run_id,
        "status": "pass" if result.ok else "fail",
        "base": config.base_path.as_posix() if config.base_path else None,
        "updated": config.updated_path.as_posix(),
        "marker": config.policy.marker,
        "added_count": len(result.added),
        "finding_count": len(findings),
        "checks": [run.to_dict() for run in result.runs],
        "findings": [finding.to_dict() for finding in findings],
    }
    validate_report(payload)
    return payload


def render_text(result: ValidationResult) -> list[str]:
    return render_findings(result.findings)


def write_report(config: CheckConfig, result: ValidationResult) -> Path | None:
    fmt = config.output_format
    out = config.out_path
    if fmt == "json":
        payload = build_report(config, result)
        if out is None:
            print(json.dumps(payload, sort_keys=True))
            return None
        write_json(out, payload)
    elif fmt == "markdown":
        document = render_markdown(config, result)
        if out is None:
            write_stdout(document)
            return None
        write_text(out, document)
    else:
        lines = render_text(result)
        if out is None:
            write_stdout("".join(f"{line}\n" for line in lines))
            return None
        write_lines(out, lines)
    log_event(config, "info", "report", "written", path=out.as_posix(), format=fmt)
    return out
