from __future__ import annotations

import re

from ..config.context import CheckConfig
from ..core.validator import ValidationResult


def _code(value: str) -> str:
    # The fence must be longer than any backtick run inside the value.
    longest = max((len(run) for run in re.findall(r"`+", value)), default=0)
    fence = "`" * (longest + 1)
    pad = " " if value.startswith("`") or value.endswith("`") else ""
    escaped = value.replace("|", "\\|")
    return f"{fence}{pad}{escaped}{pad}{fence}"


def render_markdown(config: CheckConfig, result: ValidationResult) -> str:
    base = config.base_path.as_posix() if config.base_path else "(none)"
    lines = [
        "# Whitelist check",
        "",
        f"- Base: `{base}`",
        f"- Updated: `{config.updated_path.as_posix()}`",
        f"- Marker: `{config.policy.marker}`",
        f"- Added lines: {len(result.added)}",
        f"- Status: **{'pass' if result.ok else 'fail'}**",
        "",
    ]
    findings = result.findings
    if not findings:
        lines.append("No findings.")
        return "\n".join(lines) + "\n"
    lines.extend(["| Kind | Line | Text |", "| --- | ---: | --- |"])
    for finding in findings:
        lines.append(f"| {finding.kind.value} | {finding.position} | {_code(finding.text)} |")
    lines.append("")
    lines.extend(f"- {finding.render()}" for finding in findings)
    return "\n".join(lines) + "\n"
