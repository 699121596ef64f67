from __future__ import annotations

import argparse
import json
import os
import sys

from . import __version__
from .config.context import OUTPUT_FORMATS, CheckConfig
from .core.logging import log_event
from .core.validator import run_validation
from .errors import ScriptError
from .exit_codes import ERR_FINDINGS, ERR_INTERNAL, OK
from .io.fs import read_lines, read_optional_lines
from .reporting.writer import write_report


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="whitelistctl",
        description="Validate the lines an updated whitelist adds on top of an approved one.",
    )
    p.add_argument("--version", action="version", version=f"whitelistctl {__version__}")
    p.add_argument("--base", help="path to approved whitelist")
    p.add_argument("--updated", required=True, help="path to whitelist with changes (required)")
    p.add_argument("--out", help="write the report to this file (default is stdout)")
    p.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="report format")
    p.add_argument("--marker", help="disallowed line prefix, matched case-insensitively")
    p.add_argument("--config", help="YAML or JSON config file")
    p.add_argument("--run-id", help="run identifier for logs and reports")
    p.add_argument("--log-json", action="store_true", help="emit structured JSON log lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    return p


def config_from_namespace(ns: argparse.Namespace) -> CheckConfig:
    return CheckConfig.from_args(
        ns.updated,
        base=ns.base,
        out=ns.out,
        output_format=ns.format,
        marker=ns.marker,
        config_file=ns.config,
        run_id=ns.run_id,
        verbose=ns.verbose,
        quiet=ns.quiet,
        log_json=ns.log_json,
    )


def run_check(config: CheckConfig) -> int:
    log_event(
        config,
        "info",
        "cli",
        "start",
        base=config.base_path.as_posix() if config.base_path else "-",
        updated=config.updated_path.as_posix(),
        fmt=config.output_format,
    )
    master = read_optional_lines(config.base_path)
    updated = read_lines(config.updated_path)
    log_event(config, "debug", "cli", "loaded", master_lines=len(master), updated_lines=len(updated))

    result = run_validation(master, updated, config.policy)
    if not result.added:
        log_event(config, "info", "validator", "no-difference", message="No difference between whitelist files")
    findings = result.findings
    log_event(
        config,
        "warn" if findings else "info",
        "validator",
        "done",
        added=len(result.added),
        findings=len(findings),
    )
    write_report(config, result)
    return ERR_FINDINGS if findings else OK


def _render_error(message: str, code: int) -> str:
    return json.dumps(
        {
            "schema_version": 1,
            "tool": "whitelistctl",
            "status": "fail",
            "error": {"message": message, "code": code},
        },
        sort_keys=True,
    )


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    as_json = ns.format == "json" or (ns.format is None and "CI" in os.environ)
    try:
        config = config_from_namespace(ns)
        as_json = config.output_format == "json"
        return run_check(config)
    except ScriptError as exc:
        print(_render_error(str(exc), exc.code) if as_json else str(exc), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        message = f"internal error: {exc}"
        print(_render_error(message, ERR_INTERNAL) if as_json else message, file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
