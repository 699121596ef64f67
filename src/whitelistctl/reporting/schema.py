from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import ScriptError
from ..exit_codes import ERR_VALIDATION

REPORT_SCHEMA = Path(__file__).resolve().parents[1] / "contracts" / "report.schema.json"


def load_schema(path: Path = REPORT_SCHEMA) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def validate_report(payload: dict[str, object], schema_path: Path = REPORT_SCHEMA) -> None:
    try:
        jsonschema.validate(payload, load_schema(schema_path))
    except jsonschema.ValidationError as exc:
        raise ScriptError(f"report failed schema contract: {exc.message}", ERR_VALIDATION, kind="contract_error") from exc
