from __future__ import annotations

import json
from pathlib import Path

ERROR_REGISTRY = Path(__file__).resolve().parent / "_meta" / "error-registry.json"


def _load_registry() -> dict[str, int]:
    payload = json.loads(ERROR_REGISTRY.read_text(encoding="utf-8"))
    mapping: dict[str, int] = {}
    for row in payload.get("codes", []):
        mapping[str(row["name"])] = int(row["code"])
    return mapping


_REG = _load_registry()

OK = _REG["WL_OK"]
ERR_FINDINGS = _REG["WL_ERR_FINDINGS"]
ERR_USAGE = _REG["WL_ERR_USAGE"]
ERR_CONFIG = _REG["WL_ERR_CONFIG"]
ERR_IO = _REG["WL_ERR_IO"]
ERR_VALIDATION = _REG["WL_ERR_VALIDATION"]
ERR_INTERNAL = _REG["WL_ERR_INTERNAL"]
