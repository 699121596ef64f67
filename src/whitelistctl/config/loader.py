from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

CONFIG_KEYS = frozenset({"base", "marker", "format"})


def _parse(path: Path, text: str) -> Any:
    if path.suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    if path.suffix == ".json":
        return json.loads(text)
    raise ScriptError(f"unsupported config file type: {path}", ERR_CONFIG, kind="config_error")


def load_config_file(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScriptError(f"cannot read config file {path}: {exc}", ERR_CONFIG, kind="config_error") from exc
    try:
        data = _parse(path, text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ScriptError(f"cannot parse config file {path}: {exc}", ERR_CONFIG, kind="config_error") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ScriptError(f"{path}: root must be mapping", ERR_CONFIG, kind="config_error")
    unknown = sorted(str(k) for k in data if k not in CONFIG_KEYS)
    if unknown:
        raise ScriptError(f"{path}: unknown config key `{unknown[0]}`", ERR_CONFIG, kind="config_error")
    return data
