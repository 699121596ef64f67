from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING

from .clock import utc_now_iso

if TYPE_CHECKING:
    from ..config.context import CheckConfig

_LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _enabled(config: CheckConfig, level: str) -> bool:
    rank = _LEVELS.get(level, _LEVELS["info"])
    if config.quiet:
        return rank >= _LEVELS["error"]
    if rank < _LEVELS["info"]:
        return config.verbose
    return True


def log_event(config: CheckConfig, level: str, component: str, action: str, **fields: object) -> None:
    if not _enabled(config, level):
        return
    payload = {
        "ts": utc_now_iso(),
        "level": level,
        "run_id": config.run_id,
        "component": component,
        "action": action,
        **fields,
    }
    if config.log_json:
        sys.stderr.write(json.dumps(payload, sort_keys=True, default=str) + "\n")
        return
    core = f"ts={payload['ts']} level={level} run_id={config.run_id} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")
