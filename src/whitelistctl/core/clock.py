from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def utc_run_stamp() -> str:
    return utc_now().strftime("%Y%m%d-%H%M%S")
