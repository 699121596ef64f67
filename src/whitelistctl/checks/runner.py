from __future__ import annotations

from collections.abc import Sequence

from ..core.policy import DEFAULT_POLICY, MarkerPolicy
from .bad_data import check_bad_data
from .base import CheckDef, CheckRun
from .ordering import check_ordering

CHECKS: tuple[CheckDef, ...] = (
    CheckDef("whitelist/bad-data", "added lines must not start with the disallowed marker", check_bad_data),
    CheckDef("whitelist/ordering", "added lines must be in case-insensitive sorted order", check_ordering),
)


def check_ids() -> list[str]:
    return [c.check_id for c in CHECKS]


def run_checks(added: Sequence[str], policy: MarkerPolicy = DEFAULT_POLICY) -> list[CheckRun]:
    return [CheckRun(chk.check_id, tuple(chk.fn(added, policy))) for chk in CHECKS]
