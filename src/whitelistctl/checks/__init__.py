"""Policy checks applied to the lines added by an updated whitelist."""

from .bad_data import check_bad_data
from .base import CheckDef, CheckRun
from .ordering import check_ordering, expected_order
from .runner import CHECKS, check_ids, run_checks

__all__ = [
    "CHECKS",
    "CheckDef",
    "CheckRun",
    "check_bad_data",
    "check_ids",
    "check_ordering",
    "expected_order",
    "run_checks",
]
