"""Diff an updated whitelist against its master and apply the policy checks.

Everything here is a pure function of the two line sequences: no I/O, no
logging and no state shared between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..checks.bad_data import check_bad_data
from ..checks.base import CheckRun
from ..checks.ordering import check_ordering, expected_order
from ..checks.runner import run_checks
from .model import Finding
from .policy import DEFAULT_POLICY, MarkerPolicy

__all__ = [
    "ValidationResult",
    "added_lines",
    "check_bad_data",
    "check_ordering",
    "expected_order",
    "render_findings",
    "run_validation",
    "validate",
]


@dataclass(frozen=True)
class ValidationResult:
    added: tuple[str, ...]
    runs: tuple[CheckRun, ...]

    @property
    def findings(self) -> list[Finding]:
        return [finding for run in self.runs for finding in run.findings]

    @property
    def ok(self) -> bool:
        return not any(run.findings for run in self.runs)


def added_lines(master: Sequence[str], updated: Sequence[str]) -> list[str]:
    """Lines of ``updated`` missing from ``master``, in updated order.

    Membership is exact (case-sensitive). A duplicated added line is kept
    once per occurrence.
    """
    baseline = set(master)
    return [line for line in updated if line not in baseline]


def run_validation(
    master: Sequence[str],
    updated: Sequence[str],
    policy: MarkerPolicy = DEFAULT_POLICY,
) -> ValidationResult:
    if set(master) == set(updated):
        return ValidationResult(added=(), runs=())
    added = added_lines(master, updated)
    if not added:
        return ValidationResult(added=(), runs=())
    return ValidationResult(added=tuple(added), runs=tuple(run_checks(added, policy)))


def validate(
    master: Sequence[str],
    updated: Sequence[str],
    policy: MarkerPolicy = DEFAULT_POLICY,
) -> list[Finding]:
    return run_validation(master, updated, policy).findings


def render_findings(findings: Sequence[Finding]) -> list[str]:
    return [finding.render() for finding in findings]
