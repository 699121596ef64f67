from __future__ import annotations

from collections.abc import Sequence

from ..core.model import Finding, FindingKind
from ..core.policy import DEFAULT_POLICY, MarkerPolicy


def expected_order(added: Sequence[str]) -> list[str]:
    # sorted() is stable, so case-only ties keep their input order.
    return sorted(added, key=str.lower)


def check_ordering(added: Sequence[str], _policy: MarkerPolicy = DEFAULT_POLICY) -> list[Finding]:
    expected = expected_order(added)
    return [
        Finding(FindingKind.UNORDERED, position, want)
        for position, (got, want) in enumerate(zip(added, expected), start=1)
        if got != want
    ]
