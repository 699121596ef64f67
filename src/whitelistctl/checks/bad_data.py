from __future__ import annotations

from collections.abc import Sequence

from ..core.model import Finding, FindingKind
from ..core.policy import DEFAULT_POLICY, MarkerPolicy


def check_bad_data(added: Sequence[str], policy: MarkerPolicy = DEFAULT_POLICY) -> list[Finding]:
    return [
        Finding(FindingKind.BAD_DATA, position, line)
        for position, line in enumerate(added, start=1)
        if policy.matches(line)
    ]
