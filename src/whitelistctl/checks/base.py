from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable

from ..core.model import Finding
from ..core.policy import MarkerPolicy

CheckFunc = Callable[[Sequence[str], MarkerPolicy], list[Finding]]


@dataclass(frozen=True)
class CheckDef:
    check_id: str
    description: str
    fn: CheckFunc


@dataclass(frozen=True)
class CheckRun:
    check_id: str
    findings: tuple[Finding, ...]

    @property
    def status(self) -> str:
        return "fail" if self.findings else "pass"

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.check_id,
            "status": self.status,
            "finding_count": len(self.findings),
        }
