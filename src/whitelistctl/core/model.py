from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FindingKind(str, Enum):
    BAD_DATA = "bad_data"
    UNORDERED = "unordered"


@dataclass(frozen=True)
class Finding:
    kind: FindingKind
    position: int
    text: str

    def render(self) -> str:
        if self.kind is FindingKind.BAD_DATA:
            return f"Bad data at line {self.position}: '{self.text}'"
        return f"Unordered line {self.position}: Expected '{self.text}' to be next"

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "position": self.position,
            "text": self.text,
            "message": self.render(),
        }

    def __str__(self) -> str:
        return self.render()
