from __future__ import annotations

from dataclasses import dataclass

BAD_DATA_MARKER = "bad"


@dataclass(frozen=True)
class MarkerPolicy:
    """Disallowed line prefix, matched case-insensitively."""

    marker: str = BAD_DATA_MARKER

    def matches(self, line: str) -> bool:
        return line.lower().startswith(self.marker.lower())


DEFAULT_POLICY = MarkerPolicy()
