"""Pure whitelist diff-and-validate logic; no I/O lives here."""

from .model import Finding, FindingKind
from .policy import BAD_DATA_MARKER, DEFAULT_POLICY, MarkerPolicy

__all__ = ["BAD_DATA_MARKER", "DEFAULT_POLICY", "Finding", "FindingKind", "MarkerPolicy"]
