"""Error taxonomy.

Parsers never raise; these errors cover the host environment only (browser
start-up, navigation, unreadable static pages) so the CLI can decide whether a
retry makes sense.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class BilifeedError(Exception):
    """Base class for bilifeed errors."""

    message: str
    retryable: bool = False
    details: Optional[dict[str, Any]] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class HostUnavailableError(BilifeedError):
    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None):
        super().__init__(message=message, retryable=True, details=details)


class HostSnapshotError(BilifeedError):
    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None):
        super().__init__(message=message, retryable=False, details=details)
