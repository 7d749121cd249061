"""Core searchprobe functionality."""

from __future__ import annotations

from searchprobe.core.config import ConfigLoader
from searchprobe.core.exceptions import (
    AmbiguousOrUnboundStepError,
    ElementNotFoundError,
    SearchProbeError,
    SessionAlreadyActiveError,
    SessionClosedError,
    SessionStartError,
    StepAssertionError,
    WaitTimeoutError,
    error_kind,
)

__all__ = [
    "ConfigLoader",
    "SearchProbeError",
    "ElementNotFoundError",
    "WaitTimeoutError",
    "StepAssertionError",
    "AmbiguousOrUnboundStepError",
    "SessionStartError",
    "SessionAlreadyActiveError",
    "SessionClosedError",
    "error_kind",
]
