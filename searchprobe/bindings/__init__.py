"""Step binding layer."""

from __future__ import annotations

from searchprobe.bindings.registry import ResolvedStep, StepBinding, StepRegistry
from searchprobe.bindings.search_steps import (
    given_on_homepage,
    registry,
    then_title_contains,
    when_search_for,
)

__all__ = [
    "StepRegistry",
    "StepBinding",
    "ResolvedStep",
    "registry",
    "given_on_homepage",
    "when_search_for",
    "then_title_contains",
]
