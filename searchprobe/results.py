"""Result records produced by the scenario runner."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from searchprobe.constants import StepStatus
from searchprobe.core.exceptions import error_kind


@dataclass
class StepResult:
    keyword: str
    text: str
    status: StepStatus = StepStatus.SKIPPED
    error_kind: str | None = None
    error_message: str | None = None
    duration: float = 0.0

    def fail(self, error: BaseException) -> None:
        self.status = StepStatus.FAILED
        self.error_kind = error_kind(error)
        self.error_message = str(error)


@dataclass
class ScenarioResult:
    """Outcome of one scenario.

    Attributes
    ----------
    feature : str
        Name of the feature the scenario belongs to
    name : str
        Scenario name (outline rows carry their example suffix)
    location : str
        ``path:line`` of the scenario in its feature file
    tags : list[str]
        Effective tags, feature tags included
    steps : list[StepResult]
        One record per step, in execution order
    error_kind : str | None
        Kind of the error that failed the scenario
    error_message : str | None
        Message of that error
    dry_run : bool
        True when steps were only resolved, not executed
    """

    feature: str
    name: str
    location: str
    tags: list[str] = field(default_factory=list)
    steps: list[StepResult] = field(default_factory=list)
    error_kind: str | None = None
    error_message: str | None = None
    dry_run: bool = False
    duration: float = 0.0

    @property
    def status(self) -> StepStatus:
        if self.error_kind is not None:
            return StepStatus.FAILED

        if any(step.status == StepStatus.FAILED for step in self.steps):
            return StepStatus.FAILED

        if self.dry_run:
            return StepStatus.UNTESTED

        return StepStatus.PASSED

    @property
    def passed(self) -> bool:
        return self.status != StepStatus.FAILED

    def fail(self, error: BaseException) -> None:
        if self.error_kind is None:
            self.error_kind = error_kind(error)
            self.error_message = str(error)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        for step in data["steps"]:
            step["status"] = StepStatus(step["status"]).value
        return data


@dataclass
class RunReport:
    """Aggregate of every scenario result in a run."""

    scenarios: list[ScenarioResult] = field(default_factory=list)
    dry_run: bool = False
    duration: float = 0.0

    @property
    def totals(self) -> dict[str, int]:
        counts = {status.value: 0 for status in StepStatus}
        for scenario in self.scenarios:
            counts[scenario.status.value] += 1
        return counts

    @property
    def failed(self) -> list[ScenarioResult]:
        return [s for s in self.scenarios if s.status == StepStatus.FAILED]

    @property
    def exit_code(self) -> int:
        """0 when scenarios ran and none failed, 1 otherwise."""
        if not self.scenarios or self.failed:
            return 1
        return 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "dry_run": self.dry_run,
            "duration": round(self.duration, 3),
            "totals": self.totals,
            "exit_code": self.exit_code,
            "scenarios": [scenario.to_dict() for scenario in self.scenarios],
        }
