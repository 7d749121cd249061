"""Scenario discovery and execution."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from behave.model import Feature, Scenario, Step
from behave.parser import ParserError, parse_file

from searchprobe.bindings import registry as default_registry
from searchprobe.bindings.registry import ResolvedStep, StepRegistry
from searchprobe.constants import FEATURE_FILE_SUFFIX, StepStatus
from searchprobe.core.exceptions import AmbiguousOrUnboundStepError, SessionStartError
from searchprobe.lifecycle import ScenarioContext, SessionLifecycle
from searchprobe.results import RunReport, ScenarioResult, StepResult

logger = logging.getLogger(__name__)


def normalize_tags(tags: Iterable[str] | str | None) -> list[str]:
    """Turn a comma-separated string or list of tags into bare tag names.

    ``@smoke`` becomes ``smoke``; ``~@wip`` becomes ``~wip``.
    """
    if tags is None:
        return []

    if isinstance(tags, str):
        tags = tags.split(",")

    normalized = []
    for tag in tags:
        tag = str(tag).strip()
        if not tag:
            continue
        negate = tag.startswith("~")
        name = tag.lstrip("~").lstrip("@")
        normalized.append(f"~{name}" if negate else name)

    return normalized


def matches_tags(scenario_tags: Iterable[str], tags: list[str]) -> bool:
    """Decide whether a scenario is selected by a tag filter.

    A scenario is selected when it carries at least one of the plain tags
    (or no plain tags were given) and none of the ``~`` tags.
    """
    present = {str(tag) for tag in scenario_tags}
    include = [tag for tag in tags if not tag.startswith("~")]
    exclude = [tag[1:] for tag in tags if tag.startswith("~")]

    if any(tag in present for tag in exclude):
        return False

    return not include or any(tag in present for tag in include)


class ScenarioRunner:
    """Run Gherkin scenarios against registered step bindings.

    Parameters
    ----------
    config : dict[str, Any]
        Merged configuration
    registry : StepRegistry | None
        Step bindings to resolve against. Defaults to the search bindings.
    lifecycle_factory : Callable[[dict[str, Any]], SessionLifecycle] | None
        Builds the session lifecycle manager. Defaults to
        :class:`~searchprobe.lifecycle.SessionLifecycle`.
    """

    def __init__(
        self,
        config: dict[str, Any],
        registry: StepRegistry | None = None,
        lifecycle_factory: Callable[[dict[str, Any]], SessionLifecycle] | None = None,
    ) -> None:
        self.config = config
        self.registry = registry if registry is not None else default_registry
        self.lifecycle = (lifecycle_factory or SessionLifecycle)(config)

    def discover(self, paths: Iterable[str | Path]) -> list[Path]:
        """Collect feature files from files and directories.

        Parameters
        ----------
        paths : Iterable[str | Path]
            Feature files or directories searched recursively

        Returns
        -------
        list[Path]
            Feature files, sorted per directory, without duplicates

        Raises
        ------
        ValueError
            If a path does not exist
        """
        found: list[Path] = []

        for raw_path in paths:
            path = Path(raw_path)

            if path.is_dir():
                candidates = sorted(path.rglob(f"*{FEATURE_FILE_SUFFIX}"))
            elif path.is_file():
                candidates = [path]
            else:
                raise ValueError(f"Feature path not found: {path}")

            for candidate in candidates:
                if candidate not in found:
                    found.append(candidate)

        logger.debug("Discovered %d feature file(s)", len(found))
        return found

    def load_features(self, files: Iterable[Path]) -> list[Feature]:
        """Parse feature files with behave's Gherkin parser.

        Raises
        ------
        ValueError
            If a file is not valid Gherkin
        """
        features = []

        for feature_file in files:
            try:
                feature = parse_file(str(feature_file))
            except ParserError as e:
                raise ValueError(f"Invalid feature file {feature_file}: {e}") from e

            if feature is None:
                logger.warning("Feature file %s is empty, skipping", feature_file)
                continue

            features.append(feature)

        return features

    def run(
        self,
        paths: Iterable[str | Path] | None = None,
        dry_run: bool = False,
        tags: Iterable[str] | str | None = None,
    ) -> RunReport:
        """Discover and run every selected scenario, one at a time.

        Parameters
        ----------
        paths : Iterable[str | Path] | None
            Feature files or directories; defaults to the configured features
        dry_run : bool
            Only resolve steps; never start a session or run a binding
        tags : Iterable[str] | str | None
            Tag filter; defaults to the configured tags

        Returns
        -------
        RunReport
            Per-scenario results
        """
        if paths is None:
            configured = self.config["features"]
            paths = [configured] if isinstance(configured, str) else configured

        tag_filter = normalize_tags(tags if tags is not None else self.config.get("tags"))
        features = self.load_features(self.discover(paths))
        report = RunReport(dry_run=dry_run)
        started = time.monotonic()

        for feature in features:
            for scenario in feature.walk_scenarios():
                if tag_filter and not matches_tags(scenario.effective_tags, tag_filter):
                    logger.debug("Skipping %s (tag filter)", scenario.name)
                    continue

                report.scenarios.append(self.run_scenario(feature, scenario, dry_run))

        report.duration = time.monotonic() - started
        return report

    def run_scenario(
        self, feature: Feature, scenario: Scenario, dry_run: bool = False
    ) -> ScenarioResult:
        """Resolve and execute one scenario inside its own browser session.

        Steps are resolved up front: an ambiguous or unbound step fails the
        scenario before any session starts. Teardown runs on every exit path
        once a session was started.
        """
        steps: list[Step] = list(scenario.all_steps)
        result = ScenarioResult(
            feature=feature.name,
            name=scenario.name,
            location=f"{scenario.filename}:{scenario.line}",
            tags=sorted(str(tag) for tag in scenario.effective_tags),
            steps=[StepResult(keyword=step.keyword, text=step.name) for step in steps],
            dry_run=dry_run,
        )
        started = time.monotonic()
        logger.info("Scenario: %s", scenario.name)

        resolved = self._resolve_steps(steps, result)

        if resolved is None or dry_run:
            result.duration = time.monotonic() - started
            return result

        try:
            with self.lifecycle.session() as ctx:
                self._execute_steps(ctx, resolved, result)
        except SessionStartError as e:
            logger.error("Could not start browser for %s: %s", scenario.name, e)
            result.fail(e)

        result.duration = time.monotonic() - started
        return result

    def _resolve_steps(
        self, steps: list[Step], result: ScenarioResult
    ) -> list[ResolvedStep] | None:
        resolved: list[ResolvedStep] = []

        for step, step_result in zip(steps, result.steps):
            try:
                resolved.append(self.registry.resolve(step.step_type, step.name))
            except AmbiguousOrUnboundStepError as e:
                logger.error("%s (%s:%s)", e, step.filename, step.line)
                step_result.fail(e)
                result.fail(e)
                return None

            if result.dry_run:
                step_result.status = StepStatus.UNTESTED

        return resolved

    def _execute_steps(
        self,
        ctx: ScenarioContext,
        resolved: list[ResolvedStep],
        result: ScenarioResult,
    ) -> None:
        for resolved_step, step_result in zip(resolved, result.steps):
            started = time.monotonic()

            try:
                resolved_step.run(ctx)
            except Exception as e:
                step_result.duration = time.monotonic() - started
                step_result.fail(e)
                result.fail(e)
                logger.error(
                    "Step failed: %s %s [%s] %s",
                    step_result.keyword,
                    step_result.text,
                    step_result.error_kind,
                    e,
                )
                return

            step_result.duration = time.monotonic() - started
            step_result.status = StepStatus.PASSED
            logger.debug("Step passed: %s %s", step_result.keyword, step_result.text)
