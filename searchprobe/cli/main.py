"""CLI entry point for searchprobe."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import fire

from searchprobe.bindings import registry as default_registry
from searchprobe.cli.parsing import apply_cli_overrides
from searchprobe.constants import DEBUG_ENV_VAR
from searchprobe.core.config import ConfigLoader
from searchprobe.logging import configure_logging
from searchprobe.reporting import emit_summary, write_json_report
from searchprobe.results import RunReport
from searchprobe.runner import ScenarioRunner

logger = logging.getLogger(__name__)


class SearchProbeCLI:
    """Run browser acceptance scenarios from the command line.

    Parameters
    ----------
    runner_factory : Callable[..., ScenarioRunner] | None
        Optional factory for the scenario runner. If None, uses ScenarioRunner.
    config_loader : ConfigLoader | None
        Optional configuration loader. If None, uses ConfigLoader.
    """

    def __init__(
        self,
        runner_factory: Callable[..., ScenarioRunner] | None = None,
        config_loader: ConfigLoader | None = None,
    ) -> None:
        self._runner_factory = runner_factory or ScenarioRunner
        self._config_loader = config_loader or ConfigLoader()

    def _build_config(
        self, config: str | None, profile: str | None, **overrides: Any
    ) -> dict[str, Any]:
        loaded = self._config_loader.load_config(config)
        merged = self._config_loader.get_profile_config(loaded, profile)
        apply_cli_overrides(merged, **overrides)
        self._config_loader.validate_config(merged)
        return merged

    def execute(
        self,
        *paths: str,
        config: str | None = None,
        profile: str | None = None,
        dry_run: bool = False,
        tags: str | list[str] | tuple[str, ...] | None = None,
        browser: str | None = None,
        headless: str | bool | None = None,
        homepage_url: str | None = None,
        wait_timeout: float | None = None,
        report: str | None = None,
    ) -> RunReport:
        """Run scenarios and write the report without exiting.

        Parameters
        ----------
        *paths : str
            Feature files or directories; defaults to the configured features
        config : str | None
            Path to YAML configuration file
        profile : str | None
            Name of a profile from the configuration file
        dry_run : bool
            Resolve steps only, without starting a browser
        tags : str | list[str] | tuple[str, ...] | None
            Tag filter, e.g. ``smoke`` or ``~wip``
        browser : str | None
            Browser override (chrome, firefox, edge)
        headless : str | bool | None
            Run the browser without a window
        homepage_url : str | None
            Homepage override
        wait_timeout : float | None
            Element wait budget override in seconds
        report : str | None
            JSON report destination override

        Returns
        -------
        RunReport
            Results of the run
        """
        settings = self._build_config(
            config,
            profile,
            browser=browser,
            headless=headless,
            homepage_url=homepage_url,
            wait_timeout=wait_timeout,
            report=report,
            tags=tags,
            features=list(paths),
        )

        runner = self._runner_factory(settings)
        result = runner.run(dry_run=dry_run)

        write_json_report(result, settings["report_path"])
        emit_summary(result)

        return result

    def run(
        self,
        *paths: str,
        config: str | None = None,
        profile: str | None = None,
        dry_run: bool = False,
        tags: str | list[str] | tuple[str, ...] | None = None,
        browser: str | None = None,
        headless: str | bool | None = None,
        homepage_url: str | None = None,
        wait_timeout: float | None = None,
        report: str | None = None,
        verbose: bool = False,
    ) -> None:
        """Run scenarios and exit with 0 if all passed, 1 otherwise.

        Accepts the same options as :meth:`execute`, plus ``verbose`` for
        debug logging.
        """
        if verbose:
            configure_logging(verbose=True)

        result = self.execute(
            *paths,
            config=config,
            profile=profile,
            dry_run=dry_run,
            tags=tags,
            browser=browser,
            headless=headless,
            homepage_url=homepage_url,
            wait_timeout=wait_timeout,
            report=report,
        )

        sys.exit(result.exit_code)

    def steps(self) -> None:
        """List the registered step bindings."""
        for binding in default_registry:
            logger.info(
                "%-5s %s  # %s",
                binding.step_type,
                binding.pattern,
                binding.location,
                extra={"stream": "stdout"},
            )


def handle_value_error(error: ValueError, debug_mode: bool) -> None:
    """Handle configuration error.

    Parameters
    ----------
    error : ValueError
        The value error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ValueError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Configuration error: {error}", file=sys.stderr)
    sys.exit(2)


def handle_runtime_error(error: RuntimeError, debug_mode: bool) -> None:
    """Handle unexpected runtime error.

    Parameters
    ----------
    error : RuntimeError
        The runtime error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    RuntimeError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Unexpected error: {error}", file=sys.stderr)
    sys.exit(1)


def main() -> None:
    """Entry point for Fire CLI with graceful error handling.

    Notes
    -----
    Fire maps SearchProbeCLI methods to subcommands (``run``, ``steps``) and
    their keyword arguments to flags.
    """
    configure_logging()

    debug_mode = os.environ.get(DEBUG_ENV_VAR) == "1"

    try:
        fire.Fire(SearchProbeCLI())
    except ValueError as e:
        handle_value_error(e, debug_mode)
    except RuntimeError as e:
        handle_runtime_error(e, debug_mode)
