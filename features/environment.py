"""Behave environment configuration for searchprobe acceptance scenarios."""

import logging
import os

from behave import fixture, use_fixture
from behave.model import Scenario
from behave.runner import Context

from searchprobe.core.config import ConfigLoader
from searchprobe.lifecycle import SessionLifecycle
from searchprobe.logging import configure_logging

logger = logging.getLogger(__name__)


@fixture
def browser_session(context: Context) -> None:
    """Hold one browser session open for the duration of a scenario.

    Behave runs the code after ``yield`` as a scenario cleanup, so the
    browser is quit even when a step fails or raises.
    """
    lifecycle = SessionLifecycle(context.probe_config)

    with lifecycle.session() as probe:
        context.probe = probe
        yield probe


def before_all(context: Context) -> None:
    """Load configuration once for the whole run."""
    configure_logging(verbose=os.environ.get("SEARCHPROBE_VERBOSE") == "1")

    loader = ConfigLoader()
    profile = context.config.userdata.get("profile")
    config = loader.get_profile_config(loader.load_config(), profile)

    for key in ("browser", "homepage_url"):
        if key in context.config.userdata:
            config[key] = context.config.userdata[key]

    if "headless" in context.config.userdata:
        config["headless"] = context.config.userdata.getbool("headless")

    loader.validate_config(config)
    context.probe_config = config
    logger.info("Using %s against %s", config["browser"], config["homepage_url"])


def before_scenario(context: Context, scenario: Scenario) -> None:
    """Start a fresh browser session for each scenario."""
    use_fixture(browser_session, context)
