"""Step bindings for the homepage search workflow.

Each binding receives the :class:`~searchprobe.lifecycle.ScenarioContext` of
the running scenario as its first argument.
"""

from __future__ import annotations

import logging

from searchprobe.bindings.registry import StepRegistry
from searchprobe.core.exceptions import StepAssertionError
from searchprobe.lifecycle import ScenarioContext

logger = logging.getLogger(__name__)

registry = StepRegistry()


@registry.given("I am on the homepage")
def given_on_homepage(ctx: ScenarioContext) -> None:
    logger.debug("Opening %s", ctx.homepage_url)
    ctx.driver.get(ctx.homepage_url)


@registry.when('I search for "{query}"')
def when_search_for(ctx: ScenarioContext, query: str) -> None:
    ctx.search_page.search(query)


@registry.then('the page title should contain "{expected}"')
def then_title_contains(ctx: ScenarioContext, expected: str) -> None:
    """Check the current title contains ``expected``, ignoring case.

    Raises
    ------
    StepAssertionError
        If the substring is absent
    """
    title = ctx.driver.title or ""

    if expected.lower() not in title.lower():
        raise StepAssertionError(
            f'Expected page title to contain "{expected}" (case-insensitive), '
            f'got "{title}"'
        )
