"""Browser session lifecycle, one session per scenario."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from searchprobe.browser import create_driver
from searchprobe.constants import SessionState
from searchprobe.core.exceptions import SessionAlreadyActiveError, SessionStartError
from searchprobe.pages.search_page import SearchPage

logger = logging.getLogger(__name__)


@dataclass
class ScenarioContext:
    """Everything a step binding may touch during one scenario.

    Attributes
    ----------
    search_page : SearchPage
        Page object holding the live driver
    homepage_url : str
        URL opened by the homepage step
    config : dict[str, Any]
        Merged configuration the session was started with
    """

    search_page: SearchPage
    homepage_url: str
    config: dict[str, Any]

    @property
    def driver(self) -> WebDriver:
        """Live browser session; raises SessionClosedError once stopped."""
        return self.search_page.driver


class SessionLifecycle:
    """Create and tear down the browser session for a scenario.

    Parameters
    ----------
    config : dict[str, Any]
        Merged configuration (browser, timeouts, homepage_url)
    driver_factory : Callable[[dict[str, Any]], WebDriver] | None
        Factory launching a driver from configuration. Defaults to
        :func:`searchprobe.browser.create_driver`.
    """

    def __init__(
        self,
        config: dict[str, Any],
        driver_factory: Callable[[dict[str, Any]], WebDriver] | None = None,
    ) -> None:
        self.config = config
        self._driver_factory = driver_factory or create_driver
        self._state = SessionState.UNINITIALIZED
        self._context: ScenarioContext | None = None
        self.sessions_started = 0
        self.sessions_stopped = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def context(self) -> ScenarioContext | None:
        return self._context

    def start(self) -> ScenarioContext:
        """Launch a browser session and a fresh page object.

        Returns
        -------
        ScenarioContext
            Context to pass to every step of the scenario

        Raises
        ------
        SessionAlreadyActiveError
            If a session is already live
        SessionStartError
            If the driver could not be acquired or launched
        """
        if self._state == SessionState.ACTIVE:
            raise SessionAlreadyActiveError(
                "A browser session is already active; stop it before starting another"
            )

        try:
            driver = self._driver_factory(self.config)
        except SessionStartError:
            raise
        except (WebDriverException, OSError, ValueError) as e:
            raise SessionStartError(f"Failed to start browser session: {e}") from e

        search_page = SearchPage(
            driver,
            timeout=self.config["wait_timeout"],
            poll_frequency=self.config["poll_frequency"],
        )
        self._context = ScenarioContext(
            search_page=search_page,
            homepage_url=self.config["homepage_url"],
            config=self.config,
        )
        self._state = SessionState.ACTIVE
        self.sessions_started += 1
        logger.debug("Browser session %d started", self.sessions_started)

        return self._context

    def stop(self) -> None:
        """Quit the live session, if any, and release its page object.

        Safe to call when no session exists. A failure while quitting the
        browser is logged and does not propagate, so it never replaces the
        error that ended the scenario.
        """
        if self._context is None:
            logger.debug("No active browser session to stop")
            return

        context = self._context
        self._context = None
        driver = context.driver
        context.search_page.release()

        try:
            driver.quit()
        except (WebDriverException, OSError) as e:
            logger.warning("Error quitting browser session: %s", e)
        finally:
            self._state = SessionState.TERMINATED
            self.sessions_stopped += 1
            logger.debug("Browser session %d stopped", self.sessions_stopped)

    @contextmanager
    def session(self) -> Iterator[ScenarioContext]:
        """Run a block inside a browser session that is always torn down.

        Yields
        ------
        ScenarioContext
            Context for the running scenario
        """
        context = self.start()
        try:
            yield context
        finally:
            self.stop()
