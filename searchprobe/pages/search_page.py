"""Page object for a homepage with a single search box."""

from __future__ import annotations

import logging

from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from searchprobe.constants import (
    DEFAULT_POLL_FREQUENCY_SECONDS,
    DEFAULT_WAIT_TIMEOUT_SECONDS,
)
from searchprobe.core.exceptions import (
    ElementNotFoundError,
    SessionClosedError,
    WaitTimeoutError,
)
from searchprobe.pages.locators import SearchPageLocators

logger = logging.getLogger(__name__)


class SearchPage:
    """Search box interactions on the configured homepage.

    Parameters
    ----------
    driver : WebDriver
        Live driver owned by the session lifecycle; the page never quits it
    timeout : float
        Seconds to wait for the search input and for the results navigation
    poll_frequency : float
        Seconds between condition checks while waiting
    """

    def __init__(
        self,
        driver: WebDriver,
        timeout: float = DEFAULT_WAIT_TIMEOUT_SECONDS,
        poll_frequency: float = DEFAULT_POLL_FREQUENCY_SECONDS,
    ) -> None:
        self._driver: WebDriver | None = driver
        self.timeout = timeout
        self.poll_frequency = poll_frequency

    @property
    def driver(self) -> WebDriver:
        if self._driver is None:
            raise SessionClosedError("Search page used after its browser session was stopped")
        return self._driver

    @property
    def released(self) -> bool:
        return self._driver is None

    def release(self) -> None:
        """Drop the driver reference once the owning session stops."""
        self._driver = None

    def search(self, query: str) -> None:
        """Type a query into the search box and submit it.

        Parameters
        ----------
        query : str
            Text to search for

        Raises
        ------
        WaitTimeoutError
            If the search input is not visible within the timeout, or the
            results page does not replace the homepage in time
        ElementNotFoundError
            If the driver reports the search input as missing
        SessionClosedError
            If called after the session was stopped
        """
        search_field = self._wait_for_search_input()

        logger.debug("Searching for %r", query)
        try:
            search_field.send_keys(query)
            search_field.submit()
        except NoSuchElementException as e:
            raise ElementNotFoundError(
                f"Search input {SearchPageLocators.search_input} disappeared: {e.msg}"
            ) from e

        self._wait_for_navigation(search_field)

    def _wait(self) -> WebDriverWait:
        return WebDriverWait(self.driver, self.timeout, poll_frequency=self.poll_frequency)

    def _wait_for_search_input(self) -> WebElement:
        locator = SearchPageLocators.search_input

        try:
            return self._wait().until(EC.visibility_of_element_located(locator))
        except TimeoutException as e:
            raise WaitTimeoutError(
                f"Search input {locator} not visible after {self.timeout}s "
                f"on {self.driver.current_url}"
            ) from e
        except NoSuchElementException as e:
            raise ElementNotFoundError(f"Search input {locator} not found: {e.msg}") from e

    def _wait_for_navigation(self, submitted: WebElement) -> None:
        # The old input goes stale once the results page replaces the homepage.
        try:
            self._wait().until(EC.staleness_of(submitted))
        except TimeoutException as e:
            raise WaitTimeoutError(
                f"Results page did not load within {self.timeout}s after submitting"
            ) from e
