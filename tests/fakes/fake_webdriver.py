"""Fake Selenium WebDriver for testing with dependency injection."""

import logging
from dataclasses import dataclass

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    WebDriverException,
)

logger = logging.getLogger(__name__)

HOMEPAGE_URL = "https://search.example/"
EMPTY_HOMEPAGE_URL = "https://empty.example/"


@dataclass
class FakePage:
    """A page the fake browser can display.

    Parameters
    ----------
    title : str
        Document title
    has_search_input : bool
        Whether an element with ``name="q"`` exists
    input_visible : bool
        Whether that element is displayed
    navigates_on_submit : bool
        Whether submitting the input loads a results page
    """

    title: str
    has_search_input: bool = True
    input_visible: bool = True
    navigates_on_submit: bool = True


class FakeWebElement:
    """Fake search input element.

    Becomes stale once its form is submitted and the results page loads,
    like a real element after navigation.
    """

    def __init__(self, driver: "FakeWebDriver", page: FakePage) -> None:
        self.driver = driver
        self.page = page
        self.typed = ""
        self.stale = False

    def _check_stale(self) -> None:
        if self.stale:
            raise StaleElementReferenceException("element is not attached to the page")

    def is_displayed(self) -> bool:
        self._check_stale()
        return self.page.input_visible

    def is_enabled(self) -> bool:
        self._check_stale()
        return True

    def send_keys(self, *value: str) -> None:
        self._check_stale()
        self.typed += "".join(value)

    def submit(self) -> None:
        self._check_stale()
        self.driver.submitted.append(self.typed)

        if self.page.navigates_on_submit:
            self.stale = True
            self.driver.show_results(self.typed)


class FakeWebDriver:
    """Fake WebDriver serving canned pages.

    Parameters
    ----------
    pages : dict[str, FakePage]
        Pages by URL
    results_title : str
        Title template of the results page, formatted with ``query``
    """

    def __init__(
        self,
        pages: dict[str, FakePage] | None = None,
        results_title: str = "{query} - Search Results",
    ) -> None:
        self.pages = pages or {}
        self.results_title = results_title
        self.current_url = "about:blank"
        self.title = ""
        self.visited: list[str] = []
        self.submitted: list[str] = []
        self.quit_calls = 0
        self.session_id = f"fake-{id(self):x}"
        self._element: FakeWebElement | None = None

    def get(self, url: str) -> None:
        if self.quit_calls:
            raise WebDriverException("invalid session id")

        self.visited.append(url)
        self.current_url = url
        page = self.pages.get(url, FakePage(title="Not Found", has_search_input=False))
        self.title = page.title
        self._element = FakeWebElement(self, page) if page.has_search_input else None

    def show_results(self, query: str) -> None:
        self.current_url = f"{self.current_url.rstrip('/')}/search?q={query}"
        self.title = self.results_title.format(query=query)
        self._element = None

    def find_element(self, by: str = "id", value: str | None = None) -> FakeWebElement:
        if (by, value) == ("name", "q") and self._element is not None:
            return self._element

        raise NoSuchElementException(f"Unable to locate element: {by}={value}")

    def quit(self) -> None:
        self.quit_calls += 1
        logger.info("Fake browser session %s quit", self.session_id)


class FakeDriverFactory:
    """Callable driver factory recording every driver it creates.

    Parameters
    ----------
    pages : dict[str, FakePage] | None
        Pages served by every created driver
    results_title : str
        Results page title template
    fail_with : Exception | None
        Raised instead of creating a driver, to simulate launch failures
    """

    def __init__(
        self,
        pages: dict[str, FakePage] | None = None,
        results_title: str = "{query} - Search Results",
        fail_with: Exception | None = None,
    ) -> None:
        self.pages = pages or {}
        self.results_title = results_title
        self.fail_with = fail_with
        self.drivers: list[FakeWebDriver] = []
        self.configs: list[dict] = []

    def __call__(self, config: dict) -> FakeWebDriver:
        self.configs.append(config)

        if self.fail_with is not None:
            raise self.fail_with

        driver = FakeWebDriver(self.pages, self.results_title)
        self.drivers.append(driver)
        return driver

    @property
    def quit_count(self) -> int:
        return sum(driver.quit_calls for driver in self.drivers)
