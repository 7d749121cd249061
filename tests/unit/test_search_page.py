"""Tests for the search page object."""

import pytest

from searchprobe.core.exceptions import (
    ElementNotFoundError,
    SessionClosedError,
    WaitTimeoutError,
)
from searchprobe.pages.search_page import SearchPage
from tests.fakes import EMPTY_HOMEPAGE_URL, HOMEPAGE_URL
from tests.fakes import FakePage, FakeWebDriver


def make_page(driver: FakeWebDriver) -> SearchPage:
    return SearchPage(driver, timeout=0.2, poll_frequency=0.05)


class TestSearch:
    """Tests for typing and submitting a query."""

    def test_types_query_and_submits(self, pages) -> None:
        """Test that the query is submitted and the results page loads."""
        driver = FakeWebDriver(pages, results_title="{query} - Search Results")
        driver.get(HOMEPAGE_URL)

        make_page(driver).search("selenium")

        assert driver.submitted == ["selenium"]
        assert driver.title == "selenium - Search Results"
        assert "search?q=selenium" in driver.current_url

    def test_times_out_when_input_missing(self, pages) -> None:
        """Test that a homepage without the input times out."""
        driver = FakeWebDriver(pages)
        driver.get(EMPTY_HOMEPAGE_URL)

        with pytest.raises(WaitTimeoutError) as exc_info:
            make_page(driver).search("selenium")

        assert exc_info.value.kind == "Timeout"
        assert EMPTY_HOMEPAGE_URL in str(exc_info.value)
        assert driver.submitted == []

    def test_times_out_when_input_hidden(self) -> None:
        """Test that a hidden input times out."""
        driver = FakeWebDriver({HOMEPAGE_URL: FakePage(title="Home", input_visible=False)})
        driver.get(HOMEPAGE_URL)

        with pytest.raises(WaitTimeoutError):
            make_page(driver).search("selenium")

    def test_times_out_when_results_never_load(self) -> None:
        """Test that a submit without navigation times out."""
        driver = FakeWebDriver(
            {HOMEPAGE_URL: FakePage(title="Home", navigates_on_submit=False)}
        )
        driver.get(HOMEPAGE_URL)

        with pytest.raises(WaitTimeoutError, match="Results page"):
            make_page(driver).search("selenium")

        assert driver.submitted == ["selenium"]

    def test_element_not_found_outside_wait(self, pages, monkeypatch) -> None:
        """Test that a vanished element raises ElementNotFoundError."""
        from selenium.common.exceptions import NoSuchElementException

        driver = FakeWebDriver(pages)
        driver.get(HOMEPAGE_URL)
        element = driver.find_element("name", "q")

        def vanish(*value: str) -> None:
            raise NoSuchElementException("gone")

        monkeypatch.setattr(element, "send_keys", vanish)

        with pytest.raises(ElementNotFoundError) as exc_info:
            make_page(driver).search("selenium")

        assert exc_info.value.kind == "ElementNotFound"


class TestRelease:
    """Tests for pages whose session has stopped."""

    def test_search_after_release_raises(self, pages) -> None:
        """Test that a released page refuses to search."""
        driver = FakeWebDriver(pages)
        driver.get(HOMEPAGE_URL)
        page = make_page(driver)

        page.release()

        assert page.released
        with pytest.raises(SessionClosedError):
            page.search("selenium")
