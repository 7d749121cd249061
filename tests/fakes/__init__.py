"""Test fake implementations for dependency injection testing."""

from tests.fakes.fake_webdriver import (
    EMPTY_HOMEPAGE_URL,
    HOMEPAGE_URL,
    FakeDriverFactory,
    FakePage,
    FakeWebDriver,
    FakeWebElement,
)

__all__ = [
    "EMPTY_HOMEPAGE_URL",
    "HOMEPAGE_URL",
    "FakeDriverFactory",
    "FakePage",
    "FakeWebDriver",
    "FakeWebElement",
]
