"""Browser driver factory.

Driver binaries are resolved by Selenium Manager, which ships with Selenium
and downloads a matching chromedriver/geckodriver/msedgedriver on first use.
"""

from __future__ import annotations

import logging
from typing import Any

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from searchprobe.core.config import parse_window_size
from searchprobe.core.exceptions import SessionStartError

logger = logging.getLogger(__name__)

_BROWSERS: dict[str, dict[str, Any]] = {
    "chrome": {
        "options": webdriver.ChromeOptions,
        "driver": webdriver.Chrome,
        "headless_arg": "--headless=new",
    },
    "firefox": {
        "options": webdriver.FirefoxOptions,
        "driver": webdriver.Firefox,
        "headless_arg": "-headless",
    },
    "edge": {
        "options": webdriver.EdgeOptions,
        "driver": webdriver.Edge,
        "headless_arg": "--headless=new",
    },
}


def build_options(browser: str, headless: bool) -> Any:
    """Create browser options for the requested browser.

    Parameters
    ----------
    browser : str
        Browser name (chrome, firefox, edge)
    headless : bool
        Run without a visible window

    Returns
    -------
    Any
        Selenium options object for the browser

    Raises
    ------
    ValueError
        If the browser is not supported
    """
    entry = _BROWSERS.get(browser.lower())

    if entry is None:
        raise ValueError(
            f"Unknown browser: {browser}. Supported browsers: {sorted(_BROWSERS)}"
        )

    options = entry["options"]()

    if headless:
        options.add_argument(entry["headless_arg"])

    return options


def create_driver(config: dict[str, Any]) -> WebDriver:
    """Launch a new browser session from configuration.

    Parameters
    ----------
    config : dict[str, Any]
        Merged configuration with browser, headless, page_load_timeout
        and window_size keys

    Returns
    -------
    WebDriver
        A live Selenium driver

    Raises
    ------
    ValueError
        If the browser is not supported
    SessionStartError
        If the driver binary cannot be resolved or the browser fails to launch
    """
    browser = config["browser"].lower()
    options = build_options(browser, config.get("headless", False))
    driver_class = _BROWSERS[browser]["driver"]

    logger.debug("Launching %s (headless=%s)", browser, config.get("headless", False))

    try:
        driver = driver_class(options=options)
    except (WebDriverException, OSError) as e:
        raise SessionStartError(f"Failed to launch {browser}: {e}") from e

    try:
        driver.set_page_load_timeout(config["page_load_timeout"])

        if config.get("window_size"):
            width, height = parse_window_size(config["window_size"])
            driver.set_window_size(width, height)
    except (WebDriverException, ValueError) as e:
        driver.quit()
        raise SessionStartError(f"Failed to configure {browser} session: {e}") from e

    logger.info("Started %s session %s", browser, getattr(driver, "session_id", ""))

    return driver
