"""Global constants for searchprobe.

Values here are shared by the configuration layer, the page objects and the
runner. They describe defaults only; every one of them can be overridden from
the YAML configuration or the command line.
"""

from enum import Enum

DEFAULT_HOMEPAGE_URL = "https://www.google.com"
"""Homepage opened by the "I am on the homepage" step."""

DEFAULT_BROWSER = "chrome"
"""Browser launched when the configuration does not name one."""

SUPPORTED_BROWSERS = ("chrome", "firefox", "edge")
"""Browsers the driver factory knows how to launch."""

DEFAULT_WAIT_TIMEOUT_SECONDS = 10.0
"""Upper bound for element visibility and navigation waits.

This is the only bounded wait in a scenario. Scenarios themselves have no
timeout.
"""

DEFAULT_POLL_FREQUENCY_SECONDS = 0.5
"""Interval between condition checks while waiting on the page."""

DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS = 30.0
"""Time the driver allows a navigation to complete before failing it."""

DEFAULT_FEATURES_PATH = "features"
"""Directory searched recursively for ``.feature`` files."""

DEFAULT_REPORT_PATH = "reports/searchprobe.json"
"""Location of the machine-readable run report."""

DEFAULT_CONFIG_FILE = "searchprobe.yaml"
"""Configuration file read when neither an argument nor env var names one."""

CONFIG_ENV_VAR = "SEARCHPROBE_CONFIG"
"""Environment variable pointing at an alternative configuration file."""

DEBUG_ENV_VAR = "SEARCHPROBE_DEBUG"
"""When set to ``1`` the CLI re-raises errors instead of printing them."""

FEATURE_FILE_SUFFIX = ".feature"


class StepStatus(str, Enum):
    """Outcome of a single step or a whole scenario."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    UNTESTED = "untested"


class SessionState(str, Enum):
    """States of a browser session lifecycle."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    TERMINATED = "terminated"
