import copy
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from searchprobe.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_BROWSER,
    DEFAULT_CONFIG_FILE,
    DEFAULT_FEATURES_PATH,
    DEFAULT_HOMEPAGE_URL,
    DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS,
    DEFAULT_POLL_FREQUENCY_SECONDS,
    DEFAULT_REPORT_PATH,
    DEFAULT_WAIT_TIMEOUT_SECONDS,
    SUPPORTED_BROWSERS,
)

logger = logging.getLogger(__name__)

WINDOW_SIZE_PATTERN = re.compile(r"^(\d+)x(\d+)$")


class ConfigLoader:
    """Load and merge YAML configuration with defaults."""

    def __init__(self) -> None:
        """Initialize ConfigLoader with built-in defaults."""
        self.BUILT_IN_DEFAULTS = {
            "homepage_url": DEFAULT_HOMEPAGE_URL,
            "browser": DEFAULT_BROWSER,
            "headless": False,
            "wait_timeout": DEFAULT_WAIT_TIMEOUT_SECONDS,
            "poll_frequency": DEFAULT_POLL_FREQUENCY_SECONDS,
            "page_load_timeout": DEFAULT_PAGE_LOAD_TIMEOUT_SECONDS,
            "window_size": None,
            "features": DEFAULT_FEATURES_PATH,
            "report_path": DEFAULT_REPORT_PATH,
            "tags": [],
        }

    def load_config(self, config_path: str | None = None) -> dict[str, Any]:
        """Read the ``defaults``/``profiles`` YAML file.

        The file is looked up as ``config_path``, then ``$SEARCHPROBE_CONFIG``,
        then ``searchprobe.yaml``. Keys under ``vars`` may be referenced from
        anywhere in the file as ``${name}``.

        Returns
        -------
        dict[str, Any]
            Resolved file contents, or ``{"defaults": {}}`` when no file exists

        Raises
        ------
        ValueError
            If the file is not valid YAML or a variable cannot be resolved
        RuntimeError
            If the file exists but cannot be read
        """
        config_file = Path(
            config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE)
        )

        if not config_file.is_file():
            logger.debug("No config file at %s, using built-in defaults", config_file)
            return {"defaults": {}}

        try:
            cfg = OmegaConf.load(config_file)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_file}: {e}") from e
        except OSError as e:
            raise RuntimeError(f"Failed to read config file {config_file}: {e}") from e

        if not cfg:
            return {"defaults": {}}

        for name, value in (cfg.get("vars") or {}).items():
            if name not in cfg:
                cfg[name] = value

        try:
            loaded = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
        except OmegaConfBaseException as e:
            raise ValueError(f"Cannot resolve variables in {config_file}: {e}") from e

        loaded.pop("vars", None)
        logger.debug("Loaded configuration from %s", config_file)
        return loaded

    def get_profile_config(
        self, config: dict[str, Any], profile_name: str | None = None
    ) -> dict[str, Any]:
        """Settings for one run: built-in defaults, then file defaults, then profile.

        Parameters
        ----------
        config : dict[str, Any]
            Output of :meth:`load_config`
        profile_name : str | None
            Profile to apply over the defaults, if any

        Returns
        -------
        dict[str, Any]
            Flat settings dictionary

        Raises
        ------
        ValueError
            If the named profile does not exist
        """
        layers = [config.get("defaults") or {}]

        if profile_name is not None:
            profiles = config.get("profiles") or {}

            if profile_name not in profiles:
                if profiles:
                    hint = f"Available profiles: {list(profiles)}"
                else:
                    hint = "No profiles are defined in the config file."
                raise ValueError(f"Profile '{profile_name}' not found. {hint}")

            layers.append(profiles[profile_name] or {})

        merged = copy.deepcopy(self.BUILT_IN_DEFAULTS)

        for layer in layers:
            for key in layer.keys() - merged.keys():
                logger.warning("Ignoring unknown configuration key '%s'", key)
            merged.update((k, v) for k, v in layer.items() if k in merged)

        return merged

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate configuration has required fields and correct types.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration to validate

        Raises
        ------
        ValueError
            If configuration is invalid
        """
        self._validate_homepage(config)
        self._validate_browser(config)
        self._validate_timeouts(config)
        self._validate_window_size(config)
        self._validate_paths(config)

    def _validate_homepage(self, config: dict[str, Any]) -> None:
        homepage_url = config.get("homepage_url")

        if not homepage_url:
            raise ValueError("homepage_url is required")

        if not isinstance(homepage_url, str):
            raise ValueError("homepage_url must be a string")

        if not homepage_url.startswith(("http://", "https://", "file://")):
            raise ValueError(
                f"homepage_url must be an http(s) or file URL, got '{homepage_url}'"
            )

    def _validate_browser(self, config: dict[str, Any]) -> None:
        browser = config.get("browser")

        if not isinstance(browser, str):
            raise ValueError("browser must be a string")

        if browser.lower() not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unknown browser: {browser}. Supported browsers: {list(SUPPORTED_BROWSERS)}"
            )

        if not isinstance(config.get("headless", False), bool):
            raise ValueError("headless must be a boolean")

    def _validate_timeouts(self, config: dict[str, Any]) -> None:
        """Validate wait and load timeouts.

        Parameters
        ----------
        config : dict[str, Any]
            Configuration to validate

        Raises
        ------
        ValueError
            If a timeout is not a positive number
        """
        for field in ("wait_timeout", "poll_frequency", "page_load_timeout"):
            value = config.get(field)

            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{field} must be a number")

            if value <= 0:
                raise ValueError(f"{field} must be greater than 0")

    def _validate_window_size(self, config: dict[str, Any]) -> None:
        window_size = config.get("window_size")

        if window_size is None:
            return

        if not isinstance(window_size, str) or not WINDOW_SIZE_PATTERN.match(window_size):
            raise ValueError(
                f"window_size must look like WIDTHxHEIGHT (e.g. 1280x800), got '{window_size}'"
            )

    def _validate_paths(self, config: dict[str, Any]) -> None:
        features = config.get("features")

        if isinstance(features, str):
            features = [features]

        if not isinstance(features, list) or not features:
            raise ValueError("features must be a path or a non-empty list of paths")

        for item in features:
            if not isinstance(item, str):
                raise ValueError("features entries must be strings")

        if not isinstance(config.get("report_path"), str):
            raise ValueError("report_path must be a string")

        tags = config.get("tags", [])
        if not isinstance(tags, list):
            raise ValueError("tags must be a list")

        for tag in tags:
            if not isinstance(tag, str):
                raise ValueError("tags entries must be strings")


def parse_window_size(window_size: str) -> tuple[int, int]:
    """Split a ``WIDTHxHEIGHT`` string into integers.

    Parameters
    ----------
    window_size : str
        Window size such as ``1280x800``

    Returns
    -------
    tuple[int, int]
        Width and height in pixels

    Raises
    ------
    ValueError
        If the string does not match ``WIDTHxHEIGHT``
    """
    match = WINDOW_SIZE_PATTERN.match(window_size)

    if match is None:
        raise ValueError(f"Invalid window size: '{window_size}'")

    return int(match.group(1)), int(match.group(2))
