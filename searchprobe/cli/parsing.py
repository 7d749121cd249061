"""CLI argument parsing and parameter conversion utilities."""

from __future__ import annotations

from typing import Any


def parse_bool(value: str | bool, name: str) -> bool:
    """Parse a flag given as boolean or "true"/"false" string.

    Parameters
    ----------
    value : str | bool
        Flag value from the command line
    name : str
        Option name for error messages

    Returns
    -------
    bool
        Parsed flag

    Raises
    ------
    ValueError
        If a string value is not "true" or "false"
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        lowered = value.lower()

        if lowered not in ("true", "false"):
            raise ValueError(f"{name} must be 'true' or 'false', got: {value}")

        return lowered == "true"

    raise ValueError(f"Unexpected type for {name}: {type(value)}")


def parse_list(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split a comma-separated option into a list of non-empty strings."""
    if isinstance(value, (list, tuple)):
        items = [str(item) for item in value]
    else:
        items = str(value).split(",")

    return [item.strip() for item in items if item.strip()]


def apply_cli_overrides(
    config: dict[str, Any],
    browser: str | None = None,
    headless: str | bool | None = None,
    homepage_url: str | None = None,
    wait_timeout: float | None = None,
    report: str | None = None,
    tags: str | list[str] | tuple[str, ...] | None = None,
    features: list[str] | None = None,
) -> None:
    """Apply CLI option overrides to merged configuration.

    Parameters
    ----------
    config : dict[str, Any]
        Configuration dictionary to modify in-place
    browser : str | None
        Browser to launch
    headless : str | bool | None
        Run the browser without a window
    homepage_url : str | None
        Homepage opened by the homepage step
    wait_timeout : float | None
        Element wait budget in seconds
    report : str | None
        JSON report destination
    tags : str | list[str] | tuple[str, ...] | None
        Tag filter
    features : list[str] | None
        Feature files or directories
    """
    if browser is not None:
        config["browser"] = browser

    if headless is not None:
        config["headless"] = parse_bool(headless, "headless")

    if homepage_url is not None:
        config["homepage_url"] = homepage_url

    if wait_timeout is not None:
        config["wait_timeout"] = wait_timeout

    if report is not None:
        config["report_path"] = str(report)

    if tags is not None:
        config["tags"] = parse_list(tags)

    if features:
        config["features"] = [str(path) for path in features]


__all__ = ["parse_bool", "parse_list", "apply_cli_overrides"]
