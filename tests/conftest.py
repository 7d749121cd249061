"""Pytest configuration and fixtures for searchprobe tests."""

import os
import sys
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from searchprobe.core.config import ConfigLoader  # noqa: E402
from tests.fakes import (  # noqa: E402
    EMPTY_HOMEPAGE_URL,
    HOMEPAGE_URL,
    FakeDriverFactory,
    FakePage,
)


@pytest.fixture(autouse=True)
def isolate_config_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Ensure SEARCHPROBE_CONFIG and SEARCHPROBE_DEBUG do not leak into tests.

    Also runs each test from its temporary directory so a ``searchprobe.yaml``
    in the invoking directory is not picked up.

    Yields
    ------
    None
        Control back to test after clearing the variables
    """
    saved = {
        name: os.environ.pop(name, None)
        for name in ("SEARCHPROBE_CONFIG", "SEARCHPROBE_DEBUG")
    }
    monkeypatch.chdir(tmp_path)

    yield

    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def probe_config() -> dict[str, Any]:
    """Merged configuration with short waits, pointing at the fake homepage.

    Returns
    -------
    dict[str, Any]
        Configuration accepted by ConfigLoader.validate_config
    """
    config = ConfigLoader().get_profile_config({"defaults": {}})
    config.update(
        {
            "homepage_url": HOMEPAGE_URL,
            "wait_timeout": 0.2,
            "poll_frequency": 0.05,
        }
    )
    return config


@pytest.fixture
def pages() -> dict[str, FakePage]:
    return {
        HOMEPAGE_URL: FakePage(title="Search Example"),
        EMPTY_HOMEPAGE_URL: FakePage(title="Nothing Here", has_search_input=False),
    }


@pytest.fixture
def driver_factory(pages: dict[str, FakePage]) -> FakeDriverFactory:
    return FakeDriverFactory(pages, results_title="Selenium - Search Results")


@pytest.fixture
def write_feature(tmp_path: Path):
    """Return a helper writing a feature file under a temporary directory.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory path

    Returns
    -------
    Callable[[str, str], Path]
        Function taking file name and Gherkin text, returning the file path
    """
    features_dir = tmp_path / "features"
    features_dir.mkdir()

    def _write(name: str, text: str) -> Path:
        path = features_dir / name
        path.write_text(text)
        return path

    return _write
