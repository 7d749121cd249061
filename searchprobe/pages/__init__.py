"""Page objects exposing user-intent operations."""

from __future__ import annotations

from searchprobe.pages.locators import SearchPageLocators
from searchprobe.pages.search_page import SearchPage

__all__ = ["SearchPage", "SearchPageLocators"]
