"""Centralised locators for the search homepage."""

from __future__ import annotations

from selenium.webdriver.common.by import By


class SearchPageLocators:
    search_input = (By.NAME, "q")
