"""Tests for the homepage search step bindings."""

import pytest

from searchprobe.bindings import given_on_homepage, then_title_contains, when_search_for
from searchprobe.core.exceptions import StepAssertionError
from searchprobe.lifecycle import SessionLifecycle


@pytest.fixture
def ctx(probe_config, driver_factory):
    lifecycle = SessionLifecycle(probe_config, driver_factory)
    with lifecycle.session() as context:
        yield context


class TestGivenOnHomepage:
    """Tests for the homepage step."""

    def test_navigates_to_configured_homepage(self, ctx) -> None:
        """Test that the configured homepage is opened."""
        given_on_homepage(ctx)

        assert ctx.driver.visited == [ctx.homepage_url]


class TestWhenSearchFor:
    """Tests for the search step."""

    def test_delegates_to_search_page(self, ctx) -> None:
        """Test that the query goes through the search page."""
        given_on_homepage(ctx)

        when_search_for(ctx, "selenium")

        assert ctx.driver.submitted == ["selenium"]


class TestThenTitleContains:
    """Tests for the title check step."""

    def test_case_insensitive_match(self, ctx) -> None:
        """Test that the title comparison ignores case."""
        ctx.driver.title = "Google"

        then_title_contains(ctx, "GOOGLE")
        then_title_contains(ctx, "goo")

    def test_mismatch_raises_assertion(self, ctx) -> None:
        """Test that a missing term raises StepAssertionError."""
        ctx.driver.title = "selenium - Search Results"

        with pytest.raises(StepAssertionError, match="zzz-not-present") as exc_info:
            then_title_contains(ctx, "zzz-not-present")

        assert isinstance(exc_info.value, AssertionError)
        assert exc_info.value.kind == "AssertionFailed"

    def test_empty_title(self, ctx) -> None:
        """Test that a missing title fails the check."""
        ctx.driver.title = None

        with pytest.raises(StepAssertionError):
            then_title_contains(ctx, "anything")
