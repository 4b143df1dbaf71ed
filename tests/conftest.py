"""Shared fixtures: a fake Playwright page serving a typical course landing page."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from clipscrape.scraper.schema import FIELDS

PAGE_TEXT = {
    "title": "Python for Everybody",
    "duration": "3.5 hours on-demand video",
    "skill": "Python",
    "rating": "4.6",
    "rating_count": "(1,234 ratings)",
    "students": "12,345 students",
    "last_updated": "Last updated 3/2024",
    "instructor_rating": "4.7 Instructor Rating",
    "instructor_reviews": "56,789 Reviews",
    "instructor_students": "234,567 Students",
    "instructor_courses": "12 Courses",
}


def _fake_page(missing=frozenset(), texts: dict | None = None) -> MagicMock:
    """Return a fake page; field names in *missing* never appear.

    ``page.locator(selector).first`` has ``AsyncMock`` ``wait_for`` and
    ``text_content``; a missing element makes ``wait_for`` raise Playwright's
    ``TimeoutError``.
    """
    texts = PAGE_TEXT if texts is None else texts
    by_selector = {spec.selector: spec.name for spec in FIELDS}

    def locator(selector: str) -> MagicMock:
        name = by_selector[selector]
        first = MagicMock()
        if name in missing:
            first.wait_for = AsyncMock(
                side_effect=PlaywrightTimeoutError("Timeout 5000ms exceeded.")
            )
        else:
            first.wait_for = AsyncMock(return_value=None)
        first.text_content = AsyncMock(return_value=texts.get(name))
        loc = MagicMock()
        loc.first = first
        return loc

    page = MagicMock()
    page.locator.side_effect = locator
    return page


@pytest.fixture
def page_text() -> dict:
    return dict(PAGE_TEXT)


@pytest.fixture
def make_page():
    """Factory fixture: ``make_page(missing={"skill"})``."""
    return _fake_page
