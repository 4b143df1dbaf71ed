"""Tests for concurrent field extraction.

Mocking strategy:
- The Playwright ``Page`` comes from the ``make_page`` fixture in
  ``conftest.py``: ``locator(selector).first`` has ``AsyncMock`` ``wait_for``
  and ``text_content``.  A missing element is simulated by making
  ``wait_for`` raise Playwright's ``TimeoutError``.
- No browser is launched.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from clipscrape.scraper.extractor import extract_fields
from clipscrape.scraper.models import LocatorTimeoutError, RawFieldSet
from clipscrape.scraper.schema import FIELDS, FieldSpec, get_field


# ---------------------------------------------------------------------------
# schema
# ---------------------------------------------------------------------------

class TestSchema:
    def test_eleven_fields_in_order(self, page_text) -> None:
        assert [f.name for f in FIELDS] == list(page_text)

    def test_only_skill_is_optional(self) -> None:
        assert [f.name for f in FIELDS if f.optional] == ["skill"]

    def test_get_field_unknown_name(self) -> None:
        with pytest.raises(KeyError):
            get_field("price")


# ---------------------------------------------------------------------------
# extract_fields
# ---------------------------------------------------------------------------

class TestExtractFields:
    async def test_all_fields_resolved_in_schema_order(self, make_page, page_text) -> None:
        raw = await extract_fields(make_page())
        assert isinstance(raw, RawFieldSet)
        assert raw.values() == list(page_text.values())

    async def test_waits_for_attached_with_timeout_in_ms(self, make_page) -> None:
        page = make_page()
        calls: list = []
        original = page.locator.side_effect

        def recording_locator(selector: str) -> MagicMock:
            loc = original(selector)
            calls.append(loc.first.wait_for)
            return loc

        page.locator.side_effect = recording_locator
        await extract_fields(page, timeout=5)

        assert len(calls) == 11
        for wait_for in calls:
            wait_for.assert_awaited_once_with(state="attached", timeout=5000)

    async def test_missing_skill_becomes_empty_string(self, make_page) -> None:
        raw = await extract_fields(make_page(missing={"skill"}))
        assert raw["skill"] == ""
        assert raw["title"] == "Python for Everybody"

    async def test_missing_required_field_raises(self, make_page) -> None:
        with pytest.raises(LocatorTimeoutError) as info:
            await extract_fields(make_page(missing={"rating"}), timeout=5)

        spec = get_field("rating")
        assert info.value.selector == spec.selector
        assert str(info.value) == f"Couldn't find {spec.selector}. Timed out after 5 seconds."

    async def test_none_text_content_is_empty_string(self, make_page, page_text) -> None:
        page_text["rating"] = None
        raw = await extract_fields(make_page(texts=page_text))
        assert raw["rating"] == ""

    async def test_lookups_run_concurrently(self) -> None:
        """Every lookup is started before any of them finishes."""
        started = 0
        release = asyncio.Event()
        fields = (FieldSpec("a", "#a"), FieldSpec("b", "#b"), FieldSpec("c", "#c"))

        async def wait_for(**kwargs) -> None:
            nonlocal started
            started += 1
            if started == len(fields):
                release.set()
            await asyncio.wait_for(release.wait(), timeout=1)

        def locator(selector: str) -> MagicMock:
            loc = MagicMock()
            loc.first.wait_for = wait_for
            loc.first.text_content = AsyncMock(return_value=selector)
            return loc

        page = MagicMock()
        page.locator.side_effect = locator

        raw = await extract_fields(page, fields=fields, timeout=1)
        assert raw.values() == ["#a", "#b", "#c"]

    async def test_default_timeout_from_settings(self, make_page, monkeypatch) -> None:
        monkeypatch.setattr("clipscrape.scraper.extractor.settings.locator_timeout", 2.5)
        with pytest.raises(LocatorTimeoutError) as info:
            await extract_fields(make_page(missing={"title"}))
        assert info.value.timeout == 2.5
        assert "Timed out after 2.5 seconds" in str(info.value)

    async def test_optional_field_recovers_from_any_lookup_error(self, make_page) -> None:
        page = make_page()
        original = page.locator.side_effect
        skill_selector = get_field("skill").selector

        def locator(selector: str) -> MagicMock:
            loc = original(selector)
            if selector == skill_selector:
                loc.first.wait_for = AsyncMock(side_effect=PlaywrightError("Target closed"))
            return loc

        page.locator.side_effect = locator
        raw = await extract_fields(page)
        assert raw["skill"] == ""
        assert raw["rating"] == "4.6"

    async def test_required_field_lookup_error_propagates(self, make_page) -> None:
        page = make_page()
        original = page.locator.side_effect
        rating_selector = get_field("rating").selector

        def locator(selector: str) -> MagicMock:
            loc = original(selector)
            if selector == rating_selector:
                loc.first.text_content = AsyncMock(side_effect=PlaywrightError("Target closed"))
            return loc

        page.locator.side_effect = locator
        with pytest.raises(PlaywrightError):
            await extract_fields(page)

    async def test_failure_cancels_pending_lookups(self) -> None:
        """Once a required field fails, no other lookup keeps using the tab."""
        cancelled: list[str] = []
        never = asyncio.Event()

        async def hang(**kwargs) -> None:
            try:
                await never.wait()
            except asyncio.CancelledError:
                cancelled.append("slow")
                raise

        def locator(selector: str) -> MagicMock:
            loc = MagicMock()
            if selector == "#missing":
                loc.first.wait_for = AsyncMock(
                    side_effect=PlaywrightTimeoutError("Timeout 1000ms exceeded.")
                )
            else:
                loc.first.wait_for = hang
            loc.first.text_content = AsyncMock(return_value="")
            return loc

        page = MagicMock()
        page.locator.side_effect = locator
        fields = (FieldSpec("missing", "#missing"), FieldSpec("slow", "#slow"))

        with pytest.raises(LocatorTimeoutError):
            await extract_fields(page, fields=fields, timeout=1)
        assert cancelled == ["slow"]
