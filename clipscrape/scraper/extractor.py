"""Concurrent text extraction from the loaded landing page."""

from __future__ import annotations

import asyncio
from typing import Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from clipscrape.config import settings
from clipscrape.scraper.models import LocatorTimeoutError, RawFieldSet
from clipscrape.scraper.schema import FIELDS, FieldSpec


async def _read_field(page: Page, spec: FieldSpec, timeout: float) -> str:
    """Wait for *spec*'s element to be attached, then return its text content.

    An optional field resolves to ``""`` on any lookup error; a required one
    raises :class:`LocatorTimeoutError` when it never appears.
    """
    locator = page.locator(spec.selector).first
    try:
        await locator.wait_for(state="attached", timeout=timeout * 1000)
        return await locator.text_content() or ""
    except PlaywrightTimeoutError as exc:
        if spec.optional:
            return ""
        raise LocatorTimeoutError(spec.selector, timeout) from exc
    except PlaywrightError:
        if spec.optional:
            return ""
        raise


async def extract_fields(
    page: Page,
    fields: Sequence[FieldSpec] = FIELDS,
    timeout: float | None = None,
) -> RawFieldSet:
    """Resolve every field of *fields* against *page* **in parallel**.

    Each lookup has its own *timeout* (seconds, default
    ``settings.locator_timeout``).  The first required field to fail fails
    the whole extraction and cancels the lookups still running, so none of
    them outlives the attempt on the shared tab.

    Raises:
        LocatorTimeoutError: If a non-optional element is missing.
    """
    timeout = settings.locator_timeout if timeout is None else timeout
    tasks = [asyncio.ensure_future(_read_field(page, spec, timeout)) for spec in fields]
    try:
        texts = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return RawFieldSet(fields={spec.name: text for spec, text in zip(fields, texts)})
