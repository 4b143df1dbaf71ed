"""Browser session owning the single tab that every scrape attempt reuses."""

from __future__ import annotations

from playwright.async_api import Browser, Page, Playwright, async_playwright

from clipscrape.config import settings


class BrowserSession:
    """Launch (or attach to) a Chromium browser and hand out one shared tab.

    With ``settings.cdp_url`` set, the session connects to an already-running
    browser over its remote debugging port instead of launching its own.
    """

    def __init__(self, headless: bool | None = None) -> None:
        self.headless = settings.headless if headless is None else headless
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._page: Page | None = None

    @property
    def page(self) -> Page:
        if self._page is None:
            raise RuntimeError("BrowserSession.start() has not been called.")
        return self._page

    async def start(self) -> Page:
        """Start the browser and return the tab used for scraping."""
        if self._page is not None:
            return self._page

        self._playwright = await async_playwright().start()
        chromium = self._playwright.chromium
        if settings.cdp_url:
            print(f"[BROWSER] Connecting to {settings.cdp_url} …")
            self._browser = await chromium.connect_over_cdp(settings.cdp_url)
        else:
            self._browser = await chromium.launch(
                headless=self.headless,
                executable_path=settings.browser_executable,
            )
        self._page = await self._acquire_page(self._browser)
        return self._page

    @staticmethod
    async def _acquire_page(browser: Browser) -> Page:
        """Reuse the browser's first open tab, or open one at the fixed viewport."""
        for context in browser.contexts:
            if context.pages:
                return context.pages[0]

        if browser.contexts:
            page = await browser.contexts[0].new_page()
        else:
            page = await browser.new_page()
        await page.set_viewport_size(settings.viewport)
        return page

    async def navigate(self, url: str) -> None:
        """Load *url* in the shared tab and wait for the ``load`` event.

        Navigation errors (timeouts, DNS failures, …) propagate to the caller.
        """
        await self.page.goto(
            url,
            wait_until="load",
            timeout=settings.navigation_timeout * 1000,
        )

    async def close(self) -> None:
        """Close the browser (or detach from it) and stop the driver."""
        if self._browser is not None:
            await self._browser.close()
        if self._playwright is not None:
            await self._playwright.stop()
        self._browser = None
        self._playwright = None
        self._page = None
