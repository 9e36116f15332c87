"""Browser session management — scoped Chromium launch and capture contexts."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)

# Reference sites serve consent walls or bot challenges to obvious automation,
# which would end up in the screenshots.
_STEALTH_INIT_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', { get: () => false });

Object.defineProperty(navigator, 'languages', {
    get: () => ['en-US', 'en'],
});

if (!window.chrome) {
    window.chrome = {};
}
if (!window.chrome.runtime) {
    window.chrome.runtime = {};
}
"""


async def launch_capture_browser(
    playwright: Playwright, headless: bool = False, slow_mo_ms: int = 0,
) -> Browser:
    """Launch Chromium; headed with slow-motion pacing so a human can follow along."""
    return await playwright.chromium.launch(
        headless=headless,
        slow_mo=slow_mo_ms,
        args=[
            "--disable-blink-features=AutomationControlled",
        ],
    )


@asynccontextmanager
async def open_browser(headless: bool = False, slow_mo_ms: int = 0) -> AsyncIterator[Browser]:
    """Yield a launched browser; it is closed on every exit path."""
    async with async_playwright() as p:
        logger.debug("Launching Chromium (headless=%s, slow_mo=%dms)...", headless, slow_mo_ms)
        browser = await launch_capture_browser(p, headless=headless, slow_mo_ms=slow_mo_ms)
        try:
            yield browser
        finally:
            logger.debug("Closing browser")
            await browser.close()


async def create_capture_context(
    browser: Browser,
    viewport: dict,
    user_agent: Optional[str] = None,
) -> BrowserContext:
    """Create a browser context with the stealth patches applied."""
    context = await browser.new_context(
        viewport=viewport,
        user_agent=user_agent or DEFAULT_USER_AGENT,
        locale="en-US",
        extra_http_headers={
            "Accept-Language": "en-US,en;q=0.9",
        },
    )
    await context.add_init_script(_STEALTH_INIT_SCRIPT)
    return context
