"""Best-effort dismissal of cookie banners, modals and promo overlays."""

from __future__ import annotations

import logging

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from snapcompare.models.capture import DismissAttempt, DismissalResult

logger = logging.getLogger(__name__)

# Ordered: cookie/consent banners first since they appear first on load.
POPUP_SELECTORS: list[str] = [
    # Cookie banners
    '[data-testid="cookie-banner"] button',
    ".cookie-banner button",
    "#cookie-banner button",
    ".cookie-consent button",
    '[aria-label*="Accept"]',
    '[aria-label*="Close"]',
    'button[data-dismiss="modal"]',
    ".modal-close",
    ".close",
    ".btn-close",
    # Newsletter / promotional pop-ups
    ".newsletter-popup .close",
    ".promo-popup .close",
    ".popup-close",
    '[data-testid="close-button"]',
    '[data-testid="modal-close"]',
    # Generic text-matched buttons
    'button:has-text("Close")',
    'button:has-text("Accept")',
    'button:has-text("Got it")',
    'button:has-text("OK")',
    'button:has-text("Dismiss")',
    # Icon-font close glyphs
    ".fa-times",
    ".fa-close",
]


async def _try_dismiss(
    page: Page, selector: str, visibility_timeout_ms: int, pause_ms: int,
) -> DismissAttempt:
    try:
        element = page.locator(selector).first
        try:
            await element.wait_for(state="visible", timeout=visibility_timeout_ms)
        except PlaywrightTimeoutError:
            return DismissAttempt(selector=selector, outcome="absent")

        logger.info("Found popup with selector: %s", selector)
        await element.click(timeout=visibility_timeout_ms)
        await page.wait_for_timeout(pause_ms)
        logger.info("Closed popup: %s", selector)
        return DismissAttempt(selector=selector, outcome="dismissed")
    except Exception as e:
        logger.debug("Dismissal via %s failed: %s", selector, e)
        return DismissAttempt(selector=selector, outcome="failed", error=str(e))


async def dismiss_transient_ui(
    page: Page,
    visibility_timeout_ms: int = 2000,
    pause_ms: int = 1000,
    selectors: list[str] | None = None,
) -> DismissalResult:
    """Try every dismissal selector in order, then press Escape once.

    Each selector gets a bounded visibility wait; visible matches are clicked
    followed by a short pause for the closing animation. Nothing here raises:
    per-selector problems are recorded as ``absent`` or ``failed`` attempts.
    """
    logger.info("Checking for and closing pop-ups...")
    result = DismissalResult()

    for selector in selectors if selectors is not None else POPUP_SELECTORS:
        attempt = await _try_dismiss(page, selector, visibility_timeout_ms, pause_ms)
        logger.debug("Dismissal attempt %s -> %s", selector, attempt.outcome)
        result.attempts.append(attempt)

    # Catch-all for modals no selector matched
    try:
        await page.keyboard.press("Escape")
        result.escape_pressed = True
        await page.wait_for_timeout(pause_ms)
    except Exception as e:
        logger.debug("Escape fallback failed: %s", e)

    logger.info("Pop-up handling complete (%d dismissed)", len(result.dismissed))
    return result
