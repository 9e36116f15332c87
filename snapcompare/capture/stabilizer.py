"""Page stability detection — bounded polling instead of fixed settle sleeps."""

from __future__ import annotations

import logging
import time

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)

_READINESS_SCRIPT = """() => {
    const root = document.documentElement;
    return {
        ready: document.readyState === 'complete',
        fonts: !document.fonts || document.fonts.status === 'loaded',
        images: Array.from(document.images).every(img => img.complete),
        height: root ? root.scrollHeight : 0,
    };
}"""


async def _read_state(page: Page) -> dict | None:
    try:
        return await page.evaluate(_READINESS_SCRIPT)
    except PlaywrightError as e:
        logger.debug("Readiness check failed: %s", e)
        return None


def _is_ready(state: dict | None) -> bool:
    return bool(state) and all(state.get(k) for k in ("ready", "fonts", "images"))


async def wait_for_visual_stability(
    page: Page,
    budget_ms: int,
    poll_interval_ms: int = 250,
    stable_polls: int = 2,
) -> bool:
    """Wait until the page is loaded and its layout height stops changing.

    The network-idle wait and the polling share ``budget_ms``: whatever the
    idle wait uses is taken off the poll budget. At least ``stable_polls``
    polls always run, so the call can overrun the budget by up to
    ``(stable_polls - 1) * poll_interval_ms``.

    Returns True once ``stable_polls`` consecutive polls report a ready
    document with an unchanged scroll height, False if the budget runs out
    first. Errors from the page itself (e.g. it was closed) propagate.
    """
    budget_ms = max(1, budget_ms)
    poll_interval_ms = max(1, poll_interval_ms)

    started = time.monotonic()
    try:
        await page.wait_for_load_state("networkidle", timeout=budget_ms)
    except PlaywrightTimeoutError:
        logger.debug("Network idle not reached within %dms, polling anyway", budget_ms)
    elapsed_ms = int((time.monotonic() - started) * 1000)

    remaining_ms = max(0, budget_ms - elapsed_ms)
    max_polls = max(stable_polls, remaining_ms // poll_interval_ms)
    last_height = None
    streak = 0

    for poll in range(max_polls):
        state = await _read_state(page)
        if _is_ready(state):
            height = state.get("height")
            streak = streak + 1 if height == last_height else 1
            last_height = height
            if streak >= stable_polls:
                logger.debug("Page stable after %d polls (height=%s)", poll + 1, height)
                return True
        else:
            streak = 0
            last_height = None
        if poll + 1 < max_polls:
            await page.wait_for_timeout(poll_interval_ms)

    logger.debug("Page not stable within %dms budget, capturing anyway", budget_ms)
    return False
