"""Viewport capture — navigate, stabilize and screenshot one target at each viewport."""

from __future__ import annotations

import logging
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from snapcompare.errors import CaptureError, NavigationError
from snapcompare.models.capture import Artifact, CaptureTarget
from snapcompare.models.config import ViewportConfig

from .overlay_dismisser import dismiss_transient_ui
from .stabilizer import wait_for_visual_stability

logger = logging.getLogger(__name__)


async def _navigate(page: Page, target: CaptureTarget) -> None:
    if target.kind == "local":
        path = target.local_path()
        if not path.is_file():
            raise NavigationError(f"Local document not found: {path}")

    url = target.resolve_url()
    logger.info("Navigating to %s...", url)
    try:
        await page.goto(url, wait_until=target.wait_until, timeout=target.navigation_timeout_ms)
    except PlaywrightError as e:
        raise NavigationError(f"Could not load {url}: {e}") from e


async def _resize(page: Page, viewport: ViewportConfig, produced: list[Artifact]) -> None:
    try:
        await page.set_viewport_size(viewport.as_size())
    except PlaywrightError as e:
        raise CaptureError(f"Could not switch to {viewport.name} viewport: {e}", produced) from e


async def _settle(page: Page, budget_ms: int, produced: list[Artifact]) -> None:
    try:
        await wait_for_visual_stability(page, budget_ms=budget_ms)
    except PlaywrightError as e:
        raise CaptureError(f"Page closed while waiting to settle: {e}", produced) from e


async def _screenshot(
    page: Page, artifact: Artifact, output_dir: Path, produced: list[Artifact],
) -> None:
    path = output_dir / artifact.filename
    try:
        await page.screenshot(path=str(path), full_page=artifact.extent == "full")
    except (PlaywrightError, OSError) as e:
        raise CaptureError(f"Screenshot {artifact.filename} failed: {e}", produced) from e
    logger.debug("Saved %s", path)
    produced.append(artifact)


async def capture_views(
    page: Page,
    target: CaptureTarget,
    role: str,
    timestamp: str,
    viewports: list[ViewportConfig],
    output_dir: Path,
    viewport_switch_budget_ms: int = 2000,
    dismiss_visibility_timeout_ms: int = 2000,
    dismiss_pause_ms: int = 1000,
) -> list[Artifact]:
    """Capture full-page and viewport-only screenshots of ``target`` at each viewport.

    The first viewport is set before navigation; the rest are switched to
    in place. Raises NavigationError if the target cannot be loaded and
    CaptureError if a viewport switch, settle wait or screenshot fails
    (carrying the artifacts written so far).
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    produced: list[Artifact] = []

    await _resize(page, viewports[0], produced)
    await _navigate(page, target)

    if target.dismiss_overlays:
        await dismiss_transient_ui(
            page,
            visibility_timeout_ms=dismiss_visibility_timeout_ms,
            pause_ms=dismiss_pause_ms,
        )

    await _settle(page, target.settle_budget_ms, produced)

    for index, viewport in enumerate(viewports):
        if index > 0:
            await _resize(page, viewport, produced)
            await _settle(page, viewport_switch_budget_ms, produced)

        logger.info("Taking %s %s screenshots (%dx%d)...",
                    viewport.name, role, viewport.width, viewport.height)
        for extent in ("full", "viewport"):
            artifact = Artifact(
                role=role, viewport_class=viewport.name, extent=extent, timestamp=timestamp,
            )
            await _screenshot(page, artifact, output_dir, produced)

    logger.info("%s screenshots completed (%d files)", role.capitalize(), len(produced))
    return produced
