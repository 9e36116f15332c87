"""Comparison orchestrator — reference pass, generated pass, then report."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from playwright.async_api import Browser, BrowserContext
from playwright.async_api import Error as PlaywrightError

from snapcompare.capture.browser_session import create_capture_context, open_browser
from snapcompare.capture.viewport_capture import capture_views
from snapcompare.errors import CaptureError, ComparisonError
from snapcompare.models.capture import CaptureTarget, PassResult, RunSummary
from snapcompare.models.config import CompareConfig
from snapcompare.naming import run_timestamp
from snapcompare.reporter.reporter import Reporter

logger = logging.getLogger(__name__)

_FAILURE_HINTS = {
    "reference": "Check that the reference URL is reachable from this machine.",
    "generated": "Make sure the local document exists and is properly formatted.",
}


async def _close_quietly(context: BrowserContext, role: str) -> None:
    try:
        await context.close()
    except PlaywrightError as e:
        logger.warning("Could not close the %s browser context: %s", role, e)


class ComparisonOrchestrator:
    """Runs both capture passes in one browser session and emits the report."""

    def __init__(self, config: CompareConfig):
        self.config = config
        self.output_dir = Path(config.output_dir)

    def run(self) -> RunSummary:
        """Execute the reference → generated → report sequence."""
        return asyncio.run(self._run())

    async def _run(self) -> RunSummary:
        start = time.time()
        logger.info("=== Starting website design comparison ===")
        logger.info("Reference: %s | Generated: %s",
                    self.config.reference_url, self.config.local_document)

        passes: list[PassResult] = []
        async with open_browser(
            headless=self.config.headless, slow_mo_ms=self.config.slow_mo_ms,
        ) as browser:
            timestamp = run_timestamp()
            try:
                logger.info("--- Taking reference website screenshots ---")
                passes.append(await self._capture_pass(
                    browser, self.config.reference_target(), "reference", timestamp))

                logger.info("--- Taking generated website screenshots ---")
                passes.append(await self._capture_pass(
                    browser, self.config.generated_target(), "generated", timestamp))
            except ComparisonError as e:
                logger.error("Comparison aborted before report generation: %s", e)
                return RunSummary(
                    timestamp=timestamp, aborted=True, error=str(e), passes=passes,
                )

        logger.info("--- Generating comparison report ---")
        reports = Reporter(self.config).generate_reports(timestamp, passes, self.output_dir)

        logger.info("=== Comparison complete in %.1fs ===", time.time() - start)
        return RunSummary(timestamp=timestamp, passes=passes, reports=reports)

    async def _capture_pass(
        self, browser: Browser, target: CaptureTarget, role: str, timestamp: str,
    ) -> PassResult:
        """Capture one target; ``target.on_failure`` decides whether errors end the run."""
        context = None
        try:
            try:
                context = await create_capture_context(
                    browser,
                    viewport=self.config.viewports[0].as_size(),
                    user_agent=self.config.user_agent,
                )
                page = await context.new_page()
            except PlaywrightError as e:
                raise CaptureError(f"Could not open a page for the {role} pass: {e}") from e
            artifacts = await capture_views(
                page,
                target,
                role,
                timestamp,
                self.config.viewports,
                self.output_dir,
                viewport_switch_budget_ms=self.config.viewport_switch_budget_ms,
                dismiss_visibility_timeout_ms=self.config.dismiss_visibility_timeout_ms,
                dismiss_pause_ms=self.config.dismiss_pause_ms,
            )
            return PassResult(role=role, target=target.location, artifacts=artifacts)
        except ComparisonError as e:
            logger.error("Error taking %s screenshots: %s", role, e)
            logger.info(_FAILURE_HINTS.get(role, "Check the target settings in the config."))
            if target.on_failure == "abort":
                raise
            return PassResult(
                role=role, target=target.location, artifacts=e.artifacts, error=str(e),
            )
        finally:
            if context is not None:
                await _close_quietly(context, role)
