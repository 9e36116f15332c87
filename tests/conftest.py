"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
from playwright.async_api import Browser, BrowserContext, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from snapcompare.models.capture import CaptureTarget
from snapcompare.models.config import CompareConfig, ViewportConfig

TIMESTAMP = "2026-10-19T14-05-33"


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def compare_config(tmp_path: Path) -> CompareConfig:
    """Default config writing into a temporary output directory."""
    return CompareConfig(
        reference_url="https://example.com",
        reference_name="Example Site",
        local_document=str(tmp_path / "index.html"),
        generated_name="Candidate Site",
        brand_color=None,
        output_dir=str(tmp_path / "out"),
        headless=True,
        slow_mo_ms=0,
    )


@pytest.fixture
def viewports() -> list[ViewportConfig]:
    return [
        ViewportConfig(width=1920, height=1080, name="desktop"),
        ViewportConfig(width=375, height=667, name="mobile"),
    ]


@pytest.fixture
def remote_target() -> CaptureTarget:
    return CaptureTarget(
        kind="remote",
        location="https://example.com",
        navigation_timeout_ms=30000,
        settle_budget_ms=3000,
        dismiss_overlays=True,
        on_failure="abort",
    )


@pytest.fixture
def local_document(tmp_path: Path) -> Path:
    path = tmp_path / "index.html"
    path.write_text("<html><body><h1>Candidate</h1></body></html>")
    return path


@pytest.fixture
def local_target(local_document: Path) -> CaptureTarget:
    return CaptureTarget(
        kind="local",
        location=str(local_document),
        navigation_timeout_ms=10000,
        settle_budget_ms=2000,
        dismiss_overlays=False,
        on_failure="continue",
    )


# ============================================================================
# Mock Fixtures
# ============================================================================


def make_locator(visible: bool = False, click_error: Exception | None = None) -> Mock:
    """Create a mock Playwright locator whose ``.first`` is visible or absent."""
    element = Mock()
    if visible:
        element.wait_for = AsyncMock()
    else:
        element.wait_for = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 2000ms exceeded."))
    element.click = AsyncMock(side_effect=click_error)
    locator = Mock()
    locator.first = element
    return locator


def make_mock_page(visible_selectors: dict[str, Mock] | None = None) -> AsyncMock:
    """Create a mock page; selectors not in ``visible_selectors`` resolve to absent locators."""
    locators = visible_selectors or {}
    page = AsyncMock(spec=Page)
    page.url = "https://example.com"
    page.goto = AsyncMock()
    page.screenshot = AsyncMock()
    page.set_viewport_size = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.wait_for_timeout = AsyncMock()
    page.evaluate = AsyncMock(
        return_value={"ready": True, "fonts": True, "images": True, "height": 1200}
    )
    page.locator = Mock(side_effect=lambda selector: locators.get(selector) or make_locator())
    page.keyboard = AsyncMock()
    page.keyboard.press = AsyncMock()
    return page


@pytest.fixture
def mock_page() -> AsyncMock:
    """Create a mock Playwright page with no overlays and a steady layout."""
    return make_mock_page()


@pytest.fixture
def mock_context(mock_page: AsyncMock) -> AsyncMock:
    """Create a mock Playwright browser context."""
    context = AsyncMock(spec=BrowserContext)
    context.new_page = AsyncMock(return_value=mock_page)
    context.close = AsyncMock()
    return context


@pytest.fixture
def mock_browser(mock_context: AsyncMock) -> AsyncMock:
    """Create a mock Playwright browser."""
    browser = AsyncMock(spec=Browser)
    browser.new_context = AsyncMock(return_value=mock_context)
    browser.close = AsyncMock()
    return browser
