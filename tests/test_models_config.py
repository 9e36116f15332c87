"""Tests for configuration and capture models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from snapcompare.models.capture import (
    Artifact,
    CaptureTarget,
    DismissAttempt,
    DismissalResult,
    PassResult,
)
from snapcompare.models.config import (
    DEFAULT_REFERENCE_URL,
    CompareConfig,
    TargetConfig,
    ViewportConfig,
)


class TestViewportConfig:
    """Tests for ViewportConfig model."""

    def test_default_values(self):
        config = ViewportConfig()
        assert config.width == 1920
        assert config.height == 1080
        assert config.name == "desktop"

    def test_as_size(self):
        config = ViewportConfig(width=375, height=667, name="mobile")
        assert config.as_size() == {"width": 375, "height": 667}


class TestCompareConfig:
    """Tests for CompareConfig model."""

    def test_defaults(self):
        config = CompareConfig()
        assert config.reference_url == DEFAULT_REFERENCE_URL
        assert config.local_document == "index.html"
        assert [vp.name for vp in config.viewports] == ["desktop", "mobile"]
        assert config.viewports[1].as_size() == {"width": 375, "height": 667}
        assert config.headless is False
        assert config.slow_mo_ms == 1000
        assert config.report_formats == ["markdown"]

    def test_default_names_match_default_reference(self):
        config = CompareConfig()
        assert config.reference_url == "https://www.liverpoolfc.com/"
        assert config.reference_name == "Liverpool FC"
        assert config.brand_color == "#c8102e"

    def test_with_reference_url_drops_default_branding(self):
        config = CompareConfig().with_reference_url("https://www.example.org/shop")
        assert config.reference_url == "https://www.example.org/shop"
        assert config.reference_name == "www.example.org"
        assert config.brand_color is None

    def test_with_reference_url_keeps_custom_branding(self):
        config = CompareConfig(reference_name="Shop", brand_color="#000000")
        moved = config.with_reference_url("https://shop.example")
        assert moved.reference_name == "Shop"
        assert moved.brand_color == "#000000"

    def test_with_default_reference_url_keeps_branding(self):
        config = CompareConfig().with_reference_url(DEFAULT_REFERENCE_URL)
        assert config.reference_name == "Liverpool FC"
        assert config.brand_color == "#c8102e"

    @pytest.mark.parametrize("field", [
        "viewport_switch_budget_ms", "dismiss_visibility_timeout_ms",
    ])
    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_non_positive_budgets(self, field, value):
        with pytest.raises(ValidationError, match=field):
            CompareConfig(**{field: value})

    def test_rejects_negative_pause(self):
        with pytest.raises(ValidationError):
            CompareConfig(dismiss_pause_ms=-1)
        assert CompareConfig(dismiss_pause_ms=0).dismiss_pause_ms == 0

    @pytest.mark.parametrize("field", ["navigation_timeout_ms", "settle_budget_ms"])
    @pytest.mark.parametrize("value", [0, -500])
    def test_rejects_non_positive_target_timeouts(self, field, value):
        with pytest.raises(ValidationError, match=field):
            TargetConfig(**{field: value})
        with pytest.raises(ValidationError, match=field):
            CompareConfig.model_validate({"reference": {field: value}})
        with pytest.raises(ValidationError, match=field):
            CaptureTarget(kind="remote", location="https://example.com", **{field: value})

    def test_rejects_zero_viewport_size(self):
        with pytest.raises(ValidationError):
            ViewportConfig(width=0)

    def test_default_failure_policies(self):
        config = CompareConfig()
        assert config.reference.on_failure == "abort"
        assert config.generated.on_failure == "continue"

    def test_default_target_timing(self):
        config = CompareConfig()
        assert config.reference.navigation_timeout_ms == 30000
        assert config.reference.settle_budget_ms == 3000
        assert config.reference.dismiss_overlays is True
        assert config.generated.navigation_timeout_ms == 10000
        assert config.generated.settle_budget_ms == 2000
        assert config.generated.dismiss_overlays is False

    def test_rejects_duplicate_viewport_names(self):
        with pytest.raises(ValidationError, match="unique"):
            CompareConfig(viewports=[
                ViewportConfig(name="desktop"),
                ViewportConfig(width=1280, height=720, name="desktop"),
            ])

    def test_rejects_empty_viewports(self):
        with pytest.raises(ValidationError):
            CompareConfig(viewports=[])

    def test_rejects_unknown_failure_policy(self):
        with pytest.raises(ValidationError):
            TargetConfig(on_failure="retry")

    def test_rejects_unknown_report_format(self):
        with pytest.raises(ValidationError, match="pdf"):
            CompareConfig(report_formats=["markdown", "pdf"])

    def test_reference_target(self):
        config = CompareConfig(reference_url="https://example.com")
        target = config.reference_target()
        assert target.kind == "remote"
        assert target.location == "https://example.com"
        assert target.dismiss_overlays is True
        assert target.on_failure == "abort"

    def test_generated_target(self):
        config = CompareConfig(local_document="site/index.html")
        target = config.generated_target()
        assert target.kind == "local"
        assert target.location == "site/index.html"
        assert target.dismiss_overlays is False
        assert target.on_failure == "continue"

    def test_save_and_load(self, tmp_path):
        config = CompareConfig(
            reference_url="https://example.com",
            brand_color="#c8102e",
            report_formats=["markdown", "json"],
        )
        path = tmp_path / "nested" / "compare-config.json"
        config.save(path)

        loaded = CompareConfig.load(path)
        assert loaded.model_dump() == config.model_dump()

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CompareConfig.load(tmp_path / "missing.json")


class TestCaptureTarget:
    """Tests for CaptureTarget URL resolution."""

    def test_remote_url_unchanged(self):
        target = CaptureTarget(kind="remote", location="https://example.com/page")
        assert target.resolve_url() == "https://example.com/page"

    def test_local_relative_path_resolves_against_base(self, tmp_path):
        target = CaptureTarget(kind="local", location="index.html")
        assert target.local_path(tmp_path) == (tmp_path / "index.html").resolve()
        assert target.resolve_url(tmp_path).startswith("file://")
        assert target.resolve_url(tmp_path).endswith("/index.html")

    def test_local_relative_path_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        target = CaptureTarget(kind="local", location="index.html")
        assert target.local_path() == (tmp_path / "index.html").resolve()

    def test_local_absolute_path(self, tmp_path):
        doc = tmp_path / "site" / "index.html"
        target = CaptureTarget(kind="local", location=str(doc))
        assert target.local_path(Path("/elsewhere")) == doc.resolve()


class TestCaptureResults:
    """Tests for artifact and result models."""

    def test_artifact_filename(self):
        artifact = Artifact(
            role="generated", viewport_class="mobile", extent="viewport", timestamp="ts",
        )
        assert artifact.filename == "generated-mobile-viewport-ts.png"

    def test_dismissal_result_lists_dismissed(self):
        result = DismissalResult(attempts=[
            DismissAttempt(selector=".close", outcome="absent"),
            DismissAttempt(selector=".cookie-banner button", outcome="dismissed"),
            DismissAttempt(selector=".fa-close", outcome="failed", error="detached"),
        ])
        assert result.dismissed == [".cookie-banner button"]

    def test_pass_result_succeeded(self):
        assert PassResult(role="reference", target="x").succeeded
        assert not PassResult(role="reference", target="x", error="boom").succeeded
