"""Configuration models for the snapshot comparison tool."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from snapcompare.models.capture import CaptureTarget

DEFAULT_REFERENCE_URL = "https://www.liverpoolfc.com/"
DEFAULT_REFERENCE_NAME = "Liverpool FC"
DEFAULT_BRAND_COLOR = "#c8102e"


class ViewportConfig(BaseModel):
    width: int = Field(default=1920, gt=0)
    height: int = Field(default=1080, gt=0)
    name: str = "desktop"

    def as_size(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}


class TargetConfig(BaseModel):
    """Navigation and stabilization settings for one capture pass."""
    navigation_timeout_ms: int = Field(default=30000, gt=0)
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = "networkidle"
    settle_budget_ms: int = Field(default=3000, gt=0)
    dismiss_overlays: bool = False
    on_failure: Literal["abort", "continue"] = "abort"


class CompareConfig(BaseModel):
    # Targets
    reference_url: str = DEFAULT_REFERENCE_URL
    reference_name: str = DEFAULT_REFERENCE_NAME
    local_document: str = "index.html"
    generated_name: str = "Generated Website"

    reference: TargetConfig = Field(
        default_factory=lambda: TargetConfig(
            navigation_timeout_ms=30000,
            settle_budget_ms=3000,
            dismiss_overlays=True,
            on_failure="abort",
        )
    )
    generated: TargetConfig = Field(
        default_factory=lambda: TargetConfig(
            navigation_timeout_ms=10000,
            settle_budget_ms=2000,
            dismiss_overlays=False,
            on_failure="continue",
        )
    )

    # Capture
    viewports: list[ViewportConfig] = Field(
        default_factory=lambda: [
            ViewportConfig(width=1920, height=1080, name="desktop"),
            ViewportConfig(width=375, height=667, name="mobile"),  # iPhone SE
        ]
    )
    viewport_switch_budget_ms: int = Field(default=2000, gt=0)
    output_dir: str = "."

    # Overlay dismissal
    dismiss_visibility_timeout_ms: int = Field(default=2000, gt=0)
    dismiss_pause_ms: int = Field(default=1000, ge=0)

    # Browser
    headless: bool = False
    slow_mo_ms: int = Field(default=1000, ge=0)
    user_agent: Optional[str] = None

    # Reporting
    report_formats: list[str] = Field(default_factory=lambda: ["markdown"])
    brand_color: Optional[str] = DEFAULT_BRAND_COLOR

    @field_validator("viewports")
    @classmethod
    def unique_viewport_names(cls, v: list[ViewportConfig]) -> list[ViewportConfig]:
        if not v:
            raise ValueError("At least one viewport is required")
        names = [vp.name for vp in v]
        if len(set(names)) != len(names):
            raise ValueError(f"Viewport names must be unique: {names}")
        return v

    @field_validator("report_formats")
    @classmethod
    def known_report_formats(cls, v: list[str]) -> list[str]:
        unknown = set(v) - {"markdown", "json"}
        if unknown:
            raise ValueError(f"Unknown report formats: {sorted(unknown)}")
        return v

    def with_reference_url(self, url: str) -> "CompareConfig":
        """Return a copy pointed at ``url``.

        The built-in Liverpool FC name and brand color only describe the
        default URL, so they are replaced by the host name and no color when
        the reference moves elsewhere. Names and colors set by the user stay.
        """
        update: dict = {"reference_url": url}
        if url != DEFAULT_REFERENCE_URL:
            if self.reference_name == DEFAULT_REFERENCE_NAME:
                update["reference_name"] = urlparse(url).hostname or url
            if self.brand_color == DEFAULT_BRAND_COLOR:
                update["brand_color"] = None
        return self.model_copy(update=update)

    def reference_target(self) -> CaptureTarget:
        return CaptureTarget(
            kind="remote",
            location=self.reference_url,
            **self.reference.model_dump(),
        )

    def generated_target(self) -> CaptureTarget:
        return CaptureTarget(
            kind="local",
            location=self.local_document,
            **self.generated.model_dump(),
        )

    @classmethod
    def load(cls, path: str | Path) -> "CompareConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
