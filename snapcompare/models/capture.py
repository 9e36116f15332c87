"""Data structures produced by the capture passes."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from snapcompare.naming import artifact_filename


class CaptureTarget(BaseModel):
    """Where a pass navigates to and how it waits once there."""
    kind: Literal["remote", "local"]
    location: str  # URL for remote, file path for local
    navigation_timeout_ms: int = Field(default=30000, gt=0)
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = "networkidle"
    settle_budget_ms: int = Field(default=3000, gt=0)
    dismiss_overlays: bool = False
    on_failure: Literal["abort", "continue"] = "abort"

    def resolve_url(self, base_dir: Path | None = None) -> str:
        """Return a navigable URL; local paths resolve against ``base_dir`` (cwd by default)."""
        if self.kind == "remote":
            return self.location
        return self.local_path(base_dir).as_uri()

    def local_path(self, base_dir: Path | None = None) -> Path:
        path = Path(self.location)
        if not path.is_absolute():
            path = (base_dir or Path.cwd()) / path
        return path.resolve()


class Artifact(BaseModel):
    role: str  # reference, generated
    viewport_class: str  # desktop, mobile
    extent: Literal["full", "viewport"]
    timestamp: str
    ext: str = "png"

    @property
    def filename(self) -> str:
        return artifact_filename(
            self.role, self.viewport_class, self.extent, self.timestamp, self.ext,
        )


class DismissAttempt(BaseModel):
    """Outcome of trying one dismissal selector. Never an error for the run."""
    selector: str
    outcome: Literal["dismissed", "absent", "failed"]
    error: Optional[str] = None


class DismissalResult(BaseModel):
    attempts: list[DismissAttempt] = Field(default_factory=list)
    escape_pressed: bool = False

    @property
    def dismissed(self) -> list[str]:
        return [a.selector for a in self.attempts if a.outcome == "dismissed"]


class PassResult(BaseModel):
    role: str
    target: str
    artifacts: list[Artifact] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class RunSummary(BaseModel):
    timestamp: str
    aborted: bool = False
    error: Optional[str] = None
    passes: list[PassResult] = Field(default_factory=list)
    reports: dict[str, str] = Field(default_factory=dict)
