"""Report generation orchestration."""

from __future__ import annotations

import logging
from pathlib import Path

from snapcompare.models.capture import PassResult
from snapcompare.models.config import CompareConfig
from snapcompare.naming import manifest_filename

from .json_report import generate_json_report
from .markdown_report import emit_report

logger = logging.getLogger(__name__)


class Reporter:
    """Generates the comparison report files for a run."""

    def __init__(self, config: CompareConfig):
        self.config = config

    def generate_reports(
        self,
        timestamp: str,
        passes: list[PassResult],
        output_dir: Path | None = None,
    ) -> dict[str, str]:
        """Generate all configured report formats. Returns format -> file path."""
        out_dir = output_dir or Path(self.config.output_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        generated = {}
        logger.debug("Report output directory: %s", out_dir)

        if "markdown" in self.config.report_formats:
            path = emit_report(timestamp, self.config, out_dir)
            generated["markdown"] = str(path)
            logger.info("Comparison report saved to: %s", path)

        if "json" in self.config.report_formats:
            path = out_dir / manifest_filename(timestamp)
            generate_json_report(timestamp, passes, path)
            generated["json"] = str(path)
            logger.info("Run manifest saved to: %s", path)

        return generated
