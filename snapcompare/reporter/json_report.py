"""JSON run manifest output."""

from __future__ import annotations

import json
from pathlib import Path

from snapcompare.models.capture import PassResult


def generate_json_report(
    timestamp: str,
    passes: list[PassResult],
    output_path: Path,
) -> None:
    """Write a machine-readable manifest of what each pass actually produced."""
    report = {
        "timestamp": timestamp,
        "passes": [
            {
                "role": p.role,
                "target": p.target,
                "succeeded": p.succeeded,
                "error": p.error,
                "artifacts": [a.filename for a in p.artifacts],
            }
            for p in passes
        ],
    }

    with open(output_path, "w") as f:
        json.dump(report, f, indent=2, default=str)
