"""Markdown comparison checklist output."""

from __future__ import annotations

from pathlib import Path

from snapcompare.models.config import CompareConfig
from snapcompare.naming import artifact_filename, report_filename

_EXTENT_LABELS = {
    "full": "Full page {name} view",
    "viewport": "{Name} viewport",
}

_CHECKLIST = {
    "Layout & Structure": [
        "Overall page hierarchy matches reference",
        "Section spacing is proportional",
        "Grid alignment is consistent",
        "Navigation placement is similar",
    ],
    "Visual Design": [
        "{color_item}",
        "Typography is professional and readable",
        "Button styles are consistent",
        "Visual hierarchy is clear",
    ],
    "Responsive Behavior": [
        "Mobile navigation functions properly",
        "Content reflows correctly at breakpoints",
        "Touch targets are appropriately sized",
        "Text remains readable on small screens",
    ],
    "User Experience": [
        "Loading performance is acceptable",
        "Animations are smooth",
        "Forms function correctly",
        "Cross-browser compatibility verified",
    ],
}

_NEXT_STEPS = [
    "Open screenshots side-by-side for visual comparison",
    "Identify specific design gaps",
    "Update CSS/HTML to address inconsistencies",
    "Re-run comparison script to verify improvements",
    "Repeat until design alignment is achieved",
]


def expected_artifacts(role: str, timestamp: str, config: CompareConfig) -> list[tuple[str, str]]:
    """Return (filename, description) for every screenshot a pass should write."""
    entries = []
    for viewport in config.viewports:
        for extent in ("full", "viewport"):
            label = _EXTENT_LABELS[extent].format(
                name=viewport.name, Name=viewport.name.capitalize(),
            )
            entries.append((artifact_filename(role, viewport.name, extent, timestamp), label))
    return entries


def build_markdown_report(
    timestamp: str, config: CompareConfig, output_dir: Path | None = None,
) -> str:
    """Render the comparison checklist. Pure: same inputs give identical text."""
    out_dir = output_dir or Path(config.output_dir)
    if config.brand_color:
        color_item = (
            f"Color scheme follows {config.reference_name} inspiration ({config.brand_color})"
        )
    else:
        color_item = f"Color scheme follows {config.reference_name} inspiration"

    lines = [
        "# Website Comparison Report",
        f"Timestamp: {timestamp}",
        "",
        "## Screenshots Taken",
        "",
    ]
    for role, name in (("reference", config.reference_name), ("generated", config.generated_name)):
        lines.append(f"### {name} ({role})")
        for filename, label in expected_artifacts(role, timestamp, config):
            lines.append(f"- {filename} ({label})")
        lines.append("")

    lines += ["## Comparison Checklist", ""]
    for section, items in _CHECKLIST.items():
        lines.append(f"### {section}")
        lines += [f"- [ ] {item.format(color_item=color_item)}" for item in items]
        lines.append("")

    lines += ["## Next Steps", ""]
    lines += [f"{i}. {step}" for i, step in enumerate(_NEXT_STEPS, 1)]
    lines += [
        "",
        "## Files Generated",
        f"All screenshots saved to: {out_dir.resolve()}",
        "",
    ]
    return "\n".join(lines)


def emit_report(timestamp: str, config: CompareConfig, output_dir: Path | None = None) -> Path:
    """Write the markdown checklist. Does not check that listed screenshots exist."""
    out_dir = output_dir or Path(config.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / report_filename(timestamp)
    with open(path, "w", encoding="utf-8") as f:
        f.write(build_markdown_report(timestamp, config, out_dir))
    return path
