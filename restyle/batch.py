"""Batch mode — rewrite every .svg under an input tree into a mirrored output tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from restyle.engine.pipeline import Pipeline, PipelineResult, create_pipeline
from restyle.models.targets import TargetValues

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


@dataclass
class BatchReport:
    processed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    # Written, but the tokenizer stopped before the end of the input
    truncated: list[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.processed) + len(self.skipped)


def iter_svg_files(input_root: Path) -> list[Path]:
    """Regular files whose extension is exactly `.svg`, in stable order."""
    return sorted(p for p in input_root.rglob(f"*{SVG_SUFFIX}") if p.is_file() and p.suffix == SVG_SUFFIX)


def process_file(
    path: Path, output_path: Path, targets: TargetValues, pipeline: Pipeline
) -> PipelineResult | None:
    """Rewrite one file. Returns None if it had to be skipped; nothing is written then."""
    try:
        data = path.read_bytes()
        result = pipeline.run(data, targets)
    except OSError as e:
        logger.error("Failed to rewrite %s: %s", path, e)
        return None

    if result.truncated:
        logger.warning("Malformed input in %s, output may be incomplete: %s", path, result.truncated_at)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(result.data)
    except OSError as e:
        logger.error("Failed to write %s: %s", output_path, e)
        return None

    logger.info("Rewrote %s -> %s", path, output_path)
    return result


def process_tree(
    input_root: Path,
    output_root: Path,
    targets: TargetValues,
    pipeline: Pipeline | None = None,
) -> BatchReport:
    """Rewrite every SVG under input_root into the same relative path under output_root."""
    pipeline = pipeline or create_pipeline()
    report = BatchReport()

    files = iter_svg_files(input_root)
    logger.info("Processing %d SVG files from %s", len(files), input_root)

    for path in files:
        output_path = output_root / path.relative_to(input_root)
        result = process_file(path, output_path, targets, pipeline)
        if result is None:
            report.skipped.append(path)
            continue
        report.processed.append(path)
        if result.truncated:
            report.truncated.append(path)

    logger.info(
        "Done: %d/%d rewritten -> %s (%d skipped)",
        len(report.processed),
        report.total,
        output_root,
        len(report.skipped),
    )
    return report
