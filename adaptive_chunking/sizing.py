"""
Adaptive Target Calculator

Derives the ideal size of the chunk being assembled from the structure of
the sections already pending in it:

- dense   heading, paragraph or list density above its threshold;
          target slides from dense_max down to dense_min with severity
- narrative  few headings and long paragraphs;
          target slides from narrative_min up to narrative_max
- baseline   everything else

The result is always rounded (half up) and clamped to
[absolute_min, absolute_max]. Overlap is sized alongside when enabled but is
not applied to chunk text.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from .models import ChunkingConfig, Paragraph, Section

BRANCH_EMPTY = "empty"
BRANCH_DENSE = "dense"
BRANCH_NARRATIVE = "narrative"
BRANCH_BASELINE = "baseline"

# Narrative prose needs fewer than a third of the dense heading density.
_NARRATIVE_HEADING_RATIO = 0.333


@dataclass(frozen=True)
class GroupMetrics:
    """Structure densities of a pending section group."""
    chars: int
    paragraph_count: int
    heading_density: float
    paragraph_density: float
    list_density: float
    avg_paragraph_len: float


@dataclass(frozen=True)
class TargetDecision:
    target: int
    overlap: int = 0
    branch: str = BRANCH_BASELINE
    # Severity for dense groups, boost factor for narrative groups
    intensity: float = 0.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def measure_group(sections: Sequence[Section], paragraphs: Sequence[Paragraph]) -> GroupMetrics:
    """Compute densities over every paragraph of the given sections."""
    chars = 0
    paragraph_count = 0
    heading_count = 0
    list_lines = 0
    total_lines = 0

    for section in sections:
        chars += section.total_chars
        for index in section.paragraph_indices:
            paragraph = paragraphs[index]
            paragraph_count += 1
            if paragraph.is_heading:
                heading_count += 1
            list_lines += paragraph.list_line_count
            total_lines += max(1, paragraph.line_count)

    chars = max(1, chars)
    per_thousand = chars / 1000.0
    return GroupMetrics(
        chars=chars,
        paragraph_count=paragraph_count,
        heading_density=heading_count / per_thousand,
        paragraph_density=paragraph_count / per_thousand,
        list_density=list_lines / total_lines if total_lines else 0.0,
        avg_paragraph_len=chars / paragraph_count if paragraph_count else 0.0,
    )


def _severity(value: float, threshold: float) -> float:
    return max(0.0, min(1.0, (value - threshold) / max(0.0001, threshold)))


def target_from_metrics(metrics: GroupMetrics, config: ChunkingConfig) -> TargetDecision:
    """Pick the sizing branch for the measured group and compute its target."""
    targets = config.targets
    heuristics = config.heuristics

    exceeded = [
        (value, threshold)
        for value, threshold in (
            (metrics.heading_density, heuristics.heading_density_high),
            (metrics.paragraph_density, heuristics.paragraph_density_high),
            (metrics.list_density, heuristics.list_density_high),
        )
        if value > threshold
    ]

    if exceeded:
        branch = BRANCH_DENSE
        intensity = max(_severity(value, threshold) for value, threshold in exceeded)
        raw = targets.dense_max - (targets.dense_max - targets.dense_min) * intensity
    elif (
        metrics.heading_density < heuristics.heading_density_high * _NARRATIVE_HEADING_RATIO
        and metrics.avg_paragraph_len > heuristics.long_paragraph_len
    ):
        branch = BRANCH_NARRATIVE
        intensity = max(0.0, min(
            1.0,
            (metrics.avg_paragraph_len - heuristics.long_paragraph_len)
            / heuristics.long_paragraph_len_max_boost,
        ))
        raw = targets.narrative_min + (targets.narrative_max - targets.narrative_min) * intensity
    else:
        branch = BRANCH_BASELINE
        intensity = 0.0
        raw = float(targets.baseline)

    target = max(targets.absolute_min, min(targets.absolute_max, round_half_up(raw)))
    return TargetDecision(
        target=target,
        overlap=compute_overlap(target, config),
        branch=branch,
        intensity=intensity,
    )


def compute_overlap(target: int, config: ChunkingConfig) -> int:
    """Overlap size for a target; 0 unless overlap is enabled."""
    overlap = config.overlap
    if not overlap.enabled:
        return 0
    if target <= config.targets.dense_max:
        percent = overlap.small_target_percent
    else:
        percent = overlap.large_target_percent
    return max(overlap.min_chars, round_half_up(target * percent))


def compute_target(
    pending: Sequence[Section],
    paragraphs: Sequence[Paragraph],
    config: ChunkingConfig,
) -> TargetDecision:
    """
    Compute the target (and reserved overlap) for the next packing decision.

    Args:
        pending: Sections accumulated but not yet flushed.
        paragraphs: All paragraphs of the document, by index.
        config: Chunking configuration.

    Returns:
        TargetDecision; the baseline with zero overlap for an empty group.
    """
    if not pending:
        return TargetDecision(target=config.targets.baseline, branch=BRANCH_EMPTY)
    return target_from_metrics(measure_group(pending, paragraphs), config)
