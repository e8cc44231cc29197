"""PNG histogram of a report's value distribution."""

from __future__ import annotations

import re
from datetime import UTC, datetime
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from domain.report import Report

FIGURE_SIZE = (12, 6)
FIGURE_DPI = 100
BAR_COLOR = "#ff304c"

_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/:*?\"<>|]+")


def chart_filename(stat_name: str, now: datetime) -> str:
    """Return ``<stat name>-<epoch ms>.png`` with path-unsafe characters replaced."""
    safe_name = _UNSAFE_FILENAME_CHARS.sub("_", stat_name).strip() or "stat"
    timestamp_ms = int(now.timestamp() * 1000)
    return f"{safe_name}-{timestamp_ms}.png"


def _format_label(label: float) -> str:
    return f"{label:g}"


def render_histogram(report: Report, image_dir: Path, *, now: datetime | None = None) -> Path:
    """Draw bin counts, the median, and one marker per requested team."""
    distribution = report.distribution
    output_path = image_dir / chart_filename(report.stat_name, now or datetime.now(UTC))
    output_path.parent.mkdir(parents=True, exist_ok=True)

    lowers = np.array([histogram_bin.lower for histogram_bin in distribution.bins])
    widths = np.array(
        [histogram_bin.upper - histogram_bin.lower for histogram_bin in distribution.bins]
    )
    counts = np.array(distribution.counts())

    fig, ax = plt.subplots(figsize=FIGURE_SIZE, dpi=FIGURE_DPI)
    try:
        fig.patch.set_facecolor("white")
        if distribution.max_value > 0:
            ax.bar(
                lowers,
                counts,
                width=widths,
                align="edge",
                color=BAR_COLOR,
                alpha=0.5,
                edgecolor="black",
                linewidth=1,
                label="# of Teams",
            )
            ticks = [histogram_bin.lower for histogram_bin in distribution.bins]
            ticks.append(distribution.max_value)
            ax.set_xticks(ticks)
            ax.set_xticklabels([_format_label(label) for label in distribution.labels], rotation=45)
            ax.set_xlim(0, distribution.max_value)
        else:
            ax.bar([0.0], [int(counts.sum())], color=BAR_COLOR, alpha=0.5, label="# of Teams")

        ax.axvline(
            distribution.median,
            color="#1f77b4",
            linestyle="--",
            label=f"Median = {distribution.median:g}",
        )

        top = max(int(counts.max()) if counts.size else 0, 1)
        for offset, (team_id, value) in enumerate(report.chart_points()):
            ax.axvline(value, color="black", linewidth=1)
            label_height = top * (0.95 - 0.07 * (offset % 10))
            ax.text(value, label_height, f" {team_id}", color="black", ha="left", va="center")

        ax.set_xlabel(f"Avg {report.stat_name}")
        ax.set_ylabel("Teams")
        ax.set_title(f"{report.stat_name} distribution ({report.total_count} teams)")
        ax.legend(loc="upper right")
        fig.tight_layout()
        fig.savefig(output_path, dpi=FIGURE_DPI, facecolor="white")
    finally:
        plt.close(fig)

    return output_path


__all__ = ["chart_filename", "render_histogram"]
