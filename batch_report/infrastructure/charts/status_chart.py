"""Stacked bar chart of daily loaded/missing batches."""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Sequence

from matplotlib.figure import Figure

from batch_report.domain.models import DailyStatusCount

LOADED_COLOR = "#4CAF50"
MISSING_COLOR = "#F44336"
DPI = 100


def sample_counts(daily_counts: Sequence[DailyStatusCount], sample_every: int = 1) -> list[DailyStatusCount]:
    if sample_every < 1:
        raise ValueError("sample_every must be at least 1")
    ordered = sorted(daily_counts, key=lambda count: count.date)
    return ordered[::sample_every]


def render_status_chart(
    daily_counts: Sequence[DailyStatusCount],
    path: Path | None = None,
    *,
    sample_every: int = 10,
    width_px: int = 800,
    height_px: int = 400,
) -> Path:
    """Render the trend chart as PNG.

    Without ``path`` the image goes to a new temporary file which the caller
    must delete.
    """
    if path is None:
        handle = tempfile.NamedTemporaryFile(prefix="batch-status-chart", suffix=".png", delete=False)
        handle.close()
        path = Path(handle.name)
    else:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

    points = sample_counts(daily_counts, sample_every)
    labels = [point.date.strftime("%m/%d") for point in points]
    loaded = [point.loaded_count for point in points]
    missing = [point.missing_count for point in points]

    fig = Figure(figsize=(width_px / DPI, height_px / DPI), dpi=DPI, facecolor="white")
    ax = fig.add_subplot(1, 1, 1)
    ax.set_facecolor("white")
    positions = range(len(points))
    ax.bar(positions, loaded, color=LOADED_COLOR, label="Loaded")
    ax.bar(positions, missing, bottom=loaded, color=MISSING_COLOR, label="Missing")
    ax.set_xticks(list(positions))
    ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=8)
    ax.set_title(f"Batch Load Status - Last {len(daily_counts)} Days", fontsize=14, fontweight="bold")
    ax.set_xlabel("Date")
    ax.set_ylabel("Count")
    ax.yaxis.grid(True, color="lightgray")
    ax.xaxis.grid(False)
    ax.set_axisbelow(True)
    ax.legend(loc="upper left")
    fig.tight_layout()
    fig.savefig(path, format="png", dpi=DPI)
    return path
