"""Outbound interfaces the use cases depend on."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from batch_report.domain.models import DailyStatusCount


class Mailer(Protocol):
    def send(self, subject: str, html: str, chart_path: Path | None = None) -> None:
        ...


class ChartRenderer(Protocol):
    def __call__(
        self,
        daily_counts: Sequence[DailyStatusCount],
        path: Path | None = None,
        *,
        sample_every: int = ...,
        width_px: int = ...,
        height_px: int = ...,
    ) -> Path:
        ...
