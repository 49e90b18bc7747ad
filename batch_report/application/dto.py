"""Application-level DTOs for report delivery."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Sequence

from batch_report.domain.results import BatchReport


@dataclass(slots=True, frozen=True)
class ReportDelivery:
    batch_date: date
    subject: str
    recipients: Sequence[str]
    report: BatchReport
    archive_location: Path | None = None
