"""Exceptions raised by the batch report package."""
from __future__ import annotations

from datetime import date


class BatchReportError(Exception):
    """Base class for batch report failures."""


class ConfigurationError(BatchReportError):
    """Settings are missing or invalid."""


class RecordSourceError(BatchReportError):
    """A record or catalog source could not be read."""


class ReportGenerationError(BatchReportError):
    def __init__(self, batch_date: date) -> None:
        super().__init__(f"Batch report generation failed for {batch_date.isoformat()}")
        self.batch_date = batch_date
