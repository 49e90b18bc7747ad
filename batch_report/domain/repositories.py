"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .models import LoadedRecord


class BatchRecordRepository(Protocol):
    """Provides loaded records keyed by batch date."""

    def find_by_batch_date(self, batch_date: date) -> Sequence[LoadedRecord]:
        ...

    def find_by_batch_date_range(self, start: date, end: date) -> Sequence[LoadedRecord]:
        """Records with ``start <= batch_date <= end``."""
        ...
