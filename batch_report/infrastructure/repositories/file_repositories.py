"""File-backed and in-memory record repositories."""
from __future__ import annotations

from datetime import date
from io import BytesIO
from pathlib import Path
from typing import Iterable, Sequence

from batch_report.domain.models import LoadedRecord
from batch_report.domain.repositories import BatchRecordRepository
from batch_report.errors import RecordSourceError
from batch_report.infrastructure.parsing.utils import (
    clean_text,
    parse_date,
    parse_timestamp,
    read_table,
    require_columns,
)

RECORD_COLUMNS = ("asset_class", "product", "entity", "scenario", "batch_date")


class InMemoryBatchRecordRepository(BatchRecordRepository):
    def __init__(self, records: Iterable[LoadedRecord] = ()) -> None:
        self._records: list[LoadedRecord] = list(records)

    def add(self, *records: LoadedRecord) -> None:
        self._records.extend(records)

    def find_by_batch_date(self, batch_date: date) -> Sequence[LoadedRecord]:
        return [record for record in self._records if record.batch_date == batch_date]

    def find_by_batch_date_range(self, start: date, end: date) -> Sequence[LoadedRecord]:
        return [record for record in self._records if start <= record.batch_date <= end]


def records_from_table(source: BytesIO | Path | bytes, suffix: str = ".csv", name: str = "records") -> list[LoadedRecord]:
    df = read_table(source, suffix=suffix)
    require_columns(df, RECORD_COLUMNS, name)
    has_loaded_at = "loaded_at" in df.columns

    records: list[LoadedRecord] = []
    for line, row in enumerate(df.to_dict(orient="records"), start=2):
        try:
            batch_date = parse_date(row["batch_date"])
        except ValueError as exc:
            raise RecordSourceError(f"{name} line {line}: invalid batch date {row['batch_date']!r}") from exc
        try:
            loaded_at = parse_timestamp(row["loaded_at"]) if has_loaded_at else None
        except ValueError as exc:
            raise RecordSourceError(f"{name} line {line}: invalid loaded-at timestamp {row['loaded_at']!r}") from exc
        records.append(
            LoadedRecord(
                asset_class=clean_text(row["asset_class"]),
                product=clean_text(row["product"]),
                entity=clean_text(row["entity"]),
                scenario=clean_text(row["scenario"]),
                batch_date=batch_date,
                loaded_at=loaded_at,
            )
        )
    return records


class FileBatchRecordRepository(InMemoryBatchRecordRepository):
    """Loaded records exported to a CSV file or Excel workbook."""

    def __init__(self, source: BytesIO | Path | bytes, suffix: str = ".csv") -> None:
        name = str(source) if isinstance(source, Path) else "records"
        super().__init__(records_from_table(source, suffix=suffix, name=name))
