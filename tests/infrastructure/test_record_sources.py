import json
from datetime import date, datetime
from pathlib import Path

import pytest

from batch_report.domain.models import LoadedRecord
from batch_report.errors import RecordSourceError
from batch_report.infrastructure.repositories.file_repositories import FileBatchRecordRepository
from batch_report.infrastructure.repositories.sql_repository import SqlBatchRecordRepository
from batch_report.infrastructure.storage.catalog_store import load_catalog


def test_file_repository_reads_csv(tmp_path: Path):
    path = tmp_path / "records.csv"
    path.write_text(
        "Asset Class,Product,Entity,Scenario,Batch Date,Created At\n"
        "Equity,US Large Cap,Entity A,Base,2024-12-15,2024-12-15 21:30:00\n"
        "Equity,US Large Cap,Entity A,Stress,2024-12-14,\n"
    )
    repository = FileBatchRecordRepository(path)

    [first] = repository.find_by_batch_date(date(2024, 12, 15))
    assert first.asset_class == "Equity"
    assert first.loaded_at == datetime(2024, 12, 15, 21, 30)
    [second] = repository.find_by_batch_date(date(2024, 12, 14))
    assert second.loaded_at is None
    assert len(repository.find_by_batch_date_range(date(2024, 12, 14), date(2024, 12, 15))) == 2


def test_file_repository_requires_columns(tmp_path: Path):
    path = tmp_path / "records.csv"
    path.write_text("asset_class,product\nEquity,US Large Cap\n")
    with pytest.raises(RecordSourceError):
        FileBatchRecordRepository(path)


def test_file_repository_rejects_bad_dates(tmp_path: Path):
    path = tmp_path / "records.csv"
    path.write_text("asset_class,product,entity,scenario,batch_date\nEquity,US Large Cap,Entity A,Base,\n")
    with pytest.raises(RecordSourceError):
        FileBatchRecordRepository(path)


def test_sql_repository_round_trip():
    repository = SqlBatchRecordRepository("sqlite://")
    repository.create_schema()
    stamp = datetime(2024, 12, 16, 8, 0)
    inserted = repository.add_records(
        [
            LoadedRecord("Equity", "US Large Cap", "Entity A", "Base", date(2024, 12, 15)),
            LoadedRecord("Equity", "US Large Cap", "Entity A", "Stress", date(2024, 12, 12), datetime(2024, 12, 14, 9)),
        ],
        loaded_at=stamp,
    )

    assert inserted == 2
    [record] = repository.find_by_batch_date(date(2024, 12, 15))
    assert record.loaded_at == stamp
    ranged = repository.find_by_batch_date_range(date(2024, 12, 10), date(2024, 12, 15))
    assert [r.batch_date for r in ranged] == [date(2024, 12, 12), date(2024, 12, 15)]
    assert ranged[0].loaded_at == datetime(2024, 12, 14, 9)
    assert repository.find_by_batch_date(date(2024, 12, 1)) == []


def test_catalog_from_csv(tmp_path: Path):
    path = tmp_path / "catalog.csv"
    path.write_text(
        "asset_class,product,entity,scenario\n"
        "Equity,US Large Cap,Entity A,Base\n"
        ",,,\n"
        "Equity,US Large Cap,Entity A,Base\n"
    )
    catalog = load_catalog(path)
    assert len(catalog) == 1


def test_catalog_from_json(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            [
                {"Asset Class": "Equity", "Product": "US Large Cap", "Entity": "Entity A", "Scenario": "Base"},
                ["Rates", "Swaps", "Entity B", "Stress"],
            ]
        )
    )
    catalog = load_catalog(path)
    assert catalog.is_expected("Rates", "Swaps", "Entity B", "Stress")
    assert catalog.is_expected("Equity", "US Large Cap", "Entity A", "Base")


def test_catalog_rejects_incomplete_rows(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([["Equity", "US Large Cap", "", "Base"]]))
    with pytest.raises(RecordSourceError):
        load_catalog(path)


def test_sql_repository_without_schema_raises_record_source_error():
    repository = SqlBatchRecordRepository("sqlite://")
    with pytest.raises(RecordSourceError):
        repository.find_by_batch_date(date(2024, 12, 15))


def test_file_repository_rejects_bad_timestamps(tmp_path: Path):
    path = tmp_path / "records.csv"
    path.write_text(
        "asset_class,product,entity,scenario,batch_date,loaded_at\n"
        "Equity,US Large Cap,Entity A,Base,2024-12-10,not-a-time\n"
    )
    with pytest.raises(RecordSourceError, match="line 2"):
        FileBatchRecordRepository(path)
