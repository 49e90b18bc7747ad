from datetime import date, datetime, time

import pytest

from batch_report.domain.catalog import ExpectedCatalog
from batch_report.domain.models import ExpectedScenario, LoadedRecord
from batch_report.infrastructure.repositories.file_repositories import InMemoryBatchRecordRepository

BATCH_DATE = date(2024, 12, 15)


def _record(asset_class, product, entity, scenario, batch_date=BATCH_DATE, loaded_on=None, hour=20):
    loaded_at = None
    if loaded_on is not False:
        loaded_at = datetime.combine(loaded_on or batch_date, time(hour=hour))
    return LoadedRecord(asset_class, product, entity, scenario, batch_date, loaded_at)


@pytest.fixture
def batch_date() -> date:
    return BATCH_DATE


@pytest.fixture
def make_record():
    """Build a LoadedRecord; ``loaded_on=False`` leaves the ingestion timestamp empty."""
    return _record


@pytest.fixture
def catalog() -> ExpectedCatalog:
    return ExpectedCatalog(
        [
            ExpectedScenario("Equity", "US Large Cap", "Entity A", "Base"),
            ExpectedScenario("Equity", "US Large Cap", "Entity A", "Stress"),
            ExpectedScenario("Equity", "US Large Cap", "Entity B", "Base"),
            ExpectedScenario("Fixed Income", "Government", "Entity A", "Base"),
        ]
    )


@pytest.fixture
def repository() -> InMemoryBatchRecordRepository:
    """Equity fully loaded, Fixed Income missing, one unexpected Entity C row."""
    return InMemoryBatchRecordRepository(
        [
            _record("Equity", "US Large Cap", "Entity A", "Base"),
            _record("Equity", "US Large Cap", "Entity A", "Stress"),
            _record("Equity", "US Large Cap", "Entity B", "Base"),
            _record("Equity", "US Large Cap", "Entity C", "Base"),
        ]
    )
