"""Seeded simulated records for previews and demos.

Nothing in the reconciliation path falls back to this data; it is only wired
in by the ``--demo`` CLI flag and the Streamlit app.
"""
from __future__ import annotations

import random
from datetime import date, datetime, time, timedelta

from batch_report.domain.catalog import ExpectedCatalog
from batch_report.domain.models import LoadedRecord
from batch_report.infrastructure.repositories.file_repositories import InMemoryBatchRecordRepository

UNEXPECTED_SAMPLE = ("Equity", "US Large Cap", "Entity C", "Base")
EMPTY_DAY_PROBABILITY = 0.15
MISSING_PROBABILITY = 0.1


def _loaded(scenario, batch_date: date, loaded_on: date, hour: int) -> LoadedRecord:
    return LoadedRecord(
        asset_class=scenario.asset_class,
        product=scenario.product,
        entity=scenario.entity,
        scenario=scenario.scenario,
        batch_date=batch_date,
        loaded_at=datetime.combine(loaded_on, time(hour=hour)),
    )


def simulate_records(
    catalog: ExpectedCatalog,
    batch_date: date,
    *,
    history_days: int = 120,
    seed: int | None = None,
) -> list[LoadedRecord]:
    rng = random.Random(batch_date.toordinal() if seed is None else seed)
    scenarios = list(catalog.all_scenarios())
    records: list[LoadedRecord] = []

    for scenario in scenarios:
        if rng.random() >= MISSING_PROBABILITY:
            records.append(_loaded(scenario, batch_date, batch_date, hour=rng.randint(18, 23)))
    asset_class, product, entity, name = UNEXPECTED_SAMPLE
    records.append(
        LoadedRecord(asset_class, product, entity, name, batch_date, datetime.combine(batch_date, time(hour=22)))
    )

    for offset in range(1, history_days):
        day = batch_date - timedelta(days=offset)
        if rng.random() < EMPTY_DAY_PROBABILITY:
            continue
        sample = rng.sample(scenarios, k=rng.randint(len(scenarios) // 2, len(scenarios)))
        for scenario in sample:
            if offset >= 2 and rng.random() < 0.02:
                late_by = rng.randint(1, offset - 1)
                records.append(_loaded(scenario, day, day + timedelta(days=late_by), hour=rng.randint(0, 23)))
            else:
                records.append(_loaded(scenario, day, day, hour=rng.randint(18, 23)))
    return records


def demo_repository(catalog: ExpectedCatalog, batch_date: date, seed: int | None = None) -> InMemoryBatchRecordRepository:
    return InMemoryBatchRecordRepository(simulate_records(catalog, batch_date, seed=seed))
