"""Domain services reconciling expected scenarios against loaded records."""
from __future__ import annotations

import logging
from collections import Counter
from datetime import date, timedelta
from typing import Callable, Sequence

from .catalog import ExpectedCatalog
from .models import (
    BackdatedScenario,
    CompletionStatus,
    DailyStatusCount,
    GroupKey,
    GroupSummary,
    LoadedRecord,
    ScenarioDetail,
    ScenarioKey,
)
from .repositories import BatchRecordRepository

LOGGER = logging.getLogger(__name__)

DEFAULT_TREND_WINDOW_DAYS = 120
DEFAULT_BACKDATED_LOOKBACK_DAYS = 7
DEFAULT_BACKDATED_LIMIT = 50


class ReconciliationEngine:
    """Compares the loaded records of one batch date with the expected catalog."""

    def __init__(self, catalog: ExpectedCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> ExpectedCatalog:
        return self._catalog

    def compute_group_summaries(self, loaded_records: Sequence[LoadedRecord]) -> list[GroupSummary]:
        loaded_counts: Counter[GroupKey] = Counter(record.group_key for record in loaded_records)
        expected_groups = self._catalog.grouped_by_group_key()

        summaries: list[GroupSummary] = []
        for key, members in expected_groups.items():
            summaries.append(self._summary(key, loaded_counts.get(key, 0), len(members)))
        for key, count in loaded_counts.items():
            if key not in expected_groups:
                summaries.append(self._summary(key, count, 0))

        summaries.sort(key=lambda s: s.group_key)
        return summaries

    def compute_scenario_details(self, loaded_records: Sequence[LoadedRecord]) -> list[ScenarioDetail]:
        loaded_keys = {record.full_key for record in loaded_records}

        details: list[ScenarioDetail] = []
        for expected in self._catalog.all_scenarios():
            details.append(self._detail(expected.full_key, is_loaded=expected.full_key in loaded_keys, is_expected=True))

        seen_unexpected: set[ScenarioKey] = set()
        for record in loaded_records:
            key = record.full_key
            if key in seen_unexpected or self._catalog.is_expected(*key):
                continue
            seen_unexpected.add(key)
            details.append(self._detail(key, is_loaded=True, is_expected=False))

        details.sort(key=lambda d: d.full_key)
        return details

    @staticmethod
    def _summary(key: GroupKey, loaded_count: int, expected_count: int) -> GroupSummary:
        return GroupSummary(
            asset_class=key.asset_class,
            product=key.product,
            entity=key.entity,
            loaded_count=loaded_count,
            expected_count=expected_count,
            status=CompletionStatus.from_counts(loaded_count, expected_count),
        )

    @staticmethod
    def _detail(key: ScenarioKey, *, is_loaded: bool, is_expected: bool) -> ScenarioDetail:
        return ScenarioDetail(
            asset_class=key.asset_class,
            product=key.product,
            entity=key.entity,
            scenario=key.scenario,
            is_loaded=is_loaded,
            is_expected=is_expected,
        )


class BackdatedScenarioFinder:
    """Finds scenarios for past batch dates that arrived late.

    Records are taken from the ``lookback_days`` before the current batch date
    (the current date itself excluded) and kept when their batch date is older
    than the day before the current date. The loaded date is the record's
    ingestion timestamp; records without one fall back to ``today()``. A record
    loaded on its own batch date is still listed, with ``days_late`` of 0.
    """

    def __init__(
        self,
        repository: BatchRecordRepository,
        *,
        lookback_days: int = DEFAULT_BACKDATED_LOOKBACK_DAYS,
        limit: int = DEFAULT_BACKDATED_LIMIT,
        today: Callable[[], date] = date.today,
    ) -> None:
        if lookback_days < 1:
            raise ValueError("lookback_days must be at least 1")
        self._repository = repository
        self._lookback_days = lookback_days
        self._limit = limit
        self._today = today

    def find(self, current_batch_date: date) -> list[BackdatedScenario]:
        start = current_batch_date - timedelta(days=self._lookback_days)
        end = current_batch_date - timedelta(days=1)
        records = self._repository.find_by_batch_date_range(start, end)

        without_timestamp = 0
        backdated: list[BackdatedScenario] = []
        for record in records:
            if not record.batch_date < end:
                continue
            if record.loaded_at is None:
                without_timestamp += 1
                loaded_date = self._today()
            else:
                loaded_date = record.loaded_at.date()
            backdated.append(
                BackdatedScenario(
                    asset_class=record.asset_class,
                    product=record.product,
                    entity=record.entity,
                    scenario=record.scenario,
                    batch_date=record.batch_date,
                    loaded_date=loaded_date,
                )
            )

        if without_timestamp:
            LOGGER.warning(
                "%d backdated records have no ingestion timestamp; using today's date as loaded date",
                without_timestamp,
            )

        backdated.sort(key=lambda item: item.loaded_date, reverse=True)
        return backdated[: self._limit]


class TrendAggregator:
    """Builds the per-day loaded/missing series for the trend chart."""

    def __init__(self, repository: BatchRecordRepository) -> None:
        self._repository = repository

    def daily_counts(self, end_date: date, window_days: int = DEFAULT_TREND_WINDOW_DAYS) -> list[DailyStatusCount]:
        if window_days < 1:
            raise ValueError("window_days must be at least 1")
        start_date = end_date - timedelta(days=window_days - 1)
        records = self._repository.find_by_batch_date_range(start_date, end_date)
        counts_by_date = Counter(record.batch_date for record in records)

        series: list[DailyStatusCount] = []
        for offset in range(window_days):
            day = start_date + timedelta(days=offset)
            loaded = counts_by_date.get(day, 0)
            series.append(DailyStatusCount(date=day, loaded_count=loaded, missing_count=1 if loaded == 0 else 0))
        return series
