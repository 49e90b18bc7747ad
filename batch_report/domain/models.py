"""Domain models for the batch load report.

Expected scenarios come from a static catalog; loaded records come from the
record store. Everything else is derived per report and never persisted.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple


class GroupKey(NamedTuple):
    """The (asset class, product, entity) triple used to aggregate counts."""

    asset_class: str
    product: str
    entity: str


class ScenarioKey(NamedTuple):
    """Unique identity of a single scenario within a group."""

    asset_class: str
    product: str
    entity: str
    scenario: str

    @property
    def group_key(self) -> GroupKey:
        return GroupKey(self.asset_class, self.product, self.entity)


@dataclass(frozen=True)
class ExpectedScenario:
    asset_class: str
    product: str
    entity: str
    scenario: str

    @property
    def group_key(self) -> GroupKey:
        return GroupKey(self.asset_class, self.product, self.entity)

    @property
    def full_key(self) -> ScenarioKey:
        return ScenarioKey(self.asset_class, self.product, self.entity, self.scenario)


@dataclass(frozen=True)
class LoadedRecord:
    """One scenario actually loaded for a batch date.

    ``loaded_at`` is the ingestion timestamp captured by the store; it is
    ``None`` for stores that never recorded one.
    """

    asset_class: str
    product: str
    entity: str
    scenario: str
    batch_date: date
    loaded_at: datetime | None = None

    @property
    def group_key(self) -> GroupKey:
        return GroupKey(self.asset_class, self.product, self.entity)

    @property
    def full_key(self) -> ScenarioKey:
        return ScenarioKey(self.asset_class, self.product, self.entity, self.scenario)


class CompletionStatus(str, Enum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    EXCESS = "excess"
    UNKNOWN = "unknown"

    @classmethod
    def from_counts(cls, loaded_count: int, expected_count: int) -> "CompletionStatus":
        if expected_count == 0:
            return cls.UNKNOWN
        if loaded_count == expected_count:
            return cls.COMPLETE
        if loaded_count > expected_count:
            return cls.EXCESS
        return cls.INCOMPLETE


class ScenarioStatus(str, Enum):
    LOADED = "loaded"
    MISSING = "missing"
    UNEXPECTED = "unexpected"
    NOT_APPLICABLE = "not_applicable"


class LateSeverity(str, Enum):
    MINIMAL = "minimal"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"
    CRITICAL = "critical"

    @classmethod
    def from_days_late(cls, days_late: int) -> "LateSeverity":
        if days_late <= 1:
            return cls.MINIMAL
        if days_late <= 3:
            return cls.MODERATE
        if days_late <= 7:
            return cls.SIGNIFICANT
        return cls.CRITICAL


@dataclass(frozen=True)
class GroupSummary:
    asset_class: str
    product: str
    entity: str
    loaded_count: int
    expected_count: int
    status: CompletionStatus

    @property
    def group_key(self) -> GroupKey:
        return GroupKey(self.asset_class, self.product, self.entity)

    @property
    def is_complete(self) -> bool:
        return self.status is CompletionStatus.COMPLETE

    @property
    def missing_count(self) -> int:
        return max(0, self.expected_count - self.loaded_count)

    @property
    def completion_percentage(self) -> str:
        if self.expected_count == 0:
            return "N/A"
        return f"{self.loaded_count / self.expected_count * 100:.0f}%"


@dataclass(frozen=True)
class ScenarioDetail:
    asset_class: str
    product: str
    entity: str
    scenario: str
    is_loaded: bool
    is_expected: bool

    @property
    def full_key(self) -> ScenarioKey:
        return ScenarioKey(self.asset_class, self.product, self.entity, self.scenario)

    @property
    def status(self) -> ScenarioStatus:
        if self.is_loaded and not self.is_expected:
            return ScenarioStatus.UNEXPECTED
        if self.is_loaded and self.is_expected:
            return ScenarioStatus.LOADED
        if self.is_expected:
            return ScenarioStatus.MISSING
        return ScenarioStatus.NOT_APPLICABLE


@dataclass(frozen=True)
class BackdatedScenario:
    """A scenario whose batch date is older than the processing date but was loaded recently."""

    asset_class: str
    product: str
    entity: str
    scenario: str
    batch_date: date
    loaded_date: date

    @property
    def days_late(self) -> int:
        return (self.loaded_date - self.batch_date).days

    @property
    def late_severity(self) -> LateSeverity:
        return LateSeverity.from_days_late(self.days_late)


@dataclass(frozen=True)
class DailyStatusCount:
    """Loaded count for one calendar day.

    ``missing_count`` is a presence flag (1 when nothing loaded that day), not a
    count of missing scenarios.
    """

    date: date
    loaded_count: int
    missing_count: int
