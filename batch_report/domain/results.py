"""Domain-level results for one batch load report."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Sequence

from .models import (
    BackdatedScenario,
    DailyStatusCount,
    GroupSummary,
    ScenarioDetail,
    ScenarioStatus,
)


@dataclass(frozen=True)
class ReportOverview:
    total_loaded: int
    total_expected: int
    completion_rate: float
    complete_groups: int
    loaded_scenarios: int
    missing_scenarios: int
    unexpected_scenarios: int
    asset_classes: int
    products: int
    entities: int

    @classmethod
    def from_results(cls, summaries: Sequence[GroupSummary], details: Sequence[ScenarioDetail]) -> "ReportOverview":
        total_loaded = sum(s.loaded_count for s in summaries)
        total_expected = sum(s.expected_count for s in summaries)
        completion_rate = total_loaded / total_expected * 100 if total_expected else 0.0
        return cls(
            total_loaded=total_loaded,
            total_expected=total_expected,
            completion_rate=completion_rate,
            complete_groups=len([s for s in summaries if s.is_complete]),
            loaded_scenarios=len([d for d in details if d.is_loaded]),
            missing_scenarios=len([d for d in details if d.status is ScenarioStatus.MISSING]),
            unexpected_scenarios=len([d for d in details if d.status is ScenarioStatus.UNEXPECTED]),
            asset_classes=len({s.asset_class for s in summaries}),
            products=len({s.product for s in summaries}),
            entities=len({s.entity for s in summaries}),
        )


@dataclass(frozen=True)
class BatchReport:
    batch_date: date
    summaries: Sequence[GroupSummary] = field(default_factory=tuple)
    details: Sequence[ScenarioDetail] = field(default_factory=tuple)
    daily_counts: Sequence[DailyStatusCount] = field(default_factory=tuple)
    backdated: Sequence[BackdatedScenario] = field(default_factory=tuple)

    @property
    def overview(self) -> ReportOverview:
        return ReportOverview.from_results(self.summaries, self.details)

    def has_issues(self) -> bool:
        return any(not summary.is_complete for summary in self.summaries) or bool(self.backdated)

    def iter_exceptions(self) -> Iterable[ScenarioDetail]:
        """Scenario details that need attention: missing first, then unexpected."""
        yield from (d for d in self.details if d.status is ScenarioStatus.MISSING)
        yield from (d for d in self.details if d.status is ScenarioStatus.UNEXPECTED)
