"""Row and CSV exports of report sections."""
from __future__ import annotations

import csv
import io
from typing import Sequence

from batch_report.domain.models import BackdatedScenario, GroupSummary, ScenarioDetail
from batch_report.presentation.labels import COMPLETION_LABELS, SCENARIO_LABELS, SEVERITY_LABELS


def summaries_to_rows(summaries: Sequence[GroupSummary]) -> list[dict[str, object]]:
    return [
        {
            "asset_class": s.asset_class,
            "product": s.product,
            "entity": s.entity,
            "loaded": s.loaded_count,
            "expected": s.expected_count,
            "missing": s.missing_count,
            "completion": s.completion_percentage,
            "status": COMPLETION_LABELS[s.status].text,
        }
        for s in summaries
    ]


def details_to_rows(details: Sequence[ScenarioDetail]) -> list[dict[str, object]]:
    return [
        {
            "asset_class": d.asset_class,
            "product": d.product,
            "entity": d.entity,
            "scenario": d.scenario,
            "expected": d.is_expected,
            "loaded": d.is_loaded,
            "status": SCENARIO_LABELS[d.status].text,
        }
        for d in details
    ]


def backdated_to_rows(backdated: Sequence[BackdatedScenario]) -> list[dict[str, object]]:
    return [
        {
            "asset_class": b.asset_class,
            "product": b.product,
            "entity": b.entity,
            "scenario": b.scenario,
            "batch_date": b.batch_date.isoformat(),
            "loaded_date": b.loaded_date.isoformat(),
            "days_late": b.days_late,
            "severity": SEVERITY_LABELS[b.late_severity].text,
        }
        for b in backdated
    ]


def render_csv(rows: Sequence[dict[str, object]]) -> bytes:
    buffer = io.StringIO()
    if rows:
        writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")
