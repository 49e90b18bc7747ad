"""Display labels, CSS classes and icons for domain statuses."""
from __future__ import annotations

import html
from dataclasses import dataclass
from datetime import date

from batch_report.domain.models import CompletionStatus, LateSeverity, ScenarioStatus


@dataclass(frozen=True)
class StatusLabel:
    text: str
    css_class: str
    icon: str

    @property
    def css(self) -> str:
        return f"status-{self.css_class}"

    def render(self) -> str:
        return f"{self.icon} {self.text}"


COMPLETION_LABELS: dict[CompletionStatus, StatusLabel] = {
    CompletionStatus.COMPLETE: StatusLabel("Complete", "success", "✅"),
    CompletionStatus.INCOMPLETE: StatusLabel("Incomplete", "warning", "❌"),
    CompletionStatus.EXCESS: StatusLabel("Excess Data", "info", "⚠️"),
    CompletionStatus.UNKNOWN: StatusLabel("Unknown", "neutral", "❓"),
}

SCENARIO_LABELS: dict[ScenarioStatus, StatusLabel] = {
    ScenarioStatus.LOADED: StatusLabel("Loaded", "success", "✅"),
    ScenarioStatus.MISSING: StatusLabel("Missing", "danger", "❌"),
    ScenarioStatus.UNEXPECTED: StatusLabel("Unexpected", "warning", "⚠️"),
    ScenarioStatus.NOT_APPLICABLE: StatusLabel("N/A", "neutral", "➖"),
}

SEVERITY_LABELS: dict[LateSeverity, StatusLabel] = {
    LateSeverity.MINIMAL: StatusLabel("Minimal", "info", "1 day late"),
    LateSeverity.MODERATE: StatusLabel("Moderate", "warning", "2-3 days late"),
    LateSeverity.SIGNIFICANT: StatusLabel("Significant", "warning", "4-7 days late"),
    LateSeverity.CRITICAL: StatusLabel("Critical", "danger", "8+ days late"),
}


def escape(value: object) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def long_date(value: date) -> str:
    """``December 15, 2024``"""
    return f"{value:%B} {value.day}, {value.year}"


def fmt_int(value: int) -> str:
    return f"{value:,d}"
