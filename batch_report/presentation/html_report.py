"""Browser HTML rendering of the batch load report."""
from __future__ import annotations

import base64
from datetime import date
from typing import Sequence

from batch_report.domain.models import BackdatedScenario, GroupSummary, ScenarioDetail
from batch_report.domain.results import BatchReport, ReportOverview
from batch_report.presentation.labels import (
    COMPLETION_LABELS,
    SCENARIO_LABELS,
    SEVERITY_LABELS,
    escape,
    fmt_int,
    long_date,
)

CHART_SRC = 'src="cid:statusChart"'
REPORT_TITLE = "Surveillance Data Load Report"
FOOTER_CONTACT = "For questions or issues, please contact the Trade Surveillance dev team via the Teams channel."
BACKDATED_NOTE = (
    "These scenarios have batch dates older than today but were loaded recently. "
    "This typically indicates catch-up processing or delayed data delivery."
)

REPORT_STYLES = """
body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; line-height: 1.6; color: #333;
       max-width: 1200px; margin: 0 auto; padding: 20px; background-color: #f8f9fa; }
.container { background-color: white; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); overflow: hidden; }
.header { background: linear-gradient(135deg, #006A4E 0%, #00A693 100%); color: white; padding: 30px; text-align: center; }
.header h1 { margin: 0; font-size: 28px; font-weight: 300; }
.header .batch-date { font-size: 18px; opacity: 0.9; margin-top: 10px; }
.navigation { background-color: #f0f9f6; padding: 20px 30px; border-bottom: 1px solid #00A693; }
.navigation h3 { margin: 0 0 15px 0; color: #006A4E; font-size: 16px; }
.nav-links { display: flex; flex-wrap: wrap; gap: 15px; margin-bottom: 10px; }
.nav-link { color: #006A4E; text-decoration: none; padding: 8px 16px; border: 1px solid #00A693;
            border-radius: 20px; background-color: white; font-size: 13px; font-weight: 500; }
.nav-link:hover { background-color: #00A693; color: white; }
.collapsible-note { font-style: italic; color: #666; }
.stats-overview { display: flex; justify-content: space-around; padding: 20px; background-color: #e8f5f1;
                  border-bottom: 1px solid #b3d9cc; }
.stat-item { text-align: center; padding: 10px; }
.stat-number { font-size: 24px; font-weight: bold; color: #006A4E; display: block; }
.stat-label { font-size: 12px; color: #666; text-transform: uppercase; letter-spacing: 0.5px; }
.section { border-bottom: 1px solid #e0e0e0; }
.collapsible-header { color: #006A4E; margin: 0; padding: 20px 30px; font-size: 20px; border-bottom: 2px solid #00A693;
                      cursor: pointer; user-select: none; background-color: #f8f9fa; display: flex;
                      justify-content: space-between; align-items: center; }
.collapsible-header:hover { background-color: #f0f9f6; }
.toggle-indicator { font-size: 14px; }
.collapsible-content { padding: 30px; overflow: hidden; transition: max-height 0.3s ease; }
.collapsible-content.collapsed { max-height: 0 !important; padding: 0 30px; }
.table-container { overflow-x: auto; margin: 20px 0; }
table { width: 100%; border-collapse: collapse; background-color: white; box-shadow: 0 1px 3px rgba(0,0,0,0.12); }
th { background-color: #006A4E; color: white; padding: 15px 12px; text-align: left; font-weight: 600; font-size: 14px;
     text-transform: uppercase; letter-spacing: 0.5px; }
td { padding: 12px; border-bottom: 1px solid #e0e0e0; font-size: 14px; }
tr:nth-child(even) { background-color: #f8f9fa; }
tr:hover { background-color: #e8f5f1; }
.number-cell { text-align: right; font-weight: 600; color: #006A4E; }
.chart-section { text-align: center; background-color: #fafafa; }
.chart-section img { max-width: 100%; height: auto; border-radius: 6px; box-shadow: 0 2px 8px rgba(0,0,0,0.15); }
.empty-state { text-align: center; padding: 40px; color: #666; font-style: italic; }
.info-box { background-color: #e8f5f1; border-left: 4px solid #00A693; padding: 15px 20px; margin: 20px 0; }
.footer { background-color: #f5f5f5; padding: 20px 30px; text-align: center; font-size: 12px; color: #666;
          border-top: 1px solid #e0e0e0; }
.status-success { color: #4caf50; font-weight: bold; }
.status-warning { color: #ff9800; font-weight: bold; }
.status-danger { color: #f44336; font-weight: bold; }
.status-info { color: #00A693; font-weight: bold; }
.status-neutral { color: #666; font-weight: bold; }
@media (max-width: 768px) {
  .stats-overview, .nav-links { flex-direction: column; }
  th, td { padding: 8px 6px; font-size: 12px; }
}
"""

TOGGLE_SCRIPT = """
function toggleSection(contentId) {
  var content = document.getElementById(contentId);
  var indicator = content.previousElementSibling.querySelector('.toggle-indicator');
  if (content.classList.contains('collapsed')) {
    content.classList.remove('collapsed');
    content.style.maxHeight = 'none';
    if (indicator) indicator.innerHTML = '&#9660;';
  } else {
    content.classList.add('collapsed');
    content.style.maxHeight = '0';
    if (indicator) indicator.innerHTML = '&#9654;';
  }
}
"""


def _table(headers: Sequence[tuple[str, bool]], rows: Sequence[str]) -> str:
    head = "".join(f'<th style="text-align: right;">{name}</th>' if numeric else f"<th>{name}</th>" for name, numeric in headers)
    return (
        '<div class="table-container"><table>'
        f"<thead><tr>{head}</tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table></div>"
    )


def _section(section_id: str, title: str, body: str, *, collapsed: bool = False) -> str:
    indicator = "&#9654;" if collapsed else "&#9660;"
    content_class = "collapsible-content collapsed" if collapsed else "collapsible-content"
    return (
        f'<div id="{section_id}" class="section collapsible">'
        f"<h2 class=\"collapsible-header\" onclick=\"toggleSection('{section_id}-content')\">"
        f'{title} <span class="toggle-indicator">{indicator}</span></h2>'
        f'<div id="{section_id}-content" class="{content_class}">{body}</div>'
        "</div>\n"
    )


def render_navigation() -> str:
    links = [
        ("overview", "📊 Overview"),
        ("summary", "📋 Load Summary"),
        ("chart", "📈 Status Trend"),
        ("details", "📄 Scenario Details"),
        ("backdated", "🔄 Recent Backdated"),
    ]
    anchors = "".join(f'<a href="#{anchor}" class="nav-link">{label}</a>' for anchor, label in links)
    return (
        '<div class="navigation"><h3>📍 Quick Navigation</h3>'
        f'<div class="nav-links">{anchors}</div>'
        '<div class="collapsible-note"><small>💡 Tip: Click section headers to expand/collapse content</small></div>'
        "</div>\n"
    )


def render_overview(overview: ReportOverview) -> str:
    stats = [
        (fmt_int(overview.total_loaded), "Scenarios Loaded"),
        (fmt_int(overview.total_expected), "Expected Scenarios"),
        (f"{overview.completion_rate:.1f}%", "Completion Rate"),
        (fmt_int(overview.complete_groups), "Complete Groups"),
        (fmt_int(overview.missing_scenarios), "Missing Scenarios"),
        (str(overview.asset_classes), "Asset Classes"),
    ]
    items = "".join(
        f'<div class="stat-item"><span class="stat-number">{value}</span><span class="stat-label">{label}</span></div>'
        for value, label in stats
    )
    return f'<div id="overview" class="stats-overview">{items}</div>\n'


def render_summary(summaries: Sequence[GroupSummary]) -> str:
    if not summaries:
        return _section("summary", "📋 Load Summary", '<div class="empty-state">No data loaded for this batch date</div>')
    rows = []
    for summary in summaries:
        label = COMPLETION_LABELS[summary.status]
        rows.append(
            "<tr>"
            f"<td>{escape(summary.asset_class)}</td>"
            f"<td>{escape(summary.product)}</td>"
            f"<td>{escape(summary.entity)}</td>"
            f'<td class="number-cell">{fmt_int(summary.loaded_count)}</td>'
            f'<td class="number-cell">{fmt_int(summary.expected_count)}</td>'
            f'<td class="number-cell">{summary.completion_percentage}</td>'
            f'<td class="{label.css}">{label.render()}</td>'
            "</tr>"
        )
    headers = [("Asset Class", False), ("Product", False), ("Entity", False), ("Loaded", True), ("Expected", True), ("Completion", True), ("Status", False)]
    return _section("summary", "📋 Load Summary", _table(headers, rows))


def render_chart_section(window_days: int) -> str:
    return (
        '<div id="chart" class="section chart-section collapsible">'
        "<h2 class=\"collapsible-header\" onclick=\"toggleSection('chart-content')\">"
        f'📈 {window_days}-Day Load Status Trend <span class="toggle-indicator">&#9660;</span></h2>'
        '<div id="chart-content" class="collapsible-content">'
        f'<img {CHART_SRC} alt="Batch Status Chart"/>'
        '<p style="font-size: 12px; color: #666; margin-top: 15px;">'
        "Green: Successfully loaded batches | Red: Missing/failed batches</p>"
        "</div></div>\n"
    )


def render_details(details: Sequence[ScenarioDetail]) -> str:
    if not details:
        return _section(
            "details", "📄 Scenario Details", '<div class="empty-state">No scenario details available</div>', collapsed=True
        )
    rows = []
    for detail in details:
        label = SCENARIO_LABELS[detail.status]
        rows.append(
            "<tr>"
            f"<td>{escape(detail.asset_class)}</td>"
            f"<td>{escape(detail.product)}</td>"
            f"<td>{escape(detail.entity)}</td>"
            f"<td>{escape(detail.scenario)}</td>"
            f'<td class="{label.css}">{label.render()}</td>'
            "</tr>"
        )
    headers = [("Asset Class", False), ("Product", False), ("Entity", False), ("Scenario", False), ("Status", False)]
    return _section("details", "📄 Scenario Details", _table(headers, rows), collapsed=True)


def render_backdated(backdated: Sequence[BackdatedScenario], lookback_days: int = 7) -> str:
    title = "🔄 Recently Loaded Backdated Scenarios"
    if not backdated:
        body = f'<div class="empty-state">No backdated scenarios loaded in the last {lookback_days} days</div>'
        return _section("backdated", title, body)
    rows = []
    for item in backdated:
        severity = SEVERITY_LABELS[item.late_severity]
        rows.append(
            "<tr>"
            f"<td>{escape(item.asset_class)}</td>"
            f"<td>{escape(item.product)}</td>"
            f"<td>{escape(item.entity)}</td>"
            f"<td>{escape(item.scenario)}</td>"
            f"<td>{item.batch_date.isoformat()}</td>"
            f"<td>{item.loaded_date.isoformat()}</td>"
            f'<td class="number-cell {severity.css}">{item.days_late}</td>'
            "</tr>"
        )
    headers = [
        ("Asset Class", False),
        ("Product", False),
        ("Entity", False),
        ("Scenario", False),
        ("Batch Date", False),
        ("Loaded Date", False),
        ("Days Late", True),
    ]
    note = f'<div class="info-box"><p><strong>Note:</strong> {BACKDATED_NOTE}</p></div>'
    return _section("backdated", title, note + _table(headers, rows))


def render_report_html(report: BatchReport, generated_on: date | None = None, lookback_days: int = 7) -> str:
    """Full browser report with collapsible sections; the chart is referenced as ``cid:statusChart``."""
    generated = long_date(generated_on or date.today())
    window_days = len(report.daily_counts) or 120
    body = "".join(
        [
            render_navigation(),
            render_overview(report.overview),
            render_summary(report.summaries),
            render_chart_section(window_days),
            render_details(report.details),
            render_backdated(report.backdated, lookback_days),
        ]
    )
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>Batch Load Report - {report.batch_date.isoformat()}</title>\n"
        f"<style>{REPORT_STYLES}</style>\n"
        "</head>\n<body>\n"
        '<div class="container">\n'
        f'<div class="header"><h1>📊 {REPORT_TITLE}</h1><div class="batch-date">{long_date(report.batch_date)}</div></div>\n'
        f"{body}"
        f'<div class="footer"><p>Report generated on {generated} | Trade Surveillance</p><p>{FOOTER_CONTACT}</p></div>\n'
        "</div>\n"
        f"<script>{TOGGLE_SCRIPT}</script>\n"
        "</body>\n</html>"
    )


def embed_chart(html: str, chart_png: bytes) -> str:
    """Swap the inline-attachment reference for a data URL so a browser can show the chart."""
    encoded = base64.b64encode(chart_png).decode("ascii")
    return html.replace(CHART_SRC, f'src="data:image/png;base64,{encoded}"')
