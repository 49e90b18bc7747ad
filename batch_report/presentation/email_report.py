"""Email-client-safe HTML: table layout with inline styles, no script."""
from __future__ import annotations

from datetime import date
from typing import Sequence

from batch_report.domain.models import BackdatedScenario, GroupSummary, ScenarioDetail
from batch_report.domain.results import BatchReport, ReportOverview
from batch_report.presentation.html_report import BACKDATED_NOTE, CHART_SRC, FOOTER_CONTACT, REPORT_TITLE
from batch_report.presentation.labels import (
    COMPLETION_LABELS,
    SCENARIO_LABELS,
    SEVERITY_LABELS,
    escape,
    fmt_int,
    long_date,
)

FONT = "font-family: Arial, sans-serif;"
H2_STYLE = f"color: #006A4E; margin: 0 0 20px 0; font-size: 20px; {FONT}"
TH_STYLE = "background-color: #006A4E; color: white; padding: 12px; font-size: 13px; font-weight: 600; border: 1px solid #004d37;"
TD_STYLE = "padding: 12px; border: 1px solid #e0e0e0; font-size: 14px;"
SECTION_STYLE = "padding: 30px; border-bottom: 1px solid #e0e0e0;"
EMPTY_STYLE = f"text-align: center; padding: 20px; color: #666; font-style: italic; {FONT}"
TABLE_OPEN = (
    '<table cellpadding="8" cellspacing="0" border="1" width="100%" '
    f'style="border-collapse: collapse; border: 1px solid #ddd; {FONT}">'
)

EMAIL_STYLES = """
<style type="text/css">
#outlook a { padding: 0; }
.ReadMsgBody, .ExternalClass { width: 100%; background-color: white !important; }
body, table, td, p, a { -webkit-text-size-adjust: 100%; -ms-text-size-adjust: 100%; }
table, td { mso-table-lspace: 0pt; mso-table-rspace: 0pt; }
img { -ms-interpolation-mode: bicubic; }
.status-success { color: #4caf50 !important; font-weight: bold; }
.status-warning { color: #ff9800 !important; font-weight: bold; }
.status-danger { color: #f44336 !important; font-weight: bold; }
.status-info { color: #00A693 !important; font-weight: bold; }
.status-neutral { color: #666 !important; font-weight: bold; }
.main-table { width: 900px; max-width: 95%; }
@media only screen and (max-width: 600px) { .main-table { width: 100% !important; } }
</style>
"""

OUTLOOK_SETTINGS = """<!--[if gte mso 9]>
<xml><o:OfficeDocumentSettings><o:AllowPNG/><o:PixelsPerInch>96</o:PixelsPerInch></o:OfficeDocumentSettings></xml>
<![endif]-->
"""


def _row(content: str, style: str = SECTION_STYLE, extra: str = "") -> str:
    return f'<tr><td style="{style}"{extra}>{content}</td></tr>\n'


def _header_cells(headers: Sequence[tuple[str, str]]) -> str:
    return "".join(f'<th style="{TH_STYLE} text-align: {align};">{name}</th>' for name, align in headers)


def _zebra(index: int) -> str:
    return "#f8f9fa" if index % 2 else "white"


def render_email_header(batch_date: date) -> str:
    content = (
        f'<h1 style="margin: 0; font-size: 32px; font-weight: 400; color: #ffffff; {FONT}">📊 {REPORT_TITLE}</h1>'
        f'<div style="font-size: 20px; color: #ffffff; margin-top: 12px; {FONT}">{long_date(batch_date)}</div>'
    )
    style = "background: linear-gradient(135deg, #006A4E 0%, #00A693 100%); background-color: #006A4E; padding: 30px; text-align: center;"
    return _row(content, style, ' bgcolor="#006A4E"')


def render_email_overview(overview: ReportOverview) -> str:
    stats = [
        (fmt_int(overview.total_loaded), "SCENARIOS LOADED"),
        (fmt_int(overview.total_expected), "EXPECTED SCENARIOS"),
        (f"{overview.completion_rate:.1f}%", "COMPLETION RATE"),
        (fmt_int(overview.complete_groups), "COMPLETE GROUPS"),
        (fmt_int(overview.missing_scenarios), "MISSING SCENARIOS"),
        (fmt_int(overview.unexpected_scenarios), "UNEXPECTED SCENARIOS"),
    ]
    cells = "".join(
        '<td align="center" style="padding: 10px; width: 16.66%;">'
        f'<div style="font-size: 28px; font-weight: bold; color: #006A4E; {FONT}">{value}</div>'
        f'<div style="font-size: 11px; color: #666; letter-spacing: 0.5px; {FONT}">{label}</div>'
        "</td>"
        for value, label in stats
    )
    inner = f'<table cellpadding="0" cellspacing="0" border="0" width="100%"><tr>{cells}</tr></table>'
    return _row(inner, "background-color: #e8f5f1; padding: 20px;", ' bgcolor="#e8f5f1"')


def render_email_summary(summaries: Sequence[GroupSummary]) -> str:
    heading = f'<h2 style="{H2_STYLE}">📋 Load Summary</h2>'
    if not summaries:
        return _row(heading + f'<div style="{EMPTY_STYLE}">No data loaded for this batch date</div>')
    headers = [("Asset Class", "left"), ("Product", "left"), ("Entity", "left"), ("Loaded", "right"), ("Expected", "right"), ("Status", "right")]
    rows = []
    for index, summary in enumerate(summaries):
        label = COMPLETION_LABELS[summary.status]
        bg = f"background-color: {_zebra(index)};"
        number = f"{TD_STYLE} {bg} text-align: right; font-weight: 600; color: #006A4E;"
        rows.append(
            "<tr>"
            f'<td style="{TD_STYLE} {bg}">{escape(summary.asset_class)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(summary.product)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(summary.entity)}</td>'
            f'<td style="{number}">{fmt_int(summary.loaded_count)}</td>'
            f'<td style="{number}">{fmt_int(summary.expected_count)}</td>'
            f'<td style="{TD_STYLE} {bg} text-align: right;" class="{label.css}">{label.render()}</td>'
            "</tr>"
        )
    table = f"{TABLE_OPEN}<thead><tr>{_header_cells(headers)}</tr></thead><tbody>{''.join(rows)}</tbody></table>"
    return _row(heading + table)


def render_email_chart(window_days: int) -> str:
    content = (
        f'<h2 style="{H2_STYLE}">📈 {window_days}-Day Load Status Trend</h2>'
        f'<img {CHART_SRC} alt="Batch Status Chart" width="800" style="max-width: 100%; height: auto;"/>'
        f'<p style="font-size: 12px; color: #666; margin-top: 15px; {FONT}">'
        "Green: Successfully loaded batches | Red: Missing/failed batches</p>"
    )
    return _row(content, f"{SECTION_STYLE} text-align: center; background-color: #fafafa;", ' bgcolor="#fafafa"')


def render_email_details(exceptions: Sequence[ScenarioDetail], total: int, limit: int) -> str:
    heading = f'<h2 style="{H2_STYLE}">📄 Key Scenario Details</h2>'
    if not exceptions:
        message = f'<div style="text-align: center; padding: 20px; color: #4caf50; font-weight: bold; {FONT}">✅ All expected scenarios loaded successfully!</div>'
        return _row(heading + message)
    shown = exceptions[:limit]
    note = "Some scenarios are missing or unexpected."
    if total > len(shown):
        note += f" Showing the first {len(shown)} of {total}."
    banner = f'<div style="background-color: #fff3cd; border-left: 4px solid #ffc107; padding: 15px; margin-bottom: 20px; {FONT}"><strong>Attention Required:</strong> {note}</div>'
    headers = [("Asset Class", "left"), ("Product", "left"), ("Entity", "left"), ("Scenario", "left"), ("Status", "left")]
    rows = []
    for index, detail in enumerate(shown):
        label = SCENARIO_LABELS[detail.status]
        bg = f"background-color: {_zebra(index)};"
        rows.append(
            "<tr>"
            f'<td style="{TD_STYLE} {bg}">{escape(detail.asset_class)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(detail.product)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(detail.entity)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(detail.scenario)}</td>'
            f'<td style="{TD_STYLE} {bg}" class="{label.css}">{label.render()}</td>'
            "</tr>"
        )
    table = f"{TABLE_OPEN}<thead><tr>{_header_cells(headers)}</tr></thead><tbody>{''.join(rows)}</tbody></table>"
    return _row(heading + banner + table)


def render_email_backdated(backdated: Sequence[BackdatedScenario], lookback_days: int) -> str:
    heading = f'<h2 style="{H2_STYLE}">🔄 Recently Loaded Backdated Scenarios</h2>'
    if not backdated:
        return _row(heading + f'<div style="{EMPTY_STYLE}">No backdated scenarios loaded in the last {lookback_days} days</div>')
    note = f'<div style="background-color: #e8f5f1; border-left: 4px solid #00A693; padding: 15px; margin-bottom: 20px; {FONT}"><strong>Note:</strong> {BACKDATED_NOTE}</div>'
    headers = [
        ("Asset Class", "left"),
        ("Product", "left"),
        ("Entity", "left"),
        ("Scenario", "left"),
        ("Batch Date", "left"),
        ("Days Late", "right"),
    ]
    rows = []
    for index, item in enumerate(backdated):
        severity = SEVERITY_LABELS[item.late_severity]
        bg = f"background-color: {_zebra(index)};"
        rows.append(
            "<tr>"
            f'<td style="{TD_STYLE} {bg}">{escape(item.asset_class)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(item.product)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(item.entity)}</td>'
            f'<td style="{TD_STYLE} {bg}">{escape(item.scenario)}</td>'
            f'<td style="{TD_STYLE} {bg}">{item.batch_date.isoformat()}</td>'
            f'<td style="{TD_STYLE} {bg} text-align: right; font-weight: 600;" class="{severity.css}">{item.days_late}</td>'
            "</tr>"
        )
    table = f"{TABLE_OPEN}<thead><tr>{_header_cells(headers)}</tr></thead><tbody>{''.join(rows)}</tbody></table>"
    return _row(heading + note + table)


def render_email_html(
    report: BatchReport,
    *,
    detail_limit: int = 20,
    lookback_days: int = 7,
    generated_on: date | None = None,
) -> str:
    """Email variant of the report.

    Only missing and unexpected scenarios are listed, capped at ``detail_limit``
    rows to keep messages short.
    """
    exceptions = list(report.iter_exceptions())
    footer = (
        f'<p style="margin: 0 0 10px 0;">Report generated on {long_date(generated_on or date.today())} | Trade Surveillance</p>'
        f'<p style="margin: 0;">{FOOTER_CONTACT}</p>'
    )
    rows = "".join(
        [
            render_email_header(report.batch_date),
            render_email_overview(report.overview),
            render_email_summary(report.summaries),
            render_email_chart(len(report.daily_counts) or 120),
            render_email_details(exceptions, len(exceptions), detail_limit),
            render_email_backdated(report.backdated, lookback_days),
            _row(footer, f"background-color: #f5f5f5; padding: 20px; text-align: center; font-size: 12px; color: #666; {FONT}", ' bgcolor="#f5f5f5"'),
        ]
    )
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>Batch Load Report - {report.batch_date.isoformat()}</title>\n"
        f"{OUTLOOK_SETTINGS}{EMAIL_STYLES}"
        "</head>\n"
        f'<body style="margin: 0; padding: 0; background-color: white; {FONT}" bgcolor="white">\n'
        '<table cellpadding="0" cellspacing="0" border="0" width="100%" bgcolor="white"><tr>'
        '<td align="center" style="padding: 20px;">\n'
        '<table cellpadding="0" cellspacing="0" border="0" width="900" class="main-table" '
        'style="max-width: 95%; background-color: white;" bgcolor="white">\n'
        f"{rows}"
        "</table>\n</td></tr></table>\n"
        "</body>\n</html>"
    )
