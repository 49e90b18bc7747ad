from datetime import date, timedelta

import pytest

from batch_report.domain.models import (
    BackdatedScenario,
    CompletionStatus,
    DailyStatusCount,
    GroupSummary,
    ScenarioDetail,
)
from batch_report.domain.results import BatchReport
from batch_report.presentation.email_report import render_email_html
from batch_report.presentation.html_report import embed_chart, render_report_html
from batch_report.presentation.labels import long_date
from batch_report.presentation.tabular import render_csv, summaries_to_rows

BATCH_DATE = date(2024, 12, 15)


def _missing(i: int) -> ScenarioDetail:
    return ScenarioDetail("Equity", "US Large Cap", "Entity A", f"Scenario {i:02d}", is_loaded=False, is_expected=True)


@pytest.fixture
def report() -> BatchReport:
    return BatchReport(
        batch_date=BATCH_DATE,
        summaries=(
            GroupSummary("Equity", "<Large & Cap>", "Entity A", 1, 2, CompletionStatus.INCOMPLETE),
        ),
        details=(
            ScenarioDetail("Equity", "<Large & Cap>", "Entity A", "Base", is_loaded=True, is_expected=True),
            ScenarioDetail("Equity", "<Large & Cap>", "Entity A", "Stress", is_loaded=False, is_expected=True),
        ),
        daily_counts=tuple(
            DailyStatusCount(BATCH_DATE - timedelta(days=n), 1, 0) for n in range(119, -1, -1)
        ),
        backdated=(
            BackdatedScenario("Equity", "US Large Cap", "Entity B", "Base", date(2024, 12, 10), date(2024, 12, 14)),
        ),
    )


def test_long_date():
    assert long_date(BATCH_DATE) == "December 15, 2024"


def test_report_html(report):
    html = render_report_html(report, generated_on=BATCH_DATE)

    assert "<title>Batch Load Report - 2024-12-15</title>" in html
    assert "December 15, 2024" in html
    assert "&lt;Large &amp; Cap&gt;" in html
    assert "<Large & Cap>" not in html
    assert 'src="cid:statusChart"' in html
    assert "120-Day Load Status Trend" in html
    assert "50%" in html
    assert "Incomplete" in html


def test_report_html_empty_states():
    html = render_report_html(BatchReport(BATCH_DATE), generated_on=BATCH_DATE, lookback_days=7)
    assert "No data loaded for this batch date" in html
    assert "No scenario details available" in html
    assert "No backdated scenarios loaded in the last 7 days" in html


def test_email_lists_only_exceptions(report):
    html = render_email_html(report, generated_on=BATCH_DATE)
    assert "Stress" in html
    assert "Attention Required" in html
    assert 'src="cid:statusChart"' in html
    assert "<script" not in html


def test_email_caps_detail_rows():
    details = tuple(_missing(i) for i in range(25))
    html = render_email_html(BatchReport(BATCH_DATE, details=details), detail_limit=20, generated_on=BATCH_DATE)
    assert "Scenario 19" in html
    assert "Scenario 20" not in html
    assert "Showing the first 20 of 25." in html


def test_email_all_loaded_message():
    details = (ScenarioDetail("Equity", "US Large Cap", "Entity A", "Base", is_loaded=True, is_expected=True),)
    html = render_email_html(BatchReport(BATCH_DATE, details=details), generated_on=BATCH_DATE)
    assert "All expected scenarios loaded successfully!" in html


def test_embed_chart_replaces_cid(report):
    html = embed_chart(render_report_html(report, generated_on=BATCH_DATE), b"png")
    assert "cid:statusChart" not in html
    assert 'src="data:image/png;base64,cG5n"' in html


def test_summary_csv(report):
    content = render_csv(summaries_to_rows(report.summaries)).decode("utf-8")
    header, row = content.splitlines()
    assert header == "asset_class,product,entity,loaded,expected,missing,completion,status"
    assert row.endswith(",1,2,1,50%,Incomplete")
    assert render_csv([]) == b""
