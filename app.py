"""Streamlit front-end for the batch load report."""
from __future__ import annotations

from datetime import date, timedelta

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from batch_report import (
    ExportEmlUseCase,
    GenerateReportUseCase,
    PreviewReportUseCase,
    ReportContext,
    SendReportUseCase,
)
from batch_report.application.archive.use_cases import ArchiveReportUseCase
from batch_report.cli import build_repository
from batch_report.config import load_settings
from batch_report.demo import demo_repository
from batch_report.domain.results import BatchReport
from batch_report.errors import BatchReportError
from batch_report.infrastructure.archive.file_repository import FileSystemArchiveRepository
from batch_report.infrastructure.mail.smtp_mailer import SmtpMailer
from batch_report.infrastructure.storage.catalog_store import load_catalog
from batch_report.presentation.tabular import (
    backdated_to_rows,
    details_to_rows,
    render_csv,
    summaries_to_rows,
)


st.set_page_config(page_title="Batch Load Report", layout="wide")
st.title("Surveillance Data Load Report")


def build_context(batch_date: date, use_demo: bool) -> ReportContext:
    settings = load_settings()
    catalog = load_catalog(settings.catalog_path)
    repository = demo_repository(catalog, batch_date) if use_demo else build_repository(settings)
    return ReportContext(repository=repository, catalog=catalog, settings=settings)


def daily_counts_dataframe(report: BatchReport) -> pd.DataFrame:
    return pd.DataFrame(
        [{"date": c.date, "loaded": c.loaded_count, "missing": c.missing_count} for c in report.daily_counts]
    ).set_index("date")


with st.sidebar:
    batch_date = st.date_input("Batch date", value=date.today() - timedelta(days=1))
    use_demo = st.checkbox("Use simulated data", value=False)
    email_safe = st.checkbox("Email-client preview", value=False)

context = build_context(batch_date, use_demo)
report = GenerateReportUseCase(context).execute(batch_date)
overview = report.overview

cols = st.columns(6)
cols[0].metric("Scenarios loaded", f"{overview.total_loaded:,d}")
cols[1].metric("Expected scenarios", f"{overview.total_expected:,d}")
cols[2].metric("Completion rate", f"{overview.completion_rate:.1f}%")
cols[3].metric("Complete groups", overview.complete_groups)
cols[4].metric("Missing scenarios", overview.missing_scenarios)
cols[5].metric("Unexpected scenarios", overview.unexpected_scenarios)

tabs = st.tabs(["Load Summary", "Scenario Details", "Trend", "Backdated", "Preview"])
with tabs[0]:
    summary_rows = summaries_to_rows(report.summaries)
    st.dataframe(pd.DataFrame(summary_rows), use_container_width=True, hide_index=True)
    st.download_button(
        "Download summary CSV",
        data=render_csv(summary_rows),
        file_name=f"batch-summary-{batch_date.isoformat()}.csv",
        mime="text/csv",
    )
with tabs[1]:
    only_exceptions = st.checkbox("Only missing / unexpected", value=True)
    details = list(report.iter_exceptions()) if only_exceptions else report.details
    st.dataframe(pd.DataFrame(details_to_rows(details)), use_container_width=True, hide_index=True)
with tabs[2]:
    st.bar_chart(daily_counts_dataframe(report), color=["#4CAF50", "#F44336"])
with tabs[3]:
    if report.backdated:
        st.dataframe(pd.DataFrame(backdated_to_rows(report.backdated)), use_container_width=True, hide_index=True)
    else:
        st.info(f"No backdated scenarios loaded in the last {context.settings.report.backdated_lookback_days} days")
with tabs[4]:
    html = PreviewReportUseCase(context).execute(batch_date, email_safe=email_safe)
    components.html(html, height=900, scrolling=True)
    st.download_button(
        "Download .eml",
        data=ExportEmlUseCase(context).execute(batch_date) if context.settings.mail.recipients else b"",
        file_name=f"batch-report-{batch_date.isoformat()}.eml",
        mime="message/rfc822",
        disabled=not context.settings.mail.recipients,
    )

st.divider()
send_clicked = st.button("Send report", disabled=not context.settings.mail.recipients)
if send_clicked:
    archive = None
    if context.settings.enable_history:
        archive = ArchiveReportUseCase(repository=FileSystemArchiveRepository(context.settings.history_dir))
    with st.spinner("Sending..."):
        try:
            delivery = SendReportUseCase(context, SmtpMailer(context.settings.mail), archive).execute(batch_date)
        except BatchReportError as exc:
            st.error(str(exc))
        else:
            st.success(f"Batch report sent to {len(delivery.recipients)} recipients for {batch_date.isoformat()}")
