"""Application services orchestrating report generation and delivery."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Callable

from batch_report.application.archive.use_cases import ArchiveReportUseCase
from batch_report.application.dto import ReportDelivery
from batch_report.application.ports import ChartRenderer, Mailer
from batch_report.config import Settings
from batch_report.domain.archive.entities import ArchiveFile, ReportArchiveRequest
from batch_report.domain.catalog import ExpectedCatalog
from batch_report.domain.repositories import BatchRecordRepository
from batch_report.domain.results import BatchReport
from batch_report.domain.services import BackdatedScenarioFinder, ReconciliationEngine, TrendAggregator
from batch_report.errors import ReportGenerationError
from batch_report.infrastructure.charts.status_chart import render_status_chart
from batch_report.infrastructure.mail.smtp_mailer import build_subject, render_eml
from batch_report.presentation.email_report import render_email_html
from batch_report.presentation.html_report import embed_chart, render_report_html

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ReportContext:
    repository: BatchRecordRepository
    catalog: ExpectedCatalog
    settings: Settings = field(default_factory=Settings)
    today: Callable[[], date] = date.today
    chart_renderer: ChartRenderer = render_status_chart


def _remove_quietly(path: Path | None) -> None:
    if path is None:
        return
    try:
        path.unlink(missing_ok=True)
    except OSError:
        LOGGER.warning("Could not delete temporary chart %s", path, exc_info=True)


class GenerateReportUseCase:
    def __init__(self, context: ReportContext) -> None:
        self._context = context

    def execute(self, batch_date: date) -> BatchReport:
        context = self._context
        report_settings = context.settings.report
        engine = ReconciliationEngine(context.catalog)
        trend = TrendAggregator(context.repository)
        finder = BackdatedScenarioFinder(
            context.repository,
            lookback_days=report_settings.backdated_lookback_days,
            limit=report_settings.backdated_limit,
            today=context.today,
        )

        records = context.repository.find_by_batch_date(batch_date)
        return BatchReport(
            batch_date=batch_date,
            summaries=tuple(engine.compute_group_summaries(records)),
            details=tuple(engine.compute_scenario_details(records)),
            daily_counts=tuple(trend.daily_counts(batch_date, report_settings.trend_window_days)),
            backdated=tuple(finder.find(batch_date)),
        )


class _RenderingUseCase:
    def __init__(self, context: ReportContext) -> None:
        self._context = context
        self._generate = GenerateReportUseCase(context)

    def _email_html(self, report: BatchReport) -> str:
        report_settings = self._context.settings.report
        return render_email_html(
            report,
            detail_limit=report_settings.email_detail_limit,
            lookback_days=report_settings.backdated_lookback_days,
            generated_on=self._context.today(),
        )

    def _render_chart(self, report: BatchReport) -> Path:
        report_settings = self._context.settings.report
        return self._context.chart_renderer(
            report.daily_counts,
            sample_every=report_settings.chart_sample_every,
            width_px=report_settings.chart_width_px,
            height_px=report_settings.chart_height_px,
        )

    def _chart_bytes(self, report: BatchReport) -> bytes:
        chart_path: Path | None = None
        try:
            chart_path = self._render_chart(report)
            return chart_path.read_bytes()
        finally:
            _remove_quietly(chart_path)


class PreviewReportUseCase(_RenderingUseCase):
    """Report HTML with the chart embedded as a data URL."""

    def execute(self, batch_date: date, email_safe: bool = False) -> str:
        report = self._generate.execute(batch_date)
        if email_safe:
            html = self._email_html(report)
        else:
            html = render_report_html(
                report,
                generated_on=self._context.today(),
                lookback_days=self._context.settings.report.backdated_lookback_days,
            )
        return embed_chart(html, self._chart_bytes(report))


class ExportEmlUseCase(_RenderingUseCase):
    def execute(self, batch_date: date) -> bytes:
        report = self._generate.execute(batch_date)
        return render_eml(
            self._context.settings.mail,
            build_subject(batch_date),
            self._email_html(report),
            self._chart_bytes(report),
        )


class SendReportUseCase(_RenderingUseCase):
    """Generate, render, chart and mail the report, then optionally archive a copy.

    Any failure is logged and re-raised as a single ``ReportGenerationError``;
    the temporary chart is removed either way. Archiving runs after the mail is
    sent and only logs its own failures.
    """

    def __init__(
        self,
        context: ReportContext,
        mailer: Mailer,
        archive: ArchiveReportUseCase | None = None,
    ) -> None:
        super().__init__(context)
        self._mailer = mailer
        self._archive = archive

    def execute(self, batch_date: date) -> ReportDelivery:
        chart_path: Path | None = None
        try:
            report = self._generate.execute(batch_date)
            html = self._email_html(report)
            subject = build_subject(batch_date)
            chart_path = self._render_chart(report)
            self._mailer.send(subject, html, chart_path)
            archive_location = self._archive_report(batch_date, subject, html, chart_path)
        except Exception as exc:
            LOGGER.exception("Failed to send batch report for date: %s", batch_date)
            raise ReportGenerationError(batch_date) from exc
        finally:
            _remove_quietly(chart_path)

        recipients = self._context.settings.mail.recipients
        LOGGER.info("Batch report sent successfully for date: %s (%d recipients)", batch_date, len(recipients))
        return ReportDelivery(
            batch_date=batch_date,
            subject=subject,
            recipients=recipients,
            report=report,
            archive_location=archive_location,
        )

    def _archive_report(self, batch_date: date, subject: str, html: str, chart_path: Path) -> Path | None:
        if self._archive is None:
            return None
        try:
            request = ReportArchiveRequest(
                run_id=datetime.now().strftime("%Y%m%d_%H%M%S"),
                batch_date=batch_date,
                subject=subject,
                files=[
                    ArchiveFile(name=f"batch-report-{batch_date.isoformat()}.html", content=html.encode("utf-8")),
                    ArchiveFile(name="chart.png", content=chart_path.read_bytes()),
                ],
            )
            return self._archive.execute(request).location
        except OSError:
            # mail is already sent at this point
            LOGGER.warning("Could not archive batch report for date: %s", batch_date, exc_info=True)
            return None
