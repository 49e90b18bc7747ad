"""Command-line entrypoint for the batch load report."""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from batch_report.application.archive.use_cases import ArchiveReportUseCase
from batch_report.application.use_cases import (
    ExportEmlUseCase,
    GenerateReportUseCase,
    PreviewReportUseCase,
    ReportContext,
    SendReportUseCase,
)
from batch_report.config import Settings, load_settings
from batch_report.demo import demo_repository
from batch_report.domain.repositories import BatchRecordRepository
from batch_report.domain.results import BatchReport
from batch_report.errors import BatchReportError
from batch_report.infrastructure.archive.file_repository import FileSystemArchiveRepository
from batch_report.infrastructure.mail.smtp_mailer import SmtpMailer
from batch_report.infrastructure.repositories.file_repositories import FileBatchRecordRepository
from batch_report.infrastructure.repositories.sql_repository import SqlBatchRecordRepository
from batch_report.infrastructure.storage.catalog_store import load_catalog
from batch_report.presentation.labels import COMPLETION_LABELS, SCENARIO_LABELS, SEVERITY_LABELS

LOGGER = logging.getLogger(__name__)
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compile and send the daily batch load report")
    parser.add_argument("--config", type=Path, help="Path to a YAML or JSON settings file")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--demo", action="store_true", help="Use seeded simulated records instead of the store")

    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("summary", "Print the reconciliation summary"),
        ("preview", "Write the report HTML with the chart embedded"),
        ("eml", "Write the report email as an .eml file"),
        ("send", "Email the report to the configured recipients"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("batch_date", type=date.fromisoformat, help="Batch date (YYYY-MM-DD)")
        if name in {"preview", "eml"}:
            command.add_argument("--output", type=Path, help="Output file (default depends on command)")
        if name == "preview":
            command.add_argument("--email-safe", action="store_true", help="Render the email-client variant")
    return parser.parse_args(argv)


def build_repository(settings: Settings) -> BatchRecordRepository:
    if settings.records_path is not None:
        return FileBatchRecordRepository(settings.records_path)
    repository = SqlBatchRecordRepository(settings.database_url)
    # A fresh local SQLite file has no table yet; shared databases are left alone.
    if repository.engine.dialect.name == "sqlite":
        repository.create_schema()
    return repository


def build_context(args: argparse.Namespace) -> ReportContext:
    settings = load_settings(args.config)
    catalog = load_catalog(settings.catalog_path)
    if args.demo:
        repository: BatchRecordRepository = demo_repository(catalog, args.batch_date)
    else:
        repository = build_repository(settings)
    return ReportContext(repository=repository, catalog=catalog, settings=settings)


def print_summary(report: BatchReport) -> None:
    overview = report.overview
    print(f"Batch Load Summary for {report.batch_date.isoformat()}")
    print("=====================================")
    print(f"Scenarios loaded: {overview.total_loaded}")
    print(f"Expected scenarios: {overview.total_expected}")
    print(f"Completion rate: {overview.completion_rate:.1f}%")
    print(f"Complete groups: {overview.complete_groups}/{len(report.summaries)}")
    print(f"Missing scenarios: {overview.missing_scenarios}")
    print(f"Unexpected scenarios: {overview.unexpected_scenarios}")

    incomplete = [s for s in report.summaries if not s.is_complete]
    if incomplete:
        print("\nGroups needing attention:")
        for summary in incomplete:
            label = COMPLETION_LABELS[summary.status].text
            print(
                f"- {summary.asset_class} / {summary.product} / {summary.entity}: "
                f"{summary.loaded_count}/{summary.expected_count} ({label})"
            )
    exceptions = list(report.iter_exceptions())
    if exceptions:
        print("\nScenario exceptions:")
        for detail in exceptions:
            label = SCENARIO_LABELS[detail.status].text
            print(f"- {label}: {detail.asset_class} / {detail.product} / {detail.entity} / {detail.scenario}")
    if report.backdated:
        print("\nRecently loaded backdated scenarios:")
        for item in report.backdated:
            severity = SEVERITY_LABELS[item.late_severity].text
            print(
                f"- {item.asset_class} / {item.product} / {item.entity} / {item.scenario}: "
                f"batch {item.batch_date.isoformat()} loaded {item.loaded_date.isoformat()} "
                f"({item.days_late} days late, {severity})"
            )
    if not report.has_issues():
        print("\nAll expected scenarios loaded.")


def run(args: argparse.Namespace) -> int:
    context = build_context(args)
    if args.command == "summary":
        print_summary(GenerateReportUseCase(context).execute(args.batch_date))
    elif args.command == "preview":
        html = PreviewReportUseCase(context).execute(args.batch_date, email_safe=args.email_safe)
        output = args.output or Path(f"batch-report-{args.batch_date.isoformat()}.html")
        output.write_text(html, encoding="utf-8")
        print(f"Preview written to {output}")
    elif args.command == "eml":
        content = ExportEmlUseCase(context).execute(args.batch_date)
        output = args.output or Path(f"batch-report-{args.batch_date.isoformat()}.eml")
        output.write_bytes(content)
        print(f"Email written to {output}")
    elif args.command == "send":
        archive = None
        if context.settings.enable_history:
            archive = ArchiveReportUseCase(repository=FileSystemArchiveRepository(context.settings.history_dir))
        delivery = SendReportUseCase(context, SmtpMailer(context.settings.mail), archive).execute(args.batch_date)
        print(f"Batch report sent successfully for {delivery.batch_date.isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    try:
        return run(args)
    except (BatchReportError, FileNotFoundError) as exc:
        LOGGER.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
