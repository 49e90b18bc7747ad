"""Daily batch load reconciliation and reporting toolkit."""
from batch_report.application.use_cases import (
    ExportEmlUseCase,
    GenerateReportUseCase,
    PreviewReportUseCase,
    ReportContext,
    SendReportUseCase,
)
from batch_report.domain.catalog import ExpectedCatalog
from batch_report.domain.services import BackdatedScenarioFinder, ReconciliationEngine, TrendAggregator
from batch_report.infrastructure.repositories.file_repositories import (
    FileBatchRecordRepository,
    InMemoryBatchRecordRepository,
)
from batch_report.infrastructure.repositories.sql_repository import SqlBatchRecordRepository

__all__ = [
    "BackdatedScenarioFinder",
    "ExpectedCatalog",
    "ExportEmlUseCase",
    "FileBatchRecordRepository",
    "GenerateReportUseCase",
    "InMemoryBatchRecordRepository",
    "PreviewReportUseCase",
    "ReconciliationEngine",
    "ReportContext",
    "SendReportUseCase",
    "SqlBatchRecordRepository",
    "TrendAggregator",
]
