"""Archive application use cases."""
from __future__ import annotations

from dataclasses import dataclass

from batch_report.domain.archive.entities import ArchiveReceipt, ReportArchiveRequest
from batch_report.infrastructure.archive.file_repository import FileSystemArchiveRepository


@dataclass(slots=True)
class ArchiveReportUseCase:
    repository: FileSystemArchiveRepository

    def execute(self, request: ReportArchiveRequest) -> ArchiveReceipt:
        return self.repository.save(request)
