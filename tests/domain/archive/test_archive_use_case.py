import json
from datetime import date
from pathlib import Path

import pytest

from batch_report.application.archive.use_cases import ArchiveReportUseCase
from batch_report.domain.archive.entities import ArchiveFile, ReportArchiveRequest
from batch_report.infrastructure.archive.file_repository import FileSystemArchiveRepository


@pytest.fixture
def repo(tmp_path: Path) -> FileSystemArchiveRepository:
    root = tmp_path / "history"
    return FileSystemArchiveRepository(root)


def test_archive_use_case_creates_run_directory(repo: FileSystemArchiveRepository, tmp_path: Path) -> None:
    use_case = ArchiveReportUseCase(repository=repo)
    request = ReportArchiveRequest(
        run_id="20241215_183000",
        batch_date=date(2024, 12, 15),
        subject="Batch Load Report - 2024-12-15",
        files=[
            ArchiveFile(name="batch-report-2024-12-15.html", content=b"<html></html>"),
            ArchiveFile(name="chart.png", content=b"png-bytes"),
        ],
    )

    receipt = use_case.execute(request)

    run_dir = tmp_path / "history" / "20241215_183000"
    assert run_dir.is_dir()
    assert (run_dir / "batch-report-2024-12-15.html").read_bytes() == b"<html></html>"
    assert (run_dir / "chart.png").read_bytes() == b"png-bytes"

    manifest = json.loads((run_dir / "manifest.json").read_text())
    assert manifest["run_id"] == "20241215_183000"
    assert manifest["batch_date"] == "2024-12-15"
    assert {entry["name"] for entry in manifest["files"]} == {"batch-report-2024-12-15.html", "chart.png"}
    assert all(len(entry["sha256"]) == 64 for entry in manifest["files"])

    assert receipt.run_id == "20241215_183000"
    assert receipt.location == run_dir


def test_archive_use_case_normalizes_run_id(repo: FileSystemArchiveRepository, tmp_path: Path) -> None:
    use_case = ArchiveReportUseCase(repository=repo)
    request = ReportArchiveRequest(
        run_id=" 2024/12/15 18:30:00 ",
        batch_date=date(2024, 12, 15),
        subject="Batch Load Report - 2024-12-15",
        files=[ArchiveFile(name="../chart.png", content=b"png")],
    )

    receipt = use_case.execute(request)

    expected_dir = tmp_path / "history" / "20241215_183000"
    assert receipt.location == expected_dir
    assert (expected_dir / "chart.png").read_bytes() == b"png"
    manifest = json.loads((expected_dir / "manifest.json").read_text())
    assert manifest["files"][0]["bytes"] == 3
