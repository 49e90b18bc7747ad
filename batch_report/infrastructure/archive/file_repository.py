"""Filesystem repository for archiving sent reports."""
from __future__ import annotations

import hashlib
import json
import logging
import re
from pathlib import Path

from batch_report.domain.archive.entities import (
    ArchiveFile,
    ArchiveReceipt,
    ReportArchiveRequest,
)

LOGGER = logging.getLogger(__name__)


def normalize_run_id(run_id: str) -> str:
    """Collapse timestamps such as ``2024/10/05 10:15:00`` to ``20241005_101500``."""
    if not run_id:
        return "run"
    digits = re.findall(r"\d", run_id)
    if len(digits) >= 14:
        normalized = "".join(digits[:8]) + "_" + "".join(digits[8:14])
        return normalized + "".join(digits[14:])
    sanitized = re.sub(r"[^0-9A-Za-z_-]+", "", run_id.strip())
    return sanitized or "run"


class FileSystemArchiveRepository:
    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def save(self, request: ReportArchiveRequest) -> ArchiveReceipt:
        run_id = normalize_run_id(request.run_id)
        run_dir = self._root / run_id
        run_dir.mkdir(parents=True, exist_ok=True)

        for archive_file in request.files:
            (run_dir / Path(archive_file.name).name).write_bytes(archive_file.content)

        manifest = {
            "run_id": run_id,
            "batch_date": request.batch_date.isoformat(),
            "subject": request.subject,
            "files": [self._manifest_entry(archive_file) for archive_file in request.files],
        }
        (run_dir / "manifest.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        LOGGER.info("Archived report for %s to %s", request.batch_date, run_dir)
        return ArchiveReceipt(run_id=run_id, location=run_dir)

    @staticmethod
    def _manifest_entry(archive_file: ArchiveFile) -> dict[str, object]:
        return {
            "name": Path(archive_file.name).name,
            "bytes": len(archive_file.content),
            "sha256": hashlib.sha256(archive_file.content).hexdigest(),
        }
