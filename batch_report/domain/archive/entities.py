"""Archive entities for keeping copies of sent reports."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class ArchiveFile:
    name: str
    content: bytes


@dataclass(frozen=True)
class ReportArchiveRequest:
    run_id: str
    batch_date: date
    subject: str
    files: Sequence[ArchiveFile]


@dataclass(frozen=True)
class ArchiveReceipt:
    run_id: str
    location: Path
