"""Storage helpers for the expected scenario catalog."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from batch_report.domain.catalog import ExpectedCatalog
from batch_report.domain.models import ExpectedScenario
from batch_report.errors import RecordSourceError
from batch_report.infrastructure.parsing.utils import (
    canonical_column,
    clean_text,
    read_table,
    require_columns,
)
from batch_report.infrastructure.storage.expected_scenarios import EXPECTED_SCENARIOS

CATALOG_COLUMNS = ("asset_class", "product", "entity", "scenario")


def _normalize_rows(rows: Iterable[Any]) -> list[ExpectedScenario]:
    scenarios: list[ExpectedScenario] = []
    for row in rows:
        values = tuple(clean_text(value) for value in row)
        if not any(values):
            continue
        if not all(values):
            raise RecordSourceError(f"Incomplete catalog row: {values!r}")
        scenarios.append(ExpectedScenario(*values))
    return scenarios


def default_catalog() -> ExpectedCatalog:
    return ExpectedCatalog(_normalize_rows(EXPECTED_SCENARIOS))


def _json_rows(path: Path) -> list[tuple[object, ...]]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RecordSourceError(f"Catalog {path} is not valid JSON") from exc
    if not isinstance(data, list):
        raise RecordSourceError(f"Catalog {path} must be a list of scenarios")
    rows: list[tuple[object, ...]] = []
    for item in data:
        if isinstance(item, dict):
            normalized = {canonical_column(key): value for key, value in item.items()}
            rows.append(tuple(normalized.get(column) for column in CATALOG_COLUMNS))
        else:
            rows.append(tuple(item))
    return rows


def load_catalog(path: Path | None = None) -> ExpectedCatalog:
    """Load the embedded catalog, or replace it with a CSV/XLSX/JSON file."""
    if path is None:
        return default_catalog()
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog not found at {catalog_path}")
    if catalog_path.suffix.lower() == ".json":
        return ExpectedCatalog(_normalize_rows(_json_rows(catalog_path)))
    df = read_table(catalog_path)
    require_columns(df, CATALOG_COLUMNS, str(catalog_path))
    return ExpectedCatalog(_normalize_rows(df[list(CATALOG_COLUMNS)].itertuples(index=False, name=None)))
