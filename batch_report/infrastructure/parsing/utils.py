"""Shared parsing utilities for tabular record and catalog files."""
from __future__ import annotations

import re
from datetime import date, datetime
from io import BytesIO
from pathlib import Path
from typing import Iterable

import pandas as pd

from batch_report.errors import RecordSourceError

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}

COLUMN_ALIASES = {
    "asset_class": "asset_class",
    "assetclass": "asset_class",
    "product": "product",
    "entity": "entity",
    "scenario": "scenario",
    "batch_date": "batch_date",
    "batchdate": "batch_date",
    "date": "batch_date",
    "loaded_at": "loaded_at",
    "loadedat": "loaded_at",
    "loaded_date": "loaded_at",
    "created_at": "loaded_at",
}


def ensure_bytes(source: BytesIO | Path | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, Path):
        return source.read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def canonical_column(name: object) -> str:
    key = re.sub(r"[\s\-]+", "_", str(name).strip().lower())
    return COLUMN_ALIASES.get(key, COLUMN_ALIASES.get(key.replace("_", ""), key))


def read_table(source: BytesIO | Path | bytes, suffix: str = ".csv") -> pd.DataFrame:
    """Read a CSV or Excel table as strings with canonical column names."""
    if isinstance(source, Path):
        suffix = source.suffix
    buffer = BytesIO(ensure_bytes(source))
    if suffix.lower() in EXCEL_SUFFIXES:
        df = pd.read_excel(buffer, engine="openpyxl", dtype=str)
    else:
        df = pd.read_csv(buffer, dtype=str, skipinitialspace=True)
    df = df.rename(columns=canonical_column)
    return df.dropna(how="all")


def require_columns(df: pd.DataFrame, columns: Iterable[str], source: str) -> None:
    missing = [column for column in columns if column not in df.columns]
    if missing:
        raise RecordSourceError(f"{source} is missing required columns: {', '.join(missing)}")


def clean_text(value: object) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    s = str(value).strip()
    return "" if s.upper() == "NAN" else s


def parse_date(value: object) -> date:
    text = clean_text(value)
    if not text:
        raise ValueError("empty date value")
    parsed = pd.to_datetime(text, errors="raise")
    return parsed.date()


def parse_timestamp(value: object) -> datetime | None:
    text = clean_text(value)
    if not text:
        return None
    parsed = pd.to_datetime(text, errors="raise")
    return parsed.to_pydatetime()
