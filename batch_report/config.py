"""Central configuration for the batch report package."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from batch_report.errors import ConfigurationError

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = BASE_DIR / "configs" / "batch_report.yml"
DEFAULT_HISTORY_DIR = BASE_DIR / "history"

ENV_PREFIX = "BATCH_REPORT_"
TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class MailSettings:
    from_address: str = "reports@company.com"
    from_name: str = "Trade Surveillance Reports"
    recipients: tuple[str, ...] = ()
    smtp_host: str = "localhost"
    smtp_port: int = 25
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_use_tls: bool = False
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class ReportSettings:
    trend_window_days: int = 120
    backdated_lookback_days: int = 7
    backdated_limit: int = 50
    email_detail_limit: int = 20
    chart_sample_every: int = 10
    chart_width_px: int = 800
    chart_height_px: int = 400


@dataclass(frozen=True)
class Settings:
    mail: MailSettings = field(default_factory=MailSettings)
    report: ReportSettings = field(default_factory=ReportSettings)
    database_url: str = "sqlite:///batch_records.db"
    records_path: Path | None = None
    catalog_path: Path | None = None
    enable_history: bool = False
    history_dir: Path = DEFAULT_HISTORY_DIR


def _load_mapping(path: Path) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yml", ".yaml"}:
        payload = yaml.safe_load(text) or {}
    else:
        payload = json.loads(text)
    if not isinstance(payload, Mapping):
        raise ConfigurationError(f"Configuration at {path} must map keys to values")
    return payload


def _optional_path(value: object, base: Path) -> Path | None:
    if value in (None, ""):
        return None
    path = Path(str(value))
    return path if path.is_absolute() else base / path


def _flag(value: object, name: str) -> bool:
    if value is None or isinstance(value, bool):
        return bool(value)
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be true or false, got {value!r}")


def _recipients(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = [str(item) for item in value]
    return tuple(item.strip() for item in items if item.strip())


def settings_from_mapping(payload: Mapping[str, Any], base: Path = BASE_DIR) -> Settings:
    mail_block = payload.get("email") or {}
    report_block = payload.get("report") or {}
    history_block = payload.get("history") or {}
    defaults_mail = MailSettings()
    defaults_report = ReportSettings()

    mail = MailSettings(
        from_address=str(mail_block.get("from_address", defaults_mail.from_address)),
        from_name=str(mail_block.get("from_name", defaults_mail.from_name)),
        recipients=_recipients(mail_block.get("recipients")),
        smtp_host=str(mail_block.get("smtp_host", defaults_mail.smtp_host)),
        smtp_port=int(mail_block.get("smtp_port", defaults_mail.smtp_port)),
        smtp_username=mail_block.get("smtp_username") or None,
        smtp_password=mail_block.get("smtp_password") or None,
        smtp_use_tls=_flag(mail_block.get("smtp_use_tls", defaults_mail.smtp_use_tls), "email.smtp_use_tls"),
        timeout_seconds=float(mail_block.get("timeout_seconds", defaults_mail.timeout_seconds)),
    )
    report = ReportSettings(
        **{name: int(report_block.get(name, getattr(defaults_report, name))) for name in defaults_report.__dataclass_fields__}
    )
    for name in defaults_report.__dataclass_fields__:
        if getattr(report, name) < 1:
            raise ConfigurationError(f"report.{name} must be at least 1")

    return Settings(
        mail=mail,
        report=report,
        database_url=str(payload.get("database_url", Settings.database_url)),
        records_path=_optional_path(payload.get("records_path"), base),
        catalog_path=_optional_path(payload.get("catalog_path"), base),
        enable_history=_flag(history_block.get("enabled", False), "history.enabled"),
        history_dir=_optional_path(history_block.get("dir"), base) or DEFAULT_HISTORY_DIR,
    )


def apply_env_overrides(settings: Settings, environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    mail = settings.mail
    if f"{ENV_PREFIX}SMTP_HOST" in env:
        mail = replace(mail, smtp_host=env[f"{ENV_PREFIX}SMTP_HOST"])
    if f"{ENV_PREFIX}SMTP_PORT" in env:
        mail = replace(mail, smtp_port=int(env[f"{ENV_PREFIX}SMTP_PORT"]))
    if f"{ENV_PREFIX}SMTP_PASSWORD" in env:
        mail = replace(mail, smtp_password=env[f"{ENV_PREFIX}SMTP_PASSWORD"])
    if f"{ENV_PREFIX}RECIPIENTS" in env:
        mail = replace(mail, recipients=_recipients(env[f"{ENV_PREFIX}RECIPIENTS"]))
    database_url = env.get(f"{ENV_PREFIX}DATABASE_URL", settings.database_url)
    return replace(settings, mail=mail, database_url=database_url)


def load_settings(path: Path | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings from YAML/JSON, then apply ``BATCH_REPORT_*`` environment overrides.

    The default config file is optional; an explicitly requested one must exist.
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration not found at {config_path}")
    else:
        config_path = DEFAULT_CONFIG_PATH

    if config_path.exists():
        settings = settings_from_mapping(_load_mapping(config_path), base=config_path.parent)
    else:
        settings = Settings()
    return apply_env_overrides(settings, environ)
