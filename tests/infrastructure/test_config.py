from pathlib import Path

import pytest

from batch_report.config import DEFAULT_HISTORY_DIR, Settings, load_settings
from batch_report.errors import ConfigurationError


def test_load_settings_from_yaml(tmp_path: Path):
    path = tmp_path / "report.yml"
    path.write_text(
        "\n".join(
            [
                "records_path: data/records.csv",
                "email:",
                "  recipients: [ops@example.com, risk@example.com]",
                "  smtp_host: mail.example.com",
                "  smtp_port: 587",
                "report:",
                "  trend_window_days: 30",
                "history:",
                "  enabled: true",
                "  dir: archive",
            ]
        )
    )
    settings = load_settings(path, environ={})

    assert settings.mail.recipients == ("ops@example.com", "risk@example.com")
    assert settings.mail.smtp_port == 587
    assert settings.report.trend_window_days == 30
    assert settings.report.backdated_lookback_days == 7
    assert settings.records_path == tmp_path / "data" / "records.csv"
    assert settings.enable_history
    assert settings.history_dir == tmp_path / "archive"


def test_env_overrides_file_values(tmp_path: Path):
    path = tmp_path / "report.json"
    path.write_text('{"email": {"smtp_host": "file-host"}}')
    settings = load_settings(
        path,
        environ={
            "BATCH_REPORT_SMTP_HOST": "env-host",
            "BATCH_REPORT_RECIPIENTS": "a@example.com, b@example.com",
            "BATCH_REPORT_DATABASE_URL": "sqlite://",
        },
    )
    assert settings.mail.smtp_host == "env-host"
    assert settings.mail.recipients == ("a@example.com", "b@example.com")
    assert settings.database_url == "sqlite://"


def test_explicit_missing_config_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "absent.yml", environ={})


def test_invalid_config_shape(tmp_path: Path):
    path = tmp_path / "report.yml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigurationError):
        load_settings(path, environ={})


def test_defaults():
    settings = Settings()
    assert settings.report.trend_window_days == 120
    assert settings.report.email_detail_limit == 20
    assert settings.mail.recipients == ()
    assert settings.history_dir == DEFAULT_HISTORY_DIR


@pytest.mark.parametrize("name", ["trend_window_days", "backdated_lookback_days", "chart_sample_every"])
def test_report_windows_must_be_positive(tmp_path: Path, name):
    path = tmp_path / "report.yml"
    path.write_text(f"report:\n  {name}: 0\n")
    with pytest.raises(ConfigurationError, match=name):
        load_settings(path, environ={})


def test_string_flags_are_parsed(tmp_path: Path):
    path = tmp_path / "report.yml"
    path.write_text('email:\n  smtp_use_tls: "false"\nhistory:\n  enabled: "yes"\n')
    settings = load_settings(path, environ={})
    assert settings.mail.smtp_use_tls is False
    assert settings.enable_history is True


def test_unknown_flag_value_is_rejected(tmp_path: Path):
    path = tmp_path / "report.yml"
    path.write_text('history:\n  enabled: "sometimes"\n')
    with pytest.raises(ConfigurationError):
        load_settings(path, environ={})
