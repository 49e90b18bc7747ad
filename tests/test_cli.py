from pathlib import Path

from batch_report.cli import main


def _config(tmp_path: Path) -> Path:
    path = tmp_path / "report.yml"
    path.write_text("email:\n  recipients: [ops@example.com]\n")
    return path


def test_summary_with_demo_data(tmp_path: Path, capsys):
    exit_code = main(["--config", str(_config(tmp_path)), "--demo", "summary", "2024-12-15"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Batch Load Summary for 2024-12-15" in out
    assert "Unexpected scenarios: 1" in out
    assert "Entity C / Base" in out


def test_preview_writes_html(tmp_path: Path):
    output = tmp_path / "report.html"
    exit_code = main(["--config", str(_config(tmp_path)), "--demo", "preview", "2024-12-15", "--output", str(output)])

    assert exit_code == 0
    html = output.read_text(encoding="utf-8")
    assert "Batch Load Report - 2024-12-15" in html
    assert "data:image/png;base64," in html


def test_missing_config_fails(tmp_path: Path):
    assert main(["--config", str(tmp_path / "absent.yml"), "summary", "2024-12-15"]) == 1


def test_summary_against_fresh_sqlite_store(tmp_path: Path, capsys):
    config = tmp_path / "report.yml"
    config.write_text(f"database_url: sqlite:///{(tmp_path / 'records.db').as_posix()}\n")

    exit_code = main(["--config", str(config), "summary", "2024-12-15"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Scenarios loaded: 0" in out
    assert "Missing scenarios: 72" in out


def test_unreachable_store_fails_cleanly(tmp_path: Path):
    config = tmp_path / "report.yml"
    config.write_text(f"database_url: sqlite:///{(tmp_path / 'absent' / 'records.db').as_posix()}\n")

    assert main(["--config", str(config), "summary", "2024-12-15"]) == 1
