from datetime import date
from email import message_from_bytes, policy
from pathlib import Path

import pytest

from batch_report.config import MailSettings
from batch_report.errors import ConfigurationError
from batch_report.infrastructure.mail.smtp_mailer import SmtpMailer, build_message, build_subject, render_eml

SETTINGS = MailSettings(recipients=("ops@example.com", "risk@example.com"))


class FakeSMTP:
    instances: list["FakeSMTP"] = []

    def __init__(self, host, port, timeout=None):
        self.host, self.port, self.timeout = host, port, timeout
        self.calls: list[str] = []
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.calls.append("quit")

    def starttls(self):
        self.calls.append("starttls")

    def login(self, username, password):
        self.calls.append(f"login:{username}")

    def send_message(self, message):
        self.sent.append(message)


def test_subject():
    assert build_subject(date(2024, 12, 15)) == "Batch Load Report - 2024-12-15"


def test_message_carries_inline_chart():
    message = build_message(SETTINGS, "Subject", "<p>report</p>", b"png-bytes")

    assert message["To"] == "ops@example.com, risk@example.com"
    assert "Trade Surveillance Reports" in message["From"]
    html_part = message.get_body(preferencelist=("html",))
    assert "report" in html_part.get_content()
    images = [part for part in message.walk() if part.get_content_type() == "image/png"]
    assert len(images) == 1
    assert images[0]["Content-ID"] == "<statusChart>"
    assert images[0].get_content() == b"png-bytes"


def test_message_requires_recipients():
    with pytest.raises(ConfigurationError):
        build_message(MailSettings(), "Subject", "<p>report</p>")


def test_render_eml_parses_back():
    parsed = message_from_bytes(render_eml(SETTINGS, "Subject", "<p>report</p>"), policy=policy.default)
    assert parsed["Subject"] == "Subject"
    assert parsed.get_body(preferencelist=("plain",)) is not None


def test_smtp_mailer_sends(tmp_path: Path):
    chart = tmp_path / "chart.png"
    chart.write_bytes(b"png")
    settings = MailSettings(
        recipients=("ops@example.com",),
        smtp_host="mail.example.com",
        smtp_port=587,
        smtp_username="svc",
        smtp_password="secret",
        smtp_use_tls=True,
    )
    FakeSMTP.instances.clear()

    SmtpMailer(settings, smtp_factory=FakeSMTP).send("Subject", "<p>report</p>", chart)

    [smtp] = FakeSMTP.instances
    assert (smtp.host, smtp.port) == ("mail.example.com", 587)
    assert smtp.calls == ["starttls", "login:svc", "quit"]
    assert smtp.sent[0]["Subject"] == "Subject"
