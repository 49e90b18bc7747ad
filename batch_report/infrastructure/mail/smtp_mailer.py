"""SMTP delivery of the HTML report with its inline chart."""
from __future__ import annotations

import logging
import smtplib
from datetime import date, datetime, timezone
from email import policy
from email.headerregistry import Address
from email.message import EmailMessage
from email.utils import format_datetime, make_msgid
from pathlib import Path
from typing import Callable

from batch_report.config import MailSettings
from batch_report.errors import ConfigurationError

LOGGER = logging.getLogger(__name__)

CHART_CONTENT_ID = "statusChart"
PLAIN_TEXT_FALLBACK = "This report requires an HTML-capable mail client."


def build_subject(batch_date: date) -> str:
    return f"Batch Load Report - {batch_date.isoformat()}"


def _sender(settings: MailSettings) -> Address:
    username, _, domain = settings.from_address.partition("@")
    return Address(display_name=settings.from_name, username=username, domain=domain)


def build_message(
    settings: MailSettings,
    subject: str,
    html: str,
    chart_png: bytes | None = None,
    *,
    sent_at: datetime | None = None,
) -> EmailMessage:
    if not settings.recipients:
        raise ConfigurationError("No report recipients configured")

    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = _sender(settings)
    message["To"] = ", ".join(settings.recipients)
    message["Date"] = format_datetime(sent_at or datetime.now(timezone.utc))
    message["Message-ID"] = make_msgid(domain=settings.from_address.partition("@")[2] or None)
    message.set_content(PLAIN_TEXT_FALLBACK)
    message.add_alternative(html, subtype="html")
    if chart_png is not None:
        html_part = message.get_payload()[1]
        html_part.add_related(
            chart_png,
            maintype="image",
            subtype="png",
            cid=f"<{CHART_CONTENT_ID}>",
            disposition="inline",
            filename="chart.png",
        )
    return message


def render_eml(settings: MailSettings, subject: str, html: str, chart_png: bytes | None = None) -> bytes:
    """RFC 822 bytes of the report message, suitable for a ``.eml`` download."""
    return build_message(settings, subject, html, chart_png).as_bytes(policy=policy.SMTP)


class SmtpMailer:
    def __init__(
        self,
        settings: MailSettings,
        smtp_factory: Callable[..., smtplib.SMTP] = smtplib.SMTP,
    ) -> None:
        self._settings = settings
        self._smtp_factory = smtp_factory

    def send(self, subject: str, html: str, chart_path: Path | None = None) -> None:
        chart_png = Path(chart_path).read_bytes() if chart_path is not None else None
        message = build_message(self._settings, subject, html, chart_png)
        settings = self._settings
        with self._smtp_factory(settings.smtp_host, settings.smtp_port, timeout=settings.timeout_seconds) as smtp:
            if settings.smtp_use_tls:
                smtp.starttls()
            if settings.smtp_username:
                smtp.login(settings.smtp_username, settings.smtp_password or "")
            smtp.send_message(message)
        LOGGER.info("Sent %r to %d recipients via %s", subject, len(settings.recipients), settings.smtp_host)
