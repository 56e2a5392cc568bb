"""SMTP delivery of task notification emails."""
from __future__ import annotations

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.config import Settings, get_settings
from app.models.schemas import NotificationKind


logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"
DEFAULT_SITE_URL = "http://localhost:5000"

_CONTENT: dict[NotificationKind, dict[str, str]] = {
    NotificationKind.BROADCAST: {
        "subject": "New Project Broadcast: {title}",
        "headline": "New Project Opportunity",
        "tagline": "A task matching your skill set is live.",
        "intro": (
            "A new project matching your skills has been posted on the Cehpoint Work Portal."
        ),
        "cta_label": "Review & Accept Project",
        "footnote": "Broadcasted tasks are filled on a first-come basis.",
    },
    NotificationKind.ASSIGNMENT: {
        "subject": "New Task Assignment: {title}",
        "headline": "You Have Been Assigned a Task",
        "tagline": "A project lead picked you for this task.",
        "intro": "You have been assigned a task on the Cehpoint Work Portal.",
        "cta_label": "Open Task",
        "footnote": "Check the task details and deadline on your dashboard.",
    },
}


class MailDeliveryError(RuntimeError):
    """Raised when the SMTP server could not accept a notification email."""


def resolve_site_url(site_url: str | None) -> str:
    """Return an absolute portal base URL without a trailing slash."""

    url = (site_url or "").strip()
    if not url:
        return DEFAULT_SITE_URL
    if not url.startswith("http"):
        url = f"https://{url}"
    return url.rstrip("/")


class Mailer:
    """Renders and sends broadcast/assignment emails over SMTP."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def build_message(
        self,
        emails: Sequence[str],
        task_title: str,
        kind: NotificationKind | str = NotificationKind.BROADCAST,
    ) -> EmailMessage:
        """Compose a multipart message with every recipient in BCC."""

        kind = NotificationKind(kind)
        content = _CONTENT[kind]
        context: dict[str, Any] = {
            **content,
            "task_title": task_title,
            "tasks_url": f"{resolve_site_url(self.settings.site_url)}/tasks",
        }

        message = EmailMessage()
        # Header values cannot carry CR/LF; the body keeps the title as written.
        subject_title = " ".join(task_title.split())
        message["Subject"] = content["subject"].format(title=subject_title)
        message["From"] = formataddr((self.settings.mail_sender_name, self.settings.smtp_user or ""))
        message["Bcc"] = ", ".join(emails)
        message["Message-ID"] = make_msgid(domain=self._message_id_domain())
        message.set_content(self.jinja_env.get_template("notification.txt").render(context))
        message.add_alternative(
            self.jinja_env.get_template("notification.html").render(context),
            subtype="html",
        )
        return message

    async def send_notification(
        self,
        emails: Sequence[str],
        task_title: str,
        kind: NotificationKind | str = NotificationKind.BROADCAST,
    ) -> str:
        """Send the notification and return its Message-ID."""

        message = self.build_message(emails, task_title, kind)
        await asyncio.to_thread(self._deliver, message)
        logger.info("Mail sent | id=%s | recipients=%d", message["Message-ID"], len(emails))
        return message["Message-ID"]

    def _deliver(self, message: EmailMessage) -> None:
        settings = self.settings
        try:
            if settings.smtp_use_ssl:
                smtp: smtplib.SMTP = smtplib.SMTP_SSL(
                    settings.smtp_host,
                    settings.smtp_port,
                    context=ssl.create_default_context(),
                )
            else:
                smtp = smtplib.SMTP(settings.smtp_host, settings.smtp_port)
            with smtp:
                if not settings.smtp_use_ssl:
                    smtp.starttls(context=ssl.create_default_context())
                if settings.smtp_user and settings.smtp_password:
                    smtp.login(settings.smtp_user, settings.smtp_password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise MailDeliveryError(f"SMTP delivery failed: {exc}") from exc

    def _message_id_domain(self) -> str | None:
        _, sep, domain = (self.settings.smtp_user or "").rpartition("@")
        return domain if sep and domain else None
