"""Integration tests for the notification email endpoint."""
from __future__ import annotations

from typing import Any, List, Tuple

import httpx
import pytest

from app.main import app
from app.models.schemas import NotificationKind
from app.routers.notifications import get_mailer
from app.services.mail_service import MailDeliveryError
from app.services.notification_service import NotificationDeliveryError, NotificationDispatcher

URL = "/api/send-broadcast-email"


class FakeMailer:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: List[Tuple[list, str, Any]] = []

    async def send_notification(self, emails, task_title, kind=NotificationKind.BROADCAST) -> str:
        self.calls.append((list(emails), task_title, kind))
        if self.error is not None:
            raise self.error
        return "<fake@portal.test>"


@pytest.fixture
def fake_mailer(dependency_overrides) -> FakeMailer:
    mailer = FakeMailer()
    dependency_overrides[get_mailer] = lambda: mailer
    return mailer


def test_valid_broadcast_sends_once(test_client, fake_mailer):
    response = test_client.post(URL, json={"emails": ["a@x.com", "b@x.com"], "taskTitle": "Landing page"})

    assert response.status_code == 200
    assert response.json()["message"] == "Emails sent successfully"
    assert fake_mailer.calls == [(["a@x.com", "b@x.com"], "Landing page", NotificationKind.BROADCAST)]


def test_assignment_type_is_forwarded(test_client, fake_mailer):
    response = test_client.post(
        URL,
        json={"emails": ["a@x.com"], "taskTitle": "API audit", "type": "assignment"},
    )

    assert response.status_code == 200
    assert fake_mailer.calls[0][2] == NotificationKind.ASSIGNMENT


@pytest.mark.parametrize(
    "body",
    [
        {"taskTitle": "Landing page"},
        {"emails": [], "taskTitle": "Landing page"},
        {"emails": "a@x.com", "taskTitle": "Landing page"},
    ],
)
def test_missing_recipients_rejected(test_client, fake_mailer, body):
    response = test_client.post(URL, json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "No recipients provided"}
    assert fake_mailer.calls == []


@pytest.mark.parametrize("body", [{"emails": ["a@x.com"]}, {"emails": ["a@x.com"], "taskTitle": None}])
def test_missing_title_rejected(test_client, fake_mailer, body):
    response = test_client.post(URL, json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "Task title is required"}
    assert fake_mailer.calls == []


def test_empty_title_is_sent(test_client, fake_mailer):
    response = test_client.post(URL, json={"emails": ["a@x.com"], "taskTitle": ""})

    assert response.status_code == 200
    assert fake_mailer.calls == [(["a@x.com"], "", NotificationKind.BROADCAST)]


def test_unknown_type_rejected(test_client, fake_mailer):
    response = test_client.post(URL, json={"emails": ["a@x.com"], "taskTitle": "T", "type": "digest"})

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid notification request")
    assert fake_mailer.calls == []


def test_non_json_body_rejected(test_client, fake_mailer):
    response = test_client.post(URL, content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert fake_mailer.calls == []


def test_get_not_allowed(test_client):
    response = test_client.get(URL)

    assert response.status_code == 405


def test_mailer_failure_returns_500(test_client, dependency_overrides):
    dependency_overrides[get_mailer] = lambda: FakeMailer(MailDeliveryError("SMTP delivery failed: boom"))

    response = test_client.post(URL, json={"emails": ["a@x.com"], "taskTitle": "Landing page"})

    assert response.status_code == 500
    payload = response.json()
    assert payload["message"] == "Failed to send emails"
    assert "boom" in payload["error"]


@pytest.mark.asyncio
async def test_dispatcher_round_trip_through_endpoint(fake_mailer):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://portal.test") as client:
        dispatcher = NotificationDispatcher("http://portal.test/api/send-broadcast-email", client=client)

        assert await dispatcher.dispatch_assignment(["b@x.com"], "API audit") is True
        fake_mailer.error = MailDeliveryError("SMTP delivery failed: boom")
        with pytest.raises(NotificationDeliveryError) as excinfo:
            await dispatcher.dispatch_broadcast(["a@x.com"], "Landing page")

    assert fake_mailer.calls == [
        (["b@x.com"], "API audit", NotificationKind.ASSIGNMENT),
        (["a@x.com"], "Landing page", NotificationKind.BROADCAST),
    ]
    assert str(excinfo.value) == "Failed to send emails"
    assert excinfo.value.status_code == 500
