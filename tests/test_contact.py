from email import message_from_string

import pytest

from conftest import SMTP_SETTINGS


@pytest.fixture
def contact_form():
    return {
        "name": "  Bilal Ahmed ",
        "email": " Bilal@Example.COM ",
        "subject": "Birth chart reading",
        "message": "Do you ship gemstones outside Lahore?",
    }


def test_invalid_form_lists_every_error(client):
    response = client.post(
        "/api/contact",
        json={"name": "B", "email": "not-an-email", "subject": "", "message": "short"},
    )

    assert response.status_code == 400
    body = response.get_json()
    assert body["ok"] is False
    assert body["error"] == "Validation failed"
    assert body["errors"] == [
        "Name must be at least 2 characters long",
        "Please enter a valid email address",
        "Subject is required",
        "Message must be at least 10 characters long",
    ]


def test_non_object_body_is_invalid(client):
    response = client.post("/api/contact", json=["hello"])

    assert response.status_code == 400
    assert response.get_json()["errors"] == ["Invalid form data"]


def test_contact_requires_smtp(client, contact_form, smtp):
    response = client.post("/api/contact", json=contact_form)

    assert response.status_code == 500
    assert "not configured" in response.get_json()["error"]
    assert smtp.instances == []


def test_contact_message_is_sent_to_contact_recipients(
    client, contact_form, configure, smtp
):
    configure(**SMTP_SETTINGS)

    response = client.post("/api/contact", json=contact_form)

    assert response.status_code == 200
    assert response.get_json()["ok"] is True
    assert [sent["to"] for sent in smtp.sent] == [["support@example.com"]]
    message = message_from_string(smtp.sent[0]["msg"])
    assert message["Subject"] == "Contact Form: Birth chart reading"
    assert message["Reply-To"] == "bilal@example.com"
    text = message.get_payload()[0].get_payload(decode=True).decode()
    assert "Name: Bilal Ahmed\n" in text


def test_contact_send_failure_returns_500(client, contact_form, configure, smtp):
    configure(**SMTP_SETTINGS)
    smtp.fail_on_connect = True

    response = client.post("/api/contact", json=contact_form)

    assert response.status_code == 500
    assert response.get_json()["ok"] is False
