import smtplib
from decimal import Decimal

import fakeredis
import pytest
import requests

from storefront import create_app
from storefront.config import TestingConfig
from storefront.extensions import db, redis_client
from storefront.models import Coupon, Customer, Product, Setting
from storefront.services.setting import SettingService

SETTINGS_ENV = (
    "ADMIN_EMAIL",
    "CONTACT_FORM_EMAIL",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_USER",
    "SMTP_PASS",
    "MAIL_FROM_EMAIL",
    "MAIL_FROM_NAME",
    "EMAIL_FROM",
    "WHATSAPP_ACCESS_TOKEN",
    "WHATSAPP_PHONE_NUMBER_ID",
    "WHATSAPP_BUSINESS_ACCOUNT_ID",
    "WHATSAPP_CONTACT_NUMBER",
    "NEXT_PUBLIC_WHATSAPP_NUMBER",
)

SMTP_SETTINGS = {
    "smtp_host": "smtp.example.com",
    "smtp_port": "587",
    "smtp_user": "mailer",
    "smtp_pass": "secret",
    "smtp_from_email": "orders@example.com",
    "smtp_from_name": "Astra",
    "notifications_order_emails": "owner@example.com, ops@example.com",
    "notifications_contact_emails": "support@example.com",
}

WHATSAPP_SETTINGS = {
    "whatsapp_access_token": "wa-token",
    "whatsapp_phone_number_id": "1234567890",
    "notifications_order_whatsapp_numbers": "+92 300 1111111,+92 300 2222222",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    redis_client._redis_client = fakeredis.FakeRedis(decode_responses=True)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(app):
    return {"X-Admin-Token": app.config["ADMIN_API_TOKEN"]}


@pytest.fixture
def configure(app):
    """Store setting rows and drop the cached copy."""

    def _configure(**values):
        for key, value in values.items():
            db.session.add(Setting(setting_name=key, setting_value=value))
        db.session.commit()
        SettingService.clear_settings_cache()

    return _configure


@pytest.fixture
def products(app):
    rose = Product(
        slug="rose-quartz-bracelet",
        name="Rose Quartz Bracelet",
        price=Decimal("1500.00"),
        image_url="/images/rose.png",
        stock_qty=10,
    )
    amethyst = Product(
        slug="amethyst-cluster",
        name="Amethyst Cluster",
        price=Decimal("2750.50"),
        stock_qty=3,
    )
    retired = Product(
        slug="retired-incense",
        name="Retired Incense",
        price=Decimal("100.00"),
        is_active=False,
    )
    db.session.add_all([rose, amethyst, retired])
    db.session.commit()
    return {"rose": rose, "amethyst": amethyst, "retired": retired}


@pytest.fixture
def customer(app):
    record = Customer(email="ayesha@example.com", name="Ayesha Khan", phone="03001234567")
    db.session.add(record)
    db.session.commit()
    return record


@pytest.fixture
def coupon(app):
    record = Coupon(code="STARS10", name="Stars 10%", value=Decimal("10"), used_count=3)
    db.session.add(record)
    db.session.commit()
    return record


@pytest.fixture
def order_payload(products):
    return {
        "customer": {
            "name": "Ayesha Khan",
            "email": "ayesha@example.com",
            "phone": "03001234567",
            "city": "Lahore",
            "address": "12 Mall Road",
            "landmark": "Near the clock tower",
            "coords": {"lat": 31.5497, "lng": 74.3436},
        },
        "items": [
            {
                "id": products["rose"].id,
                "name": "Rose Quartz Bracelet",
                "qty": 2,
                "price": 1500,
                "image": "/images/rose.png",
            },
            {
                "id": "amethyst-cluster",
                "name": "Amethyst Cluster",
                "qty": 1,
                "price": 2750.5,
            },
        ],
        "summary": {
            "subtotal": 5750.5,
            "deliveryFee": 250,
            "total": 6000.5,
            "belowMinimum": False,
        },
        "cashOnDelivery": True,
    }


class FakeSMTP:
    """Stand-in for ``smtplib.SMTP`` that records what would have been sent."""

    instances = []
    sent = []
    fail_on_connect = False
    fail_on_starttls = False
    fail_for = set()
    ssl = False

    def __init__(self, host, port, timeout=None):
        if FakeSMTP.fail_on_connect:
            raise ConnectionRefusedError(f"cannot reach {host}:{port}")
        self.host = host
        self.port = port
        self.started_tls = False
        self.logged_in = None
        self.closed = False
        FakeSMTP.instances.append(self)

    def starttls(self):
        if FakeSMTP.fail_on_starttls:
            raise smtplib.SMTPNotSupportedError("STARTTLS extension not supported by server.")
        self.started_tls = True

    def login(self, user, password):
        self.logged_in = (user, password)

    def sendmail(self, from_addr, to_addrs, msg):
        if FakeSMTP.fail_for.intersection(to_addrs):
            raise smtplib.SMTPRecipientsRefused({addr: (550, b"rejected") for addr in to_addrs})
        FakeSMTP.sent.append({"from": from_addr, "to": list(to_addrs), "msg": msg})

    def quit(self):
        self.closed = True

    def close(self):
        self.closed = True


class FakeSMTPSSL(FakeSMTP):
    ssl = True


@pytest.fixture
def smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.sent = []
    FakeSMTP.fail_on_connect = False
    FakeSMTP.fail_on_starttls = False
    FakeSMTP.fail_for = set()
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(smtplib, "SMTP_SSL", FakeSMTPSSL)
    return FakeSMTP


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self.text = str(self._payload)

    def json(self):
        return self._payload


class FakeWhatsAppApi:
    def __init__(self):
        self.calls = []
        self.failing_numbers = set()

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if json["to"] in self.failing_numbers:
            raise requests.ConnectionError("connection reset")
        return FakeResponse(200, {"messages": [{"id": f"wamid.{len(self.calls)}"}]})

    @property
    def recipients(self):
        return [call["json"]["to"] for call in self.calls]


@pytest.fixture
def whatsapp_api(monkeypatch):
    fake = FakeWhatsAppApi()
    monkeypatch.setattr(requests, "post", fake.post)
    return fake
