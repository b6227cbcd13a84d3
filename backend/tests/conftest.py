import copy
import json
import logging
from typing import Any

import pytest
from fastapi.testclient import TestClient

from hookreceiver.core.config import Settings, get_settings
from hookreceiver.main import create_app

logger = logging.getLogger(__name__)

PENDING_PAYLOAD: dict[str, Any] = {
    "event": "paymentrequest.pending",
    "data": {
        "id": 1089700,
        "domain": "test",
        "amount": 5000,
        "currency": "NGN",
        "due_date": None,
        "has_invoice": False,
        "invoice_number": None,
        "description": "Invoice #1",
        "pdf_url": None,
        "line_items": [],
        "tax": [],
        "request_code": "PRQ_y0paeo93jh99mho",
        "status": "pending",
        "paid": False,
        "paid_at": None,
        "metadata": None,
        "notifications": [],
        "offline_reference": "3365451089700",
        "customer": 7454223,
        "created_at": "2024-03-15T10:22:31.000Z",
    },
}

SUCCESS_PAYLOAD: dict[str, Any] = {
    "event": "paymentrequest.success",
    "data": {
        "id": 1089701,
        "domain": "test",
        "amount": 120000,
        "currency": "NGN",
        "due_date": "2024-03-30T00:00:00.000Z",
        "has_invoice": True,
        "invoice_number": 2,
        "description": "Invoice #2",
        "pdf_url": "https://example.com/invoice/2.pdf",
        "line_items": [{"name": "Subscription", "amount": 120000}],
        "tax": [],
        "request_code": "PRQ_kp4lleqc7g8xckk",
        "status": "success",
        "paid": True,
        "paid_at": "2024-03-16T08:41:02.000Z",
        "metadata": {"order": "A-77"},
        "notifications": [
            {"sent_at": "2024-03-15T10:22:35.000Z", "channel": "email"}
        ],
        "offline_reference": "3365451089701",
        "customer": 7454223,
        "created_at": "2024-03-15T10:22:31.000Z",
    },
}


@pytest.fixture
def pending_payload() -> dict[str, Any]:
    return copy.deepcopy(PENDING_PAYLOAD)


@pytest.fixture
def success_payload() -> dict[str, Any]:
    return copy.deepcopy(SUCCESS_PAYLOAD)


@pytest.fixture
def encode():
    def _encode(payload: Any) -> bytes:
        return json.dumps(payload).encode()

    return _encode


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, user="tester", port=3000, log_level="INFO")


@pytest.fixture
def app(settings: Settings):
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        logger.info("Test client created")
        yield test_client
    logger.info("Test client closed")
