"""Shared fixtures for the contact form tests."""

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from helpers.email_helper import get_email_provider
from main import app
from models.contact_model import EmailMessage


class FakeProvider:
    """Records messages instead of calling Resend."""

    def __init__(self, is_configured: bool = True, error: Optional[Exception] = None) -> None:
        self.is_configured = is_configured
        self.error = error
        self.sent: List[EmailMessage] = []

    def send(self, message: EmailMessage) -> None:
        self.sent.append(message)
        if self.error is not None:
            raise self.error


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def api(provider):
    app.dependency_overrides[get_email_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
