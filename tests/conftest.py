"""Fixtures for the test suite."""

from unittest import mock

import pytest

from flexmail.transport.base import BaseTransport


@pytest.fixture
def transport():
    """Return a transport double answering every call with success."""
    double = mock.create_autospec(BaseTransport, instance=True)
    double.call.return_value = {"errorCode": 0, "errorMessage": "", "emailAddressId": 42}
    return double


@pytest.fixture
def complete_settings():
    """Return fully configured settings without address export nor source."""
    from flexmail.configuration.store import Settings  # noqa: PLC0415

    return Settings(api_user_id=1234, api_user_token="secret-token", mailing_list_id=10)


@pytest.fixture
def checkout_fields():
    """Return the fields of a checkout with the opt-in box checked."""
    return {
        "flexmail": "1",
        "billing_email": "jane@example.com",
        "billing_first_name": "Jane",
        "billing_last_name": "Doe",
    }
