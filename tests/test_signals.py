"""Test the checkout hook."""

from unittest import mock

import pytest
import responses

from flexmail.exceptions import TransportFaultError
from flexmail.signals import checkout_processed
from flexmail.transport import DefaultTransport
from flexmail.transport.dummy import DummyTransport
from flexmail.transport.handler import TransportHandler
from flexmail.transport.soap import SoapTransport
from tests import factories

pytestmark = pytest.mark.django_db


def test_checkout_processed_submits_contact(checkout_fields):
    """The customer is added to the configured list."""
    factories.IntegrationSettingsFactory(
        data={
            "api_user_id": 1234,
            "api_user_token": "secret-token",
            "mailing_list_id": 10,
            "export_address": True,
            "source_name": "Acme Store",
        }
    )

    with mock.patch.object(DummyTransport, "call", return_value={"errorCode": 0, "emailAddressId": 7}) as call:
        results = checkout_processed.send(sender=None, fields={**checkout_fields, "billing_city": "Ghent"})

    assert [response for _receiver, response in results] == [7]
    operation, request = call.call_args.args
    assert operation == "CreateEmailAddress"
    assert request["mailingListId"] == 10
    assert request["emailAddressType"]["city"] == "Ghent"
    assert request["sources"] == [{"name": "Acme Store"}]


def test_checkout_processed_not_configured(checkout_fields):
    """Nothing is sent before the integration is configured."""
    with mock.patch.object(DummyTransport, "call") as call:
        checkout_processed.send(sender=None, fields=checkout_fields)

    call.assert_not_called()


def test_checkout_processed_without_fields():
    """A signal without fields is ignored."""
    factories.IntegrationSettingsFactory()

    with mock.patch.object(DummyTransport, "call") as call:
        checkout_processed.send(sender=None)

    call.assert_not_called()


def test_checkout_processed_transport_fault(checkout_fields):
    """A transport fault does not reach the storefront."""
    factories.IntegrationSettingsFactory()

    with mock.patch.object(DummyTransport, "call", side_effect=TransportFaultError("Connection refused")):
        results = checkout_processed.send(sender=None, fields=checkout_fields)

    assert [response for _receiver, response in results] == [None]


def test_checkout_processed_transport_not_configured(settings, checkout_fields, caplog):
    """A disabled transport setting does not reach the storefront either."""
    factories.IntegrationSettingsFactory()
    settings.FLEXMAIL_TRANSPORT = None

    with (
        mock.patch("flexmail.transport.transport_handler", TransportHandler()),
        mock.patch("flexmail.client.default_transport", DefaultTransport()),
    ):
        results = checkout_processed.send(sender=None, fields=checkout_fields)

    assert [response for _receiver, response in results] == [None]
    assert "Email address creation failed" in caplog.text


@responses.activate
def test_checkout_processed_unencodable_name(checkout_fields, caplog):
    """A name that cannot be encoded is dropped before any request is made."""
    factories.IntegrationSettingsFactory()

    with mock.patch("flexmail.client.default_transport", SoapTransport()):
        results = checkout_processed.send(sender=None, fields={**checkout_fields, "billing_first_name": "Jan\ud800"})

    assert [response for _receiver, response in results] == [None]
    assert len(responses.calls) == 0
    assert "Email address creation failed" in caplog.text


def test_checkout_processed_with_dummy_transport(checkout_fields, caplog):
    """The dummy transport creates every contact with the same id."""
    factories.IntegrationSettingsFactory()

    with caplog.at_level("INFO", logger="flexmail.contacts"):
        results = checkout_processed.send(sender=None, fields=checkout_fields)

    assert [response for _receiver, response in results] == [0]
    assert "Email address created with ID: 0" in caplog.text
