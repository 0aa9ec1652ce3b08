"""Test the transport handler."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from flexmail.exceptions import FlexmailInvalidTransportError
from flexmail.transport.dummy import DummyTransport
from flexmail.transport.handler import TransportHandler
from flexmail.transport.soap import SoapTransport


def test_transport_handler_from_settings(settings):
    """Test the transport handler from the settings."""
    settings.FLEXMAIL_TRANSPORT = {
        "BACKEND": "flexmail.transport.dummy.DummyTransport",
    }
    handler = TransportHandler()
    assert isinstance(handler(), DummyTransport)


def test_transport_handler_from_backend():
    """Test the transport handler from the backend."""
    handler = TransportHandler(
        backend={
            "BACKEND": "flexmail.transport.soap.SoapTransport",
            "PARAMETERS": {"location": "https://soap.example.com/flexmail.php", "timeout": 2},
        }
    )
    transport = handler()
    assert isinstance(transport, SoapTransport)
    assert transport.location == "https://soap.example.com/flexmail.php"
    assert transport.timeout == 2


def test_transport_handler_caches_transport():
    """The transport is instantiated once."""
    handler = TransportHandler(backend={"BACKEND": "flexmail.transport.dummy.DummyTransport"})
    assert handler() is handler()


def test_transport_handler_default(settings):
    """Without settings.FLEXMAIL_TRANSPORT the SOAP transport is used."""
    del settings.FLEXMAIL_TRANSPORT
    transport = TransportHandler()()
    assert isinstance(transport, SoapTransport)
    assert transport.location == "https://soap.flexmail.eu/3.0.0/flexmail.php"


def test_transport_backend_no_config(settings):
    """Test the transport handler when the config is set to None should raise an error."""
    settings.FLEXMAIL_TRANSPORT = None
    handler = TransportHandler()
    with pytest.raises(ImproperlyConfigured):
        handler()


def test_transport_backend_invalid():
    """Test the transport handler with a backend that cannot be imported."""
    handler = TransportHandler(backend={"BACKEND": "flexmail.transport.nope.NopeTransport"})
    with pytest.raises(FlexmailInvalidTransportError, match="Could not import transport"):
        handler()
