"""Build the Flexmail transport from ``settings.FLEXMAIL_TRANSPORT``."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from flexmail.exceptions import FlexmailInvalidTransportError

DEFAULT_TRANSPORT = {
    "BACKEND": "flexmail.transport.soap.SoapTransport",
    "PARAMETERS": {},
}


class TransportHandler:
    """
    Resolve the configured transport class and instantiate it once.

    ``BACKEND`` is the dotted path of a ``BaseTransport`` subclass and
    ``PARAMETERS`` the keyword arguments it is built with. The SOAP transport
    is used when the setting is absent; setting it to None disables Flexmail
    calls altogether, each of them then fails with ``ImproperlyConfigured``.
    """

    def __init__(self, backend=None):
        """Use ``backend`` instead of the project setting when given."""
        self._backend = backend
        self._transport = None

    @cached_property
    def backend(self):
        """The transport definition in use."""
        if self._backend is None:
            definition = getattr(settings, "FLEXMAIL_TRANSPORT", DEFAULT_TRANSPORT)
            if definition is None:
                raise ImproperlyConfigured("settings.FLEXMAIL_TRANSPORT is not configured")
            self._backend = definition.copy()
        return self._backend

    def __call__(self):
        """Return the shared transport instance."""
        if self._transport is None:
            self._transport = self.create_transport(self.backend)
        return self._transport

    def create_transport(self, definition):
        """Import the ``BACKEND`` class and build it from ``PARAMETERS``."""
        dotted_path = definition["BACKEND"]
        try:
            transport_class = import_string(dotted_path)
        except ImportError as err:
            raise FlexmailInvalidTransportError(f"Could not import transport {dotted_path!r}: {err}") from err
        return transport_class(**definition.get("PARAMETERS", {}))
