"""
Flexmail transports.

``transport`` is the project-wide transport, built on first use so that
importing the client never touches the settings.
"""

from django.utils.functional import LazyObject

from .handler import TransportHandler


class DefaultTransport(LazyObject):
    """The configured transport, resolved on first attribute access."""

    def _setup(self):
        self._wrapped = transport_handler()


transport_handler = TransportHandler()
transport = DefaultTransport()
