"""Transport backend base module."""

from abc import ABC, abstractmethod


class BaseTransport(ABC):
    """Base class for all transport backends."""

    @abstractmethod
    def call(self, operation: str, request: dict, timeout: int | None = None) -> dict:
        """
        Invoke a remote operation.

        Args:
            operation: Remote operation name, e.g. "GetMailingLists"
            request: Request object, credential header included
            timeout: API request timeout in seconds

        Returns:
            dict: The operation's response object

        Raises:
            TransportFaultError: If the service cannot be reached or its answer cannot be read

        """
