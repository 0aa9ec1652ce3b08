"""Flexmail exceptions module."""


class FlexmailError(Exception):
    """Base exception for all flexmail exceptions."""


class FlexmailInvalidTransportError(FlexmailError):
    """Exception raised when the transport backend is invalid."""


class TransportFaultError(FlexmailError):
    """Exception raised when the remote service cannot be reached or understood."""


class RemoteCallError(FlexmailError):
    """Exception raised when the remote service answers with a non-zero error code."""

    def __init__(self, operation: str, error_code: int, error_message: str | None = None):
        """Keep the remote error details."""
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message or ""
        super().__init__(f"{operation} failed with error code {error_code}: {self.error_message}")
