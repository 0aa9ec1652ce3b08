"""Transport answering locally, for development and tests."""

from .base import BaseTransport

# Id given to every created email address
DUMMY_EMAIL_ADDRESS_ID = 0


class DummyTransport(BaseTransport):
    """Make no network call and answer every operation with success."""

    def call(self, operation: str, request: dict, timeout: int | None = None) -> dict:
        """Return a successful response shaped like the remote one."""
        if operation == "GetMailingLists":
            return {"errorCode": 0, "errorMessage": "", "mailingListTypeItems": []}
        if operation == "CreateEmailAddress":
            return {"errorCode": 0, "errorMessage": "", "emailAddressId": DUMMY_EMAIL_ADDRESS_ID}
        return {"errorCode": 0, "errorMessage": ""}
