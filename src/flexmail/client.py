"""Flexmail API client."""

import logging

from flexmail.exceptions import RemoteCallError, TransportFaultError
from flexmail.transport import transport as default_transport
from flexmail.transport.base import BaseTransport

logger = logging.getLogger(__name__)

# 0 stands for "no category restriction"
ALL_CATEGORIES = 0


def _as_list(value) -> list:
    """Normalize a parsed array, which may be missing, a single item or wrapped in <item> elements."""
    if value is None:
        return []
    if isinstance(value, dict) and set(value) == {"item"}:
        value = value["item"]
    if isinstance(value, list):
        return [item for item in value if item is not None]
    return [value]


class FlexmailClient:
    """
    Client for the Flexmail API.

    Every operation shares the same mechanics: add the credential header to
    the request, invoke the operation through the transport and check the
    error code of the response. A non-zero error code raises
    ``RemoteCallError``, transport problems raise ``TransportFaultError``.
    """

    def __init__(self, user_id: int, user_token: str, transport: BaseTransport | None = None):
        """Keep the credentials and the transport to use."""
        self.user_id = user_id
        self.user_token = user_token
        self.transport = transport if transport is not None else default_transport

    @property
    def header(self) -> dict:
        """Credential header sent along every request."""
        return {"userId": int(self.user_id), "userToken": self.user_token}

    def _call(self, operation: str, payload: dict) -> dict:
        """Invoke an operation and return its response on success."""
        request = {"header": self.header, **payload}
        response = self.transport.call(operation, request)

        try:
            error_code = int(response.get("errorCode"))
        except (TypeError, ValueError) as err:
            raise TransportFaultError(f"{operation}: invalid error code {response.get('errorCode')!r}") from err

        if error_code != 0:
            raise RemoteCallError(operation, error_code, response.get("errorMessage"))
        return response

    def get_mailing_lists(self, category_id: int = ALL_CATEGORIES) -> dict[int, str]:
        """Return the account's mailing lists, id to name, lowest id first."""
        response = self._call("GetMailingLists", {"categoryId": category_id})
        try:
            mailing_lists = {
                int(item["mailingListId"]): item.get("mailingListName") or ""
                for item in _as_list(response.get("mailingListTypeItems"))
            }
        except (KeyError, TypeError, ValueError, AttributeError) as err:
            raise TransportFaultError("GetMailingLists: malformed mailing list items") from err
        # The lowest id is most likely the account's oldest, main list
        return dict(sorted(mailing_lists.items()))

    def create_email_address(self, mailing_list_id: int, contact) -> int | None:
        """Create a contact in a mailing list and return its remote id."""
        payload = {
            "mailingListId": int(mailing_list_id),
            "emailAddressType": contact.to_payload(),
        }
        if contact.sources:
            payload["sources"] = [{"name": name} for name in contact.sources]

        response = self._call("CreateEmailAddress", payload)
        email_address_id = response.get("emailAddressId")
        try:
            return int(email_address_id) if email_address_id is not None else None
        except (TypeError, ValueError) as err:
            raise TransportFaultError(f"CreateEmailAddress: invalid id {email_address_id!r}") from err


def fetch_lists(user_id, user_token, transport: BaseTransport | None = None) -> dict[int, str]:
    """
    Fetch the mailing lists available to an account.

    Returns an empty dict when the credentials are missing or when the lists
    cannot be fetched; failures are logged, never raised.
    """
    if not user_id or not user_token:
        return {}

    client = FlexmailClient(user_id, user_token, transport=transport)
    try:
        return client.get_mailing_lists()
    except RemoteCallError as err:
        logger.error("Fetching mailing lists failed: %s", err.error_message)
    except Exception:
        # Transport faults, a misconfigured transport included: the page renders without lists
        logger.exception("Fetching mailing lists failed")
    return {}
