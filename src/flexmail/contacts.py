"""Contact submission at checkout."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from django.conf import settings as django_settings
from django.utils import translation

from flexmail.client import FlexmailClient
from flexmail.configuration.store import Settings
from flexmail.exceptions import RemoteCallError
from flexmail.tools.text import sanitize_email, sanitize_text_field

logger = logging.getLogger(__name__)

OPT_IN_FIELD = "flexmail"

# Checkout field name -> remote field name, sent when exporting addresses
POSTAL_FIELDS = {
    "billing_postcode": "zipcode",
    "billing_city": "city",
    "billing_phone": "phone",
    "billing_company": "company",
}


@dataclass
class ContactRecord:
    """Contact data for a new Flexmail email address."""

    email: str
    name: str
    surname: str
    language: str
    address: str | None = None
    zipcode: str | None = None
    city: str | None = None
    phone: str | None = None
    company: str | None = None
    sources: list[str] = field(default_factory=list)

    def to_payload(self) -> dict:
        """Return the remote emailAddressType, without the fields left out."""
        payload = {
            "emailAddress": self.email,
            "name": self.name,
            "surname": self.surname,
            "language": self.language,
        }
        for name in ("address", "zipcode", "city", "phone", "company"):
            value = getattr(self, name)
            if value:
                payload[name] = value
        return payload


def get_language_code() -> str:
    """Return the two-letter code of the active locale."""
    language = translation.get_language() or django_settings.LANGUAGE_CODE
    return translation.to_locale(language)[:2]


def build_contact_record(settings: Settings, checkout_fields: Mapping, language: str | None = None) -> ContactRecord:
    """Map checkout fields to a contact record according to the integration settings."""
    contact = ContactRecord(
        email=sanitize_email(checkout_fields.get("billing_email")),
        name=sanitize_text_field(checkout_fields.get("billing_first_name")),
        surname=sanitize_text_field(checkout_fields.get("billing_last_name")),
        language=language or get_language_code(),
    )

    if settings.export_address:
        address = " ".join(
            sanitize_text_field(checkout_fields.get(name)) for name in ("billing_address_1", "billing_address_2")
        ).strip()
        contact.address = address or None

        # Each field is gated on its own value. The original plugin sent the
        # phone number whenever a city was filled in.
        for checkout_name, remote_name in POSTAL_FIELDS.items():
            value = sanitize_text_field(checkout_fields.get(checkout_name))
            if value:
                setattr(contact, remote_name, value)

    if settings.source_name:
        contact.sources = [settings.source_name]

    return contact


def submit(settings: Settings, checkout_fields: Mapping, transport=None) -> int | None:
    """
    Add the customer to the configured Flexmail list, if they opted in.

    Nothing happens when the opt-in checkbox was left unchecked, when the
    customer details are incomplete or when the integration is not fully
    configured. Remote and transport failures are logged and never raised:
    the checkout must go through whatever happens here.

    Returns the id of the created email address, or None.
    """
    if OPT_IN_FIELD not in checkout_fields:
        logger.debug("Flexmail opt-in left unchecked")
        return None

    if not all(checkout_fields.get(name) for name in ("billing_email", "billing_first_name", "billing_last_name")):
        logger.debug("Flexmail opt-in without email, first or last name")
        return None

    if not settings.is_complete:
        logger.debug("Flexmail integration not configured, contact not submitted")
        return None

    contact = build_contact_record(settings, checkout_fields)
    if not contact.email:
        logger.debug("Flexmail opt-in with an invalid email address")
        return None

    client = FlexmailClient(settings.api_user_id, settings.api_user_token, transport=transport)
    try:
        email_address_id = client.create_email_address(settings.mailing_list_id, contact)
    except RemoteCallError as err:
        logger.error("Email address creation failed: %s", err.error_message)
        return None
    except Exception:
        # Transport faults, a misconfigured transport included: never block a purchase
        logger.exception("Email address creation failed")
        return None

    logger.info("Email address created with ID: %s", email_address_id)
    return email_address_id
