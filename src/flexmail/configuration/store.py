"""Integration settings store."""

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from decimal import Decimal, InvalidOperation

from django.conf import settings as django_settings
from django.utils.translation import gettext as _

from flexmail.models import IntegrationSettings
from flexmail.tools.text import sanitize_text_field

logger = logging.getLogger(__name__)

IDENTIFIER_FIELDS = ("api_user_id", "mailing_list_id")
TEXT_FIELDS = ("api_user_token", "checkbox_label", "source_name")

# Identifiers are 64-bit signed integers on the remote side
MAX_IDENTIFIER = 2**63 - 1
MAX_IDENTIFIER_DIGITS = len(str(MAX_IDENTIFIER))


@dataclass(frozen=True)
class Settings:
    """Flexmail integration settings, absent values are None."""

    api_user_id: int | None = None
    api_user_token: str | None = None
    mailing_list_id: int | None = None
    checkbox_label: str | None = None
    export_address: bool = False
    source_name: str | None = None
    # A record was saved, even if all its values are blank
    saved: bool = field(default=False, repr=False)

    @classmethod
    def from_record(cls, record: Mapping | None) -> "Settings":
        """Build settings from a persisted record."""
        record = record or {}
        return cls(
            api_user_id=record.get("api_user_id"),
            api_user_token=record.get("api_user_token"),
            mailing_list_id=record.get("mailing_list_id"),
            checkbox_label=record.get("checkbox_label"),
            export_address=bool(record.get("export_address", False)),
            source_name=record.get("source_name"),
            saved=bool(record),
        )

    @property
    def is_empty(self) -> bool:
        """Return True when no settings form was ever saved."""
        return not any(asdict(self).values())

    @property
    def is_complete(self) -> bool:
        """Return True when credentials and target list are all set."""
        return bool(self.api_user_id and self.api_user_token and self.mailing_list_id)


def to_identifier(value) -> int | None:
    """
    Coerce a submitted identifier to a non-negative integer.

    Decimal input is truncated. Anything else, negative numbers and values
    beyond a 64-bit integer included, gives None so that a bad value clears
    the field instead of failing the save.
    """
    if isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    # Check the magnitude before building the integer, "1e600000" is a valid Decimal
    if not number.is_finite() or number < 0 or number.adjusted() >= MAX_IDENTIFIER_DIGITS:
        return None
    number = int(number)
    return number if number <= MAX_IDENTIFIER else None


class SettingsStore:
    """Load and save the integration settings record."""

    def __init__(self, key: str | None = None):
        """Use the record key from the settings unless one is given."""
        self.key = key or getattr(django_settings, "FLEXMAIL_SETTINGS_KEY", "default")

    def _load_record(self) -> dict:
        record = IntegrationSettings.objects.filter(key=self.key).values_list("data", flat=True).first()
        return dict(record or {})

    def load(self) -> Settings:
        """Return the persisted settings, empty settings if none were saved yet."""
        return Settings.from_record(self._load_record())

    @staticmethod
    def clean(submitted: Mapping, record: Mapping | None = None) -> dict:
        """
        Merge the known keys present in a submission into a record.

        Keys missing from the submission keep their stored value. The address
        export flag is only written along with the checkbox label: both are
        part of the same settings form, and an unchecked box is simply absent
        from the submitted data.
        """
        record = dict(record or {})

        for name in IDENTIFIER_FIELDS:
            if name in submitted:
                record[name] = to_identifier(submitted.get(name))

        for name in TEXT_FIELDS:
            if name in submitted:
                record[name] = sanitize_text_field(submitted.get(name))

        if "checkbox_label" in submitted:
            record["export_address"] = "export_address" in submitted

        return record

    def save(self, submitted: Mapping) -> Settings:
        """Merge a (partial) submission into the stored record and persist it."""
        record = self.clean(submitted, self._load_record())
        IntegrationSettings.objects.update_or_create(key=self.key, defaults={"data": record})
        logger.info("Flexmail settings %r saved (fields: %s)", self.key, ", ".join(sorted(record)))
        return Settings.from_record(record)

    def initial(self, site_name: str | None = None) -> dict:
        """Return settings form values, with defaults for keys never saved."""
        if site_name is None:
            site_name = getattr(django_settings, "FLEXMAIL_SITE_NAME", "")
        record = self._load_record()
        initial = {
            "api_user_id": "",
            "api_user_token": "",
            "mailing_list_id": "",
            "checkbox_label": _("Yes, I'd like to sign up for the %(site_name)s newsletter.") % {"site_name": site_name},
            "export_address": False,
            "source_name": site_name,
        }
        initial.update({key: value for key, value in record.items() if key in initial and value is not None})
        return initial
