"""Text related tools."""

import re
from email.errors import HeaderParseError
from email.headerregistry import Address

from django.utils.html import strip_tags

WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text_field(value) -> str:
    """Turn a submitted value into trimmed plain text on a single line."""
    if value is None:
        return ""
    return WHITESPACE_RE.sub(" ", strip_tags(str(value))).strip()


def sanitize_email(email: str | None) -> str:
    """Return the normalized address, or an empty string when it is not a valid email."""
    if not email:
        return ""
    try:
        address = Address(addr_spec=str(email).strip())
        if len(address.username) > 64 or len(address.domain) > 255:  # noqa: PLR2004
            # Simple length validation using the RFC 5321 limits
            return ""
        if not address.username or not address.domain:
            return ""
        return address.addr_spec
    except (ValueError, AttributeError, IndexError, HeaderParseError):
        return ""
