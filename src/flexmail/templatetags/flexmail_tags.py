"""Flexmail template tags."""

from django import template

from flexmail.configuration.store import SettingsStore
from flexmail.forms import CheckoutOptInForm

register = template.Library()


@register.inclusion_tag("flexmail/checkbox.html")
def flexmail_checkbox():
    """Render the newsletter opt-in checkbox, nothing when the integration is not set up."""
    settings = SettingsStore().load()
    if settings.is_empty:
        return {"form": None}
    return {"form": CheckoutOptInForm(label=settings.checkbox_label or "")}
