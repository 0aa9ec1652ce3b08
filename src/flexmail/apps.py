"""Flexmail application configuration."""

from django.apps import AppConfig


class FlexmailConfig(AppConfig):
    """Configuration class for the flexmail app."""

    name = "flexmail"
    verbose_name = "Flexmail"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        """Connect the checkout receiver."""
        from flexmail import signals  # noqa: F401, PLC0415
