"""Persisted integration settings."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class IntegrationSettings(models.Model):
    """Single keyed record holding the Flexmail integration settings."""

    key = models.CharField(_("key"), max_length=100, unique=True, default="default")
    data = models.JSONField(_("data"), default=dict, blank=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    class Meta:  # noqa: D106
        db_table = "flexmail_integration_settings"
        verbose_name = _("integration settings")
        verbose_name_plural = _("integration settings")

    def __str__(self):
        """Return a string representation of the record."""
        return self.key
