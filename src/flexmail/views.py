"""Flexmail settings views."""

import logging

from django.contrib import messages
from django.contrib.auth.mixins import PermissionRequiredMixin
from django.shortcuts import redirect, render
from django.utils.translation import gettext_lazy as _
from django.views import View

from flexmail.client import fetch_lists
from flexmail.configuration.store import SettingsStore
from flexmail.forms import ApiSettingsForm, ListSettingsForm

logger = logging.getLogger(__name__)


class SettingsView(PermissionRequiredMixin, View):
    """
    Flexmail settings page.

    Two forms share the page and the stored record: the API credentials, and
    the target list with the checkout options. Each one posts only its own
    fields, the store merges them into the existing record.
    """

    permission_required = "flexmail.change_integrationsettings"
    raise_exception = True
    template_name = "flexmail/settings.html"

    def get_store(self):
        """Return the settings store."""
        return SettingsStore()

    def get(self, request):
        """Render both settings forms."""
        initial = self.get_store().initial()
        mailing_lists = fetch_lists(initial["api_user_id"], initial["api_user_token"])
        if not mailing_lists:
            logger.info("No Flexmail mailing list available, API settings missing or incorrect")

        context = {
            "api_form": ApiSettingsForm(initial=initial),
            "list_form": ListSettingsForm(initial=initial, mailing_lists=mailing_lists),
            "mailing_lists": mailing_lists,
            "show_notice": not mailing_lists,
        }
        return render(request, self.template_name, context)

    def post(self, request):
        """Save the submitted settings and come back to the page."""
        self.get_store().save(request.POST)
        messages.success(request, _("Settings saved."))
        return redirect("flexmail:settings")
