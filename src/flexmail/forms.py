"""Flexmail forms."""

from django import forms
from django.utils.translation import gettext_lazy as _

from flexmail.contacts import OPT_IN_FIELD


class ApiSettingsForm(forms.Form):
    """Flexmail API credentials."""

    api_user_id = forms.CharField(label=_("API User ID"), required=False, help_text=_("Your Flexmail API user ID."))
    api_user_token = forms.CharField(
        label=_("API User Token"), required=False, help_text=_("Your Flexmail API user token.")
    )


class ListSettingsForm(forms.Form):
    """Target list and checkout options."""

    mailing_list_id = forms.ChoiceField(
        label=_("Flexmail Contacts List"),
        required=False,
        help_text=_(
            "The list that corresponds with your general contacts database, i.e., the topmost list in Flexmail."
        ),
    )
    checkbox_label = forms.CharField(
        label=_("Checkbox Label Text"),
        required=False,
        widget=forms.Textarea(attrs={"rows": 3}),
        help_text=_("The message customers see next to the opt-in checkbox."),
    )
    export_address = forms.BooleanField(
        label=_("Export physical address data"),
        required=False,
        help_text=_("If left unchecked, only name, email address and language will be exported."),
    )
    source_name = forms.CharField(
        label=_("Source Name"),
        required=False,
        help_text=_(
            "In order to help with meaningful list segmentation, a source will be attached to each new contact. "
            "Default value: site name."
        ),
    )

    def __init__(self, *args, mailing_lists=None, **kwargs):
        """Offer the fetched mailing lists as choices."""
        super().__init__(*args, **kwargs)
        self.fields["mailing_list_id"].choices = [("", _("Select list"))] + [
            (str(list_id), name) for list_id, name in (mailing_lists or {}).items()
        ]


class CheckoutOptInForm(forms.Form):
    """Optional newsletter signup checkbox shown at checkout."""

    def __init__(self, *args, label="", **kwargs):
        """Add the opt-in checkbox with the configured label."""
        super().__init__(*args, **kwargs)
        self.fields[OPT_IN_FIELD] = forms.BooleanField(label=label, required=False)
