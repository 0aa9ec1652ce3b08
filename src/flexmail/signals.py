"""Checkout hook."""

import logging

from django.dispatch import Signal, receiver

from flexmail.configuration.store import SettingsStore
from flexmail.contacts import submit

logger = logging.getLogger(__name__)

# Sent by the storefront once a checkout form passed validation,
# with fields=<mapping of checkout form field names to values>.
checkout_processed = Signal()


@receiver(checkout_processed, dispatch_uid="flexmail.add_to_flexmail")
def add_to_flexmail(sender, fields=None, **kwargs):
    """If applicable, add the customer to the Flexmail list of contacts."""
    if not fields:
        return None
    return submit(SettingsStore().load(), fields)
