"""Factories for creating test data."""

import factory.django
from django.contrib.auth import get_user_model

from flexmail.models import IntegrationSettings

User = get_user_model()


class UserFactory(factory.django.DjangoModelFactory):
    """A factory to create random users for testing purposes."""

    username = factory.Sequence(lambda n: f"user{n!s}")
    email = factory.Faker("email")

    class Meta:  # noqa: D106
        model = User


class IntegrationSettingsFactory(factory.django.DjangoModelFactory):
    """A factory to create a fully configured integration record."""

    key = "default"
    data = factory.Dict(
        {
            "api_user_id": 1234,
            "api_user_token": "secret-token",
            "mailing_list_id": 10,
            "checkbox_label": "Sign me up!",
            "export_address": False,
            "source_name": "Acme Store",
        }
    )

    class Meta:  # noqa: D106
        model = IntegrationSettings
        django_get_or_create = ("key",)
