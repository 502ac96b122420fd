"""App configuration for the `fieldconfig` Django app."""

from __future__ import annotations

from django.apps import AppConfig


class FieldConfigConfig(AppConfig):
    """Configuration for the `fieldconfig` app."""

    name = "fieldconfig"
    verbose_name = "Field configuration"
