"""App configuration for the demo `core` app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` demo app, which renders configured form fields."""

    name = "core"
    verbose_name = "Field configuration demo"
