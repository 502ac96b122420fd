#!/usr/bin/env python
"""Command-line utility for the fieldforms demo project."""

from __future__ import annotations

import os
import sys


def main() -> None:
    """Run administrative tasks such as `runserver` against the demo settings."""

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "fieldforms.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django is not installed; install the project with `pip install -e .`."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
