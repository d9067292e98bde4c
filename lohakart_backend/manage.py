#!/usr/bin/env python
"""
PATH: manage.py

LohaKart management entrypoint.

DJANGO_SETTINGS_MODULE falls back to backend.settings.dev when it is unset or
names the settings package itself; deployments set backend.settings.prod.

Useful commands:
    python manage.py migrate
    python manage.py seed_catalog
    AUTO_ADMIN_EMAIL=... AUTO_ADMIN_PASSWORD=... python manage.py ensure_superuser
    python manage.py test
"""

from __future__ import annotations

import os
import sys

DEFAULT_SETTINGS = "backend.settings.dev"


def main() -> None:
    selected = (os.environ.get("DJANGO_SETTINGS_MODULE") or "").strip()
    if selected in ("", "backend.settings"):
        os.environ["DJANGO_SETTINGS_MODULE"] = DEFAULT_SETTINGS

    from django.core.management import execute_from_command_line

    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
