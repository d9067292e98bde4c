"""
PATH: backend/asgi.py

ASGI entrypoint for the LohaKart API.
Production must export DJANGO_SETTINGS_MODULE=backend.settings.prod.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.dev")

application = get_asgi_application()
