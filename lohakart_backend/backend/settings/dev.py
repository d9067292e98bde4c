# backend/settings/dev.py
"""
LOCAL DEVELOPMENT + TEST SETTINGS

SQLite, DEBUG on, the Vite dev server as the only browser origin.
"""

from __future__ import annotations

from .base import *  # noqa: F403
from .base import env

DEBUG = True

# "testserver" is the host Django's test client sends
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["localhost", "127.0.0.1", "testserver"])

_LOCAL_FRONTEND = ["http://localhost:5173", "http://127.0.0.1:5173"]
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=_LOCAL_FRONTEND)
CSRF_TRUSTED_ORIGINS = env.list("CSRF_TRUSTED_ORIGINS", default=_LOCAL_FRONTEND)
