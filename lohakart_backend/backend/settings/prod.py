# backend/settings/prod.py
"""
PATH: backend/settings/prod.py

PRODUCTION SETTINGS

Fails closed at import time when the deployment is misconfigured:
- SECRET_KEY missing or left at the dev placeholder
- ALLOWED_HOSTS empty
- DATABASE_URL missing or pointing at SQLite
- CORS/CSRF origins empty, local, or plain http
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, env


def _required(value, message):
    if not value:
        raise ImproperlyConfigured(message)
    return value


def _browser_origins(name: str) -> list[str]:
    origins = _required(env.list(name, default=[]), f"{name} must be set in production.")
    for origin in origins:
        if "localhost" in origin or "127.0.0.1" in origin:
            raise ImproperlyConfigured(f"{name} must not contain local origins in production ({origin}).")
        if not origin.startswith("https://"):
            raise ImproperlyConfigured(f"{name} must use https:// in production ({origin}).")
    return origins


DEBUG = False

SECRET_KEY = (env("SECRET_KEY", default="") or "").strip()
if SECRET_KEY in ("", "dev-insecure-change-me"):
    raise ImproperlyConfigured("SECRET_KEY must be set to a strong value in production.")

ALLOWED_HOSTS = _required(env.list("ALLOWED_HOSTS", default=[]), "ALLOWED_HOSTS must be set in production.")

# ----------------------------
# Database: Postgres only
# ----------------------------
_database_url = _required(
    (env("DATABASE_URL", default="") or "").strip(),
    "DATABASE_URL must be set in production (Postgres).",
)
if _database_url.startswith("sqlite"):
    raise ImproperlyConfigured("SQLite is not allowed in production; point DATABASE_URL at Postgres.")

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# ----------------------------
# Static (WhiteNoise) + media volume
# ----------------------------
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))
MEDIA_ROOT = env("MEDIA_ROOT", default=str(BASE_DIR / "media"))

MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ----------------------------
# TLS terminates at the load balancer
# ----------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", default=False)

# ----------------------------
# Cookies + headers
# ----------------------------
# the storefront cart rides on the session cookie
SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = env("SESSION_COOKIE_SAMESITE", default="Lax")

CSRF_COOKIE_SECURE = True
CSRF_COOKIE_HTTPONLY = True
CSRF_COOKIE_SAMESITE = "Lax"

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "same-origin"
SECURE_CROSS_ORIGIN_OPENER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"

# ----------------------------
# Browser origins
# ----------------------------
CORS_ALLOWED_ORIGINS = _browser_origins("CORS_ALLOWED_ORIGINS")
CSRF_TRUSTED_ORIGINS = _browser_origins("CSRF_TRUSTED_ORIGINS")
CORS_ALLOW_CREDENTIALS = True
