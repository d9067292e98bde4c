# backend/settings/__init__.py
"""
Settings live in concrete modules; pick one with DJANGO_SETTINGS_MODULE:
- backend.settings.dev   local runs and the test suite
- backend.settings.prod  deployed API
"""
