"""
PATH: users/auth_backends.py

AUTH BACKEND: Email OR Username login (not both)

Rules:
- identifier containing "@" -> email lookup, otherwise username lookup
- both email= and username= supplied explicitly -> authentication fails
- inactive accounts never authenticate
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import BaseBackend

User = get_user_model()


class EmailOrUsernameBackend(BaseBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        email_kw = (kwargs.get("email") or "").strip()

        if email_kw and username:
            return None

        identifier = (username or email_kw or "").strip()
        if not identifier or password is None:
            return None

        lookup = {"email__iexact": identifier} if "@" in identifier else {"username__iexact": identifier}
        user = User.objects.filter(**lookup).first()

        if user is None or not user.is_active:
            return None

        return user if user.check_password(password) else None

    def get_user(self, user_id):
        return User.objects.filter(pk=user_id).first()
