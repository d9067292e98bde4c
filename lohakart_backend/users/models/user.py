"""
PATH: users/models/user.py

CUSTOM USER MODEL

Auth rules:
- Email is the canonical login identity.
- Username is derived from the email local-part when not supplied (unique).
- Login accepts EITHER username OR email (custom auth backend).

Roles:
- "user"  : storefront buyer (default)
- "admin" : back office
Superusers are always treated as admins by permissions.roles.
"""

from __future__ import annotations

import uuid

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.exceptions import ValidationError
from django.db import models

from permissions.roles import ROLE_ADMIN, ROLE_CHOICES, ROLE_USER


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def _unique_username(self, base: str) -> str:
        base = (base or "user").strip().lower()
        candidate = base
        i = 1
        while self.model.objects.filter(username__iexact=candidate).exists():
            i += 1
            candidate = f"{base}{i}"
        return candidate

    def create_user(self, email=None, password=None, **extra_fields):
        """
        Supports:
        - create_user(email="a@b.com", password="x")
        - create_user(email="a@b.com", password="x", username="buyer")

        Rules:
        - email is required.
        - If username missing: derived from the email local-part (uniqueness ensured).
        """
        email = (email or extra_fields.pop("email", "") or "").strip()
        if not email:
            raise ValueError("Users must have an email address")

        email = self.normalize_email(email)

        username = (extra_fields.pop("username", "") or "").strip()
        if not username:
            username = self._unique_username(email.split("@")[0])

        extra_fields.setdefault("role", ROLE_USER)
        extra_fields.setdefault("is_active", True)

        user = self.model(email=email, username=username, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.full_clean(exclude=["password"])
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Superuser must have an email")
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("role", ROLE_ADMIN)
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email=email, password=password, **extra_fields)


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    username = models.CharField(max_length=150, unique=True)

    # Canonical identity
    email = models.EmailField(unique=True)

    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        if self.email:
            self.email = self.__class__.objects.normalize_email(self.email).strip()
        if self.username:
            self.username = self.username.strip()

        if not self.email:
            raise ValidationError({"email": "User must have an email"})

    @property
    def is_admin(self) -> bool:
        return self.is_superuser or self.role == ROLE_ADMIN

    def __str__(self):
        return f"{self.email} ({self.role})"
