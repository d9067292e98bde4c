"""
PATH: users/management/commands/ensure_superuser.py

Back-office admin bootstrap.

- Reads AUTO_ADMIN_EMAIL + AUTO_ADMIN_PASSWORD from env.
- Idempotent: creates the admin if missing; promotes + resets password if present.
- Never prints the password.
"""

from __future__ import annotations

import logging

import environ
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from permissions.roles import ROLE_ADMIN
from users.models import Profile

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Create/update the initial admin account from env vars (idempotent)."

    def handle(self, *args, **options):
        env = environ.Env()
        email = env.str("AUTO_ADMIN_EMAIL", default="").strip()
        password = env.str("AUTO_ADMIN_PASSWORD", default="").strip()

        if not email or not password:
            self.stdout.write(self.style.WARNING("AUTO_ADMIN_* env vars not set. Skipping."))
            return

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()

            if user:
                user.role = ROLE_ADMIN
                user.is_active = True
                user.is_staff = True
                user.is_superuser = True
                user.set_password(password)
                user.save()
                outcome = "updated"
            else:
                user = User.objects.create_superuser(email=email, password=password)
                outcome = "created"

            Profile.objects.get_or_create(user=user, defaults={"full_name": "Administrator"})

        logger.info("Admin ensured", extra={"user_id": str(user.id), "outcome": outcome})
        self.stdout.write(self.style.SUCCESS(f"Admin ensured: {email} ({outcome})"))
