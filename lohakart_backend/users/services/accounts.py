# users/services/accounts.py

"""
ACCOUNT SERVICE

Purpose:
- Registration (user + profile in one transaction)
- Email / password changes (current password required)
- Privileged account administration (list + delete)

Rules:
- Admins cannot delete their own account.
- Deleting an account cascades to its profile, reviews and service requests;
  orders are kept with user=NULL so sales history survives.
"""

from __future__ import annotations

import logging
import uuid

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.db import transaction

from users.models import Profile

logger = logging.getLogger(__name__)

User = get_user_model()


# -----------------------------
# Errors
# -----------------------------
class AccountError(Exception):
    """Base class for account administration failures."""


class InvalidCurrentPasswordError(AccountError):
    pass


class EmailAlreadyInUseError(AccountError):
    pass


class SelfDeletionError(AccountError):
    pass


class AccountNotFoundError(AccountError):
    pass


# -----------------------------
# Registration
# -----------------------------
@transaction.atomic
def register_user(*, email: str, password: str, full_name: str = "", phone: str = ""):
    user = User.objects.create_user(email=email, password=password)
    Profile.objects.create(
        user=user,
        full_name=(full_name or "").strip(),
        phone=(phone or "").strip(),
    )

    logger.info("Account registered", extra={"user_id": str(user.id)})
    return user


def get_or_create_profile(user) -> Profile:
    profile, _ = Profile.objects.get_or_create(user=user)
    return profile


# -----------------------------
# Credentials
# -----------------------------
@transaction.atomic
def change_email(user, *, new_email: str, current_password: str):
    if not user.check_password(current_password or ""):
        raise InvalidCurrentPasswordError("Current password is incorrect.")

    new_email = User.objects.normalize_email((new_email or "").strip())
    if User.objects.filter(email__iexact=new_email).exclude(pk=user.pk).exists():
        raise EmailAlreadyInUseError("An account with this email already exists.")

    user.email = new_email
    user.save(update_fields=["email", "updated_at"])

    logger.info("Account email changed", extra={"user_id": str(user.id)})
    return user


def change_password(user, *, current_password: str, new_password: str):
    """
    Django's password validators run against the new password
    (min length 6 + common-password check).
    """
    if not user.check_password(current_password or ""):
        raise InvalidCurrentPasswordError("Current password is incorrect.")

    validate_password(new_password, user=user)

    user.set_password(new_password)
    user.save(update_fields=["password", "updated_at"])

    logger.info("Account password changed", extra={"user_id": str(user.id)})
    return user


# -----------------------------
# Privileged administration
# -----------------------------
def list_accounts():
    """
    Every profile merged with its account email, newest first.
    """
    return Profile.objects.select_related("user").order_by("-created_at")


def get_account_profile(user_id):
    profile = Profile.objects.select_related("user").filter(user_id=user_id).first()
    if profile is None:
        raise AccountNotFoundError("User not found.")
    return profile


@transaction.atomic
def delete_account(*, actor, user_id) -> None:
    if not user_id:
        raise AccountError("User ID is required.")

    try:
        user_id = uuid.UUID(str(user_id))
    except ValueError:
        raise AccountError("User ID must be a valid UUID.")

    if user_id == actor.pk:
        raise SelfDeletionError("You cannot delete your own account.")

    target = User.objects.filter(pk=user_id).first()
    if target is None:
        raise AccountNotFoundError("User not found.")

    target.delete()

    logger.warning(
        "Account deleted by admin",
        extra={"actor_id": str(actor.pk), "deleted_user_id": str(user_id)},
    )
