# permissions/roles.py

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import SAFE_METHODS, BasePermission


# =========================================================
# ROLE CONSTANTS
# =========================================================
# Two account roles: storefront buyers and back-office admins.
ROLE_ADMIN = "admin"
ROLE_USER = "user"

ROLE_CHOICES = [
    (ROLE_USER, "User"),
    (ROLE_ADMIN, "Admin"),
]


# =========================================================
# CAPABILITIES (THE REAL PERMISSION LANGUAGE)
# =========================================================
# Views should protect capabilities, not raw roles.
CAP_SHOP_CHECKOUT = "shop.checkout"
CAP_SHOP_REVIEW = "shop.review"
CAP_SERVICES_REQUEST = "services.request"
CAP_CARBON_CALCULATE = "carbon.calculate"

CAP_CATALOG_EDIT = "catalog.edit"
CAP_ORDERS_MANAGE = "orders.manage"
CAP_PRICING_EDIT = "pricing.edit"
CAP_CAREERS_MANAGE = "careers.manage"
CAP_REQUESTS_MANAGE = "requests.manage"
CAP_CONTENT_EDIT = "content.edit"
CAP_MESSAGES_VIEW = "messages.view"
CAP_USERS_MANAGE = "users.manage"
CAP_ANALYTICS_VIEW = "analytics.view"

CUSTOMER_CAPABILITIES = {
    CAP_SHOP_CHECKOUT,
    CAP_SHOP_REVIEW,
    CAP_SERVICES_REQUEST,
    CAP_CARBON_CALCULATE,
}

ALL_CAPABILITIES = CUSTOMER_CAPABILITIES | {
    CAP_CATALOG_EDIT,
    CAP_ORDERS_MANAGE,
    CAP_PRICING_EDIT,
    CAP_CAREERS_MANAGE,
    CAP_REQUESTS_MANAGE,
    CAP_CONTENT_EDIT,
    CAP_MESSAGES_VIEW,
    CAP_USERS_MANAGE,
    CAP_ANALYTICS_VIEW,
}


# =========================================================
# ROLE → CAPABILITY MAP
# =========================================================
ROLE_CAPABILITIES: dict[str, set[str]] = {
    ROLE_ADMIN: set(ALL_CAPABILITIES),
    ROLE_USER: set(CUSTOMER_CAPABILITIES),
}


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    """
    Superusers are always admins, whatever their stored role says.
    """
    if not user or not getattr(user, "is_authenticated", False):
        return None
    if getattr(user, "is_superuser", False):
        return ROLE_ADMIN
    return getattr(user, "role", None)


def is_admin(user) -> bool:
    return get_user_role(user) == ROLE_ADMIN


def effective_capabilities_for(user) -> set[str]:
    return set(ROLE_CAPABILITIES.get(get_user_role(user), set()))


def user_has_capability(user, capability: str) -> bool:
    return capability in effective_capabilities_for(user)


# =========================================================
# Base Role Permission (Internal Use)
# =========================================================
class BaseRolePermission(BasePermission):
    """
    Base permission for role-based access control.

    Subclasses must define:
    - allowed_roles (set)
    """

    allowed_roles: set[str] = set()

    def has_permission(self, request, view):
        user_role = get_user_role(request.user)
        if not user_role:
            return False

        return user_role in self.allowed_roles


class IsAdmin(BaseRolePermission):
    allowed_roles = {ROLE_ADMIN}


class IsCustomer(BaseRolePermission):
    allowed_roles = {ROLE_USER, ROLE_ADMIN}


# =========================================================
# Capability Permissions
# =========================================================
class HasCapability(BasePermission):
    """
    Require a specific capability.

    Usage:
        permission_classes = [IsAuthenticated, HasCapability]
        view.required_capability = CAP_ORDERS_MANAGE
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_capability", None)
        if not required:
            # If not set, deny-by-default to avoid accidental open endpoints
            return False

        return user_has_capability(user, required)


class HasAnyCapability(BasePermission):
    """
    Require ANY capability from a list.

    Usage:
        view.required_any_capabilities = {CAP_REQUESTS_MANAGE, CAP_ORDERS_MANAGE}
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = getattr(view, "required_any_capabilities", None)
        if not required:
            return False

        caps = effective_capabilities_for(user)
        return any(cap in caps for cap in set(required))


class ReadOnlyOrCapability(HasCapability):
    """
    Public catalog surfaces: anyone may read, writes need the capability.
    """

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)
