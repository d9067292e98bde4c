from .admin_users import AdminUsersView
from .auth import LoginView, LogoutView, RegisterView
from .me import MeView
from .profile import ChangeEmailView, ChangePasswordView, ProfileView

__all__ = [
    "RegisterView",
    "LoginView",
    "LogoutView",
    "MeView",
    "ProfileView",
    "ChangeEmailView",
    "ChangePasswordView",
    "AdminUsersView",
]
