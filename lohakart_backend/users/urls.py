# users/urls.py

from django.urls import path

from .views import (
    AdminUsersView,
    ChangeEmailView,
    ChangePasswordView,
    LoginView,
    LogoutView,
    MeView,
    ProfileView,
    RegisterView,
)

app_name = "users"

urlpatterns = [
    # ---------------- PUBLIC AUTH ----------------
    path("register/", RegisterView.as_view(), name="register"),
    path("login/", LoginView.as_view(), name="login"),
    # ---------------- AUTHENTICATED ----------------
    path("logout/", LogoutView.as_view(), name="logout"),
    path("me/", MeView.as_view(), name="me"),
    path("profile/", ProfileView.as_view(), name="profile"),
    path("change-email/", ChangeEmailView.as_view(), name="change-email"),
    path("change-password/", ChangePasswordView.as_view(), name="change-password"),
    # ---------------- ADMIN ----------------
    path("admin/users/", AdminUsersView.as_view(), name="admin-users"),
    path("admin/users/<uuid:user_id>/", AdminUsersView.as_view(), name="admin-user"),
]
