# users/views/admin_users.py

"""
PRIVILEGED USER ADMINISTRATION

GET    /api/auth/admin/users/        -> every profile + account email, newest first
GET    /api/auth/admin/users/<id>/   -> one profile (404 unknown)
DELETE /api/auth/admin/users/<id>/   -> 400 self, 404 unknown, cascades
DELETE /api/auth/admin/users/        -> body {"user_id": ...} (400 when missing)
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.roles import CAP_USERS_MANAGE, HasCapability
from users.serializers import AdminUserSerializer
from users.services.accounts import (
    AccountError,
    AccountNotFoundError,
    delete_account,
    get_account_profile,
    list_accounts,
)


class AdminUsersView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_USERS_MANAGE
    serializer_class = AdminUserSerializer

    @extend_schema(tags=["Admin"], responses={200: AdminUserSerializer(many=True)})
    def get(self, request, user_id=None):
        if user_id is not None:
            try:
                profile = get_account_profile(user_id)
            except AccountNotFoundError as exc:
                return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
            return Response(AdminUserSerializer(profile).data)

        data = AdminUserSerializer(list_accounts(), many=True).data
        return Response({"users": data})

    @extend_schema(
        tags=["Admin"],
        responses={
            200: OpenApiResponse(description="Deleted"),
            400: OpenApiResponse(description="Missing id or self-deletion"),
            404: OpenApiResponse(description="Unknown user"),
        },
    )
    def delete(self, request, user_id=None):
        user_id = user_id or request.data.get("user_id")

        try:
            delete_account(actor=request.user, user_id=user_id)
        except AccountNotFoundError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except AccountError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"success": True})
