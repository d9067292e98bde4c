# users/views/profile.py

"""
PROFILE + CREDENTIALS

GET/PATCH /api/auth/profile/
POST      /api/auth/change-email/
POST      /api/auth/change-password/
"""

from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from users.serializers import (
    ChangeEmailSerializer,
    ChangePasswordSerializer,
    ProfileSerializer,
    UserSerializer,
)
from users.services.accounts import (
    AccountError,
    change_email,
    change_password,
    get_or_create_profile,
)


class ProfileView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ProfileSerializer

    @extend_schema(tags=["Auth"], responses={200: ProfileSerializer})
    def get(self, request):
        profile = get_or_create_profile(request.user)
        return Response(ProfileSerializer(profile).data)

    @extend_schema(tags=["Auth"], request=ProfileSerializer, responses={200: ProfileSerializer})
    def patch(self, request):
        profile = get_or_create_profile(request.user)
        serializer = ProfileSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)


class ChangeEmailView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ChangeEmailSerializer

    @extend_schema(
        tags=["Auth"],
        request=ChangeEmailSerializer,
        responses={200: UserSerializer, 400: OpenApiResponse(description="Rejected")},
    )
    def post(self, request):
        serializer = ChangeEmailSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = change_email(request.user, **serializer.validated_data)
        except AccountError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(UserSerializer(user).data)


class ChangePasswordView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = ChangePasswordSerializer

    @extend_schema(
        tags=["Auth"],
        request=ChangePasswordSerializer,
        responses={200: OpenApiResponse(description="Password updated"), 400: OpenApiResponse(description="Rejected")},
    )
    def post(self, request):
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            change_password(
                request.user,
                current_password=serializer.validated_data["current_password"],
                new_password=serializer.validated_data["new_password"],
            )
        except AccountError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except DjangoValidationError as exc:
            return Response({"new_password": exc.messages}, status=status.HTTP_400_BAD_REQUEST)

        return Response({"detail": "Password updated successfully."})
