from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.roles import effective_capabilities_for
from users.serializers import UserSerializer


class MeView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = UserSerializer

    @extend_schema(
        tags=["Auth"],
        responses={200: UserSerializer},
        description="Get the current account plus its capabilities.",
    )
    def get(self, request):
        data = dict(UserSerializer(request.user).data)
        data["capabilities"] = sorted(effective_capabilities_for(request.user))
        return Response(data)
