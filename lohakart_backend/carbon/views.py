# carbon/views.py

"""
CARBON ACCOUNTING

- GET  /api/carbon/factors/     public reference data for the calculator form
- POST /api/carbon/calculate/   signed-in users only
"""

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.throttles import PublicCatalogThrottle
from carbon.serializers import CarbonCalculationSerializer, CarbonResultSerializer
from carbon.services.calculator import CarbonInputError, calculate_emissions, factors_table
from permissions.roles import CAP_CARBON_CALCULATE, HasCapability

logger = logging.getLogger(__name__)


class CarbonFactorsView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(tags=["Carbon"], responses={200: OpenApiResponse(description="Factors and form options")})
    def get(self, request):
        table = factors_table()
        table["production"] = {k: str(v) for k, v in table["production"].items()}
        table["transport"] = {k: str(v) for k, v in table["transport"].items()}
        return Response(table)


class CarbonCalculateView(APIView):
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_CARBON_CALCULATE

    @extend_schema(
        tags=["Carbon"],
        request=CarbonCalculationSerializer,
        responses={200: CarbonResultSerializer, 400: OpenApiResponse(description="Invalid input")},
    )
    def post(self, request):
        serializer = CarbonCalculationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result = calculate_emissions(**serializer.validated_data)
        except CarbonInputError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        logger.info(
            "Carbon calculation",
            extra={"user_id": str(request.user.id), "route": result.production_route, "total": str(result.total)},
        )
        return Response(CarbonResultSerializer(result.as_dict()).data)
