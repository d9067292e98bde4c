# carbon/urls.py

from django.urls import path

from carbon.views import CarbonCalculateView, CarbonFactorsView

urlpatterns = [
    path("factors/", CarbonFactorsView.as_view(), name="carbon-factors"),
    path("calculate/", CarbonCalculateView.as_view(), name="carbon-calculate"),
]
