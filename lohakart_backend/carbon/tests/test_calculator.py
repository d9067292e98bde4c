# carbon/tests/test_calculator.py

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import SimpleTestCase, TestCase
from rest_framework.test import APIClient

from carbon.services.calculator import CarbonInputError, calculate_emissions, production_factor

User = get_user_model()


class CalculatorTests(SimpleTestCase):
    """
    GUARANTEES:
    - Production and transport factors are applied per tonne
    - kg input is converted to tonnes
    - Mixed route blends linearly by recycled share
    - Zero quantity never divides by zero
    """

    def test_virgin_by_truck(self):
        r = calculate_emissions(quantity=10, production_route="virgin", distance_km=500, transport_mode="truck")
        self.assertEqual(r.production, Decimal("19.000000"))
        self.assertEqual(r.transport, Decimal("0.500000"))
        self.assertEqual(r.total, Decimal("19.500000"))
        self.assertEqual(r.per_tonne, Decimal("1.950000"))
        self.assertEqual(r.savings, Decimal("0.000000"))
        self.assertEqual(r.efficiency_percent, Decimal("100.00"))

    def test_recycled_saves_against_virgin(self):
        r = calculate_emissions(quantity=10, production_route="recycled", distance_km=0)
        self.assertEqual(r.total, Decimal("4.000000"))
        self.assertEqual(r.virgin_baseline, Decimal("19.000000"))
        self.assertEqual(r.savings, Decimal("15.000000"))
        self.assertEqual(r.efficiency_percent, Decimal("21.05"))

    def test_kg_converted_to_tonnes(self):
        r = calculate_emissions(quantity=2500, unit="kg", production_route="virgin")
        self.assertEqual(r.quantity_tonnes, Decimal("2.500000"))
        self.assertEqual(r.production, Decimal("4.750000"))

    def test_mixed_blend(self):
        self.assertEqual(production_factor("mixed", 50), Decimal("1.15"))
        self.assertEqual(production_factor("mixed", 0), Decimal("1.9"))
        self.assertEqual(production_factor("mixed", 100), Decimal("0.4"))

    def test_rail_and_ship(self):
        rail = calculate_emissions(quantity=100, production_route="virgin", distance_km=1000, transport_mode="rail")
        ship = calculate_emissions(quantity=100, production_route="virgin", distance_km=1000, transport_mode="ship")
        self.assertEqual(rail.transport, Decimal("3.000000"))
        self.assertEqual(ship.transport, Decimal("1.000000"))

    def test_zero_quantity(self):
        r = calculate_emissions(quantity=0, production_route="virgin", distance_km=100)
        self.assertEqual(r.total, Decimal("0.000000"))
        self.assertEqual(r.per_tonne, Decimal("0.000000"))
        self.assertEqual(r.efficiency_percent, Decimal("0.00"))

    def test_invalid_inputs(self):
        with self.assertRaises(CarbonInputError):
            production_factor("mixed", 120)
        with self.assertRaises(CarbonInputError):
            calculate_emissions(quantity=1, production_route="virgin", transport_mode="air")
        with self.assertRaises(CarbonInputError):
            calculate_emissions(quantity=1, production_route="electrolytic")


class CarbonApiTests(TestCase):
    """
    GUARANTEES:
    - Factors are public
    - Calculation requires a signed-in user
    """

    def setUp(self):
        self.client = APIClient()
        self.buyer = User.objects.create_user(email="buyer@lohakart.in", password="x")

    def test_factors_public(self):
        res = self.client.get("/api/carbon/factors/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["production"]["virgin"], "1.9")
        self.assertEqual(res.data["transport"]["rail"], "0.00003")
        self.assertIn("TMT Bars", res.data["metal_categories"])
        self.assertEqual(res.data["transport_modes"], ["truck", "rail", "ship"])

    def test_calculate_requires_auth(self):
        res = self.client.post("/api/carbon/calculate/", {"production_route": "virgin", "quantity": 1}, format="json")
        self.assertEqual(res.status_code, 401)

    def test_calculate(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.post(
            "/api/carbon/calculate/",
            {
                "metal_category": "Structural Steel",
                "production_route": "mixed",
                "recycled_percentage": 50,
                "quantity": 2,
                "unit": "tonne",
                "distance_km": 100,
                "transport_mode": "truck",
            },
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["production"], "2.300000")
        self.assertEqual(res.data["transport"], "0.020000")
        self.assertEqual(res.data["total"], "2.320000")
        self.assertEqual(res.data["savings"], "1.500000")

    def test_mixed_needs_percentage(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.post(
            "/api/carbon/calculate/", {"production_route": "mixed", "quantity": 2}, format="json"
        )
        self.assertEqual(res.status_code, 400)
        self.assertIn("recycled_percentage", res.data)

    def test_largest_accepted_input_is_serialized(self):
        self.client.force_authenticate(self.buyer)
        res = self.client.post(
            "/api/carbon/calculate/",
            {
                "production_route": "virgin",
                "quantity": "99999999999.999",
                "distance_km": "99999999.99",
                "transport_mode": "truck",
            },
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            Decimal(res.data["total"]),
            Decimal(res.data["production"]) + Decimal(res.data["transport"]),
        )
        self.assertEqual(res.data["savings"], "0.000000")
