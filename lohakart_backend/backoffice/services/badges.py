# backoffice/services/badges.py

"""
UNREAD BADGES

Polled by the client on navigation.

Admin side (rows nobody in the back office has opened yet):
- orders           Order.is_read = False
- fabrication      FabricationRequest.admin_is_read = False
- recycling        RecyclingRequest.admin_is_read = False
- applications     JobApplication.is_read = False
- messages         ContactMessage.is_read = False

Customer side (own rows with an update the customer has not seen):
- orders / fabrication / recycling with user_is_read = False, plus total
"""

from careers.models import JobApplication
from content.models import ContactMessage
from orders.models import Order
from service_requests.models import FabricationRequest, RecyclingRequest


def admin_badges() -> dict[str, int]:
    return {
        "orders": Order.objects.filter(is_read=False).count(),
        "fabrication": FabricationRequest.objects.filter(admin_is_read=False).count(),
        "recycling": RecyclingRequest.objects.filter(admin_is_read=False).count(),
        "applications": JobApplication.objects.filter(is_read=False).count(),
        "messages": ContactMessage.objects.filter(is_read=False).count(),
    }


def customer_badges(user) -> dict[str, int]:
    counts = {
        "orders": Order.objects.filter(user=user, user_is_read=False).count(),
        "fabrication": FabricationRequest.objects.filter(user=user, user_is_read=False).count(),
        "recycling": RecyclingRequest.objects.filter(user=user, user_is_read=False).count(),
    }
    counts["total"] = sum(counts.values())
    return counts
