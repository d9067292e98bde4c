# products/serializers/__init__.py

from .category import CategorySerializer
from .product import ProductSerializer
from .review import ReviewModerationSerializer, ReviewSerializer

__all__ = [
    "CategorySerializer",
    "ProductSerializer",
    "ReviewSerializer",
    "ReviewModerationSerializer",
]
