# products/views/__init__.py

from .category import CategoryViewSet
from .product import ProductViewSet
from .review import ReviewModerationViewSet

__all__ = [
    "CategoryViewSet",
    "ProductViewSet",
    "ReviewModerationViewSet",
]
