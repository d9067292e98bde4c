"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .category import Category
from .product import Product
from .review import Review

__all__ = [
    "Category",
    "Product",
    "Review",
]
