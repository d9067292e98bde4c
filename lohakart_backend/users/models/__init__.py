"""
PATH: users/models/__init__.py

Users models export surface.
"""

from .profile import Profile
from .user import User

__all__ = [
    "Profile",
    "User",
]
