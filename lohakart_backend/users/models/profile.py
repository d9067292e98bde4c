# users/models/profile.py

from django.conf import settings
from django.db import models


class Profile(models.Model):
    """
    Buyer contact + delivery details (one per account).

    Created at registration; admin user listings are built from profiles
    joined to their account email.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="profile",
    )

    full_name = models.CharField(max_length=150, blank=True, default="")
    phone = models.CharField(max_length=30, blank=True, default="")
    company_name = models.CharField(max_length=200, blank=True, default="")

    address = models.TextField(blank=True, default="")
    city = models.CharField(max_length=100, blank=True, default="")
    state = models.CharField(max_length=100, blank=True, default="")
    pincode = models.CharField(max_length=12, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    @property
    def shipping_address(self) -> str:
        """
        Single-line address used to prefill checkout.
        """
        parts = [self.address, self.city, self.state, self.pincode]
        return ", ".join(p.strip() for p in parts if p and p.strip())

    def __str__(self):
        return self.full_name or str(self.user_id)
