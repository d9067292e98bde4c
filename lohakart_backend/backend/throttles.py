# backend/throttles.py

from rest_framework.throttling import AnonRateThrottle


class PublicWriteThrottle(AnonRateThrottle):
    """
    For public write endpoints (register, contact form, job applications).
    Uses REST_FRAMEWORK['DEFAULT_THROTTLE_RATES']['public_write'].
    """

    scope = "public_write"


class PublicCatalogThrottle(AnonRateThrottle):
    """
    For public browsing endpoints (catalog, pricing ticker, news).
    """

    scope = "public_catalog"
