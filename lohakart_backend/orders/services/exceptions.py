# orders/services/exceptions.py


class CheckoutError(Exception):
    """Base class for checkout failures (mapped to HTTP 400)."""


class EmptyCartError(CheckoutError):
    pass


class InvalidCartLineError(CheckoutError):
    """Unknown / inactive product or a quantity below 1."""


class MissingShippingAddressError(CheckoutError):
    pass


class OrderStatusError(Exception):
    """Rejected status change on an existing order."""
