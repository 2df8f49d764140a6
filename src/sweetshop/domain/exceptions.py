"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Promo codes --------------------------------------------------------------


class PromoCodeError(DomainException):
    """A promo code was rejected. Always correctable by the shopper."""


class EmptyCodeError(PromoCodeError):
    """No promo code was entered."""


class InvalidOrExpiredCodeError(PromoCodeError):
    """The code is unknown, inactive, or outside its date window."""


class NotApplicableToCartError(PromoCodeError):
    """The code is valid but none of the cart's products qualify."""


# --- Collaborator failures ----------------------------------------------------


class DataSourceError(DomainException):
    """An external store could not be read."""


class OfferSourceError(DataSourceError):
    """The offer collection could not be fetched."""


class ProductSourceError(DataSourceError):
    """The product catalog could not be fetched."""


class OrderSubmissionError(DomainException):
    """The order could not be handed over for fulfilment."""
