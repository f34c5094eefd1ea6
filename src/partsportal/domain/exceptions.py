"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers (the CLI, a BFF layer) can catch them uniformly.  Every class
carries a stable ``code`` so bulk price results and API envelopes can report
*why* something failed without parsing messages.

The hierarchy mirrors the failure taxonomy of the core:

- NotFound           -> EntityNotFoundError and its subclasses
- EntitlementDenied  -> EntitlementDeniedError
- InactiveResource   -> InactiveResourceError and its subclasses
- EmptyCart          -> EmptyCartError
- TransactionFailure -> TransactionFailureError
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DOMAIN_ERROR"


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    code = "VALIDATION_ERROR"


# --- NotFound ----------------------------------------------------------------


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "NOT_FOUND"


class DealerNotFoundError(EntityNotFoundError):
    code = "DEALER_NOT_FOUND"


class ProductNotFoundError(EntityNotFoundError):
    code = "PRODUCT_NOT_FOUND"


class BandAssignmentNotFoundError(EntityNotFoundError):
    """The dealer has no band for a part type.

    Never defaulted: pricing must fail rather than guess a band.
    """

    code = "NO_BAND_ASSIGNMENT"


class BandPriceNotFoundError(EntityNotFoundError):
    """The product has no price point for the dealer's band."""

    code = "NO_PRICE_FOR_BAND"


class CartItemNotFoundError(EntityNotFoundError):
    code = "CART_ITEM_NOT_FOUND"


class OrderNotFoundError(EntityNotFoundError):
    code = "ORDER_NOT_FOUND"


# --- Business rules ----------------------------------------------------------


class EntitlementDeniedError(DomainException):
    """The dealer's entitlement does not cover the product's part type."""

    code = "ENTITLEMENT_DENIED"


class InactiveResourceError(DomainException):
    """The resource exists but is administratively closed."""

    code = "INACTIVE_RESOURCE"


class ProductInactiveError(InactiveResourceError):
    code = "PRODUCT_INACTIVE"


class DealerInactiveError(InactiveResourceError):
    code = "DEALER_INACTIVE"


class EmptyCartError(DomainException):
    code = "EMPTY_CART"


class TransactionFailureError(DomainException):
    """The atomic checkout sequence could not be committed."""

    code = "TRANSACTION_FAILED"
