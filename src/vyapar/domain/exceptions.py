"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
``StoreUnavailable`` deliberately sits outside that hierarchy: it is an
infrastructure failure the caller may retry, not a rule violation.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFound(EntityNotFoundError):
    """No catalog product has the requested id."""


class OfferNotFound(EntityNotFoundError):
    """No wholesaler offer has the requested id."""


class InvalidTransition(DomainException):
    """An order status change is not allowed from the current status."""


class EmptyCart(ValidationError):
    """Cart confirmation was attempted with no cart lines."""


class DuplicateOffer(ValidationError):
    """The wholesaler already lists this product."""


class UnauthorizedActor(DomainException):
    """The acting user may not perform this operation."""


class StoreUnavailable(Exception):
    """The backing document store could not complete an operation."""
