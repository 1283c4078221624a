"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import List, Optional, Sequence

from core.domain.result import FieldError


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ProductException(DomainException):
    """Base exception for product-related errors."""

    pass


class ProductNotFoundError(ProductException):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class DuplicateProductNameError(ProductException):
    """Raised when the store rejects a product name that is already taken."""

    def __init__(self, message: str = "A product with this name already exists"):
        super().__init__(message, code="DUPLICATE_PRODUCT_NAME")


class ProductValidationError(ProductException):
    """Raised when product input fails field validation."""

    def __init__(
        self,
        errors: Sequence[FieldError] = (),
        message: str = "Validation failed",
    ):
        super().__init__(message, code="VALIDATION_FAILED")
        self.errors: List[FieldError] = list(errors)


class PersistenceError(DomainException):
    """Raised when the product store fails for any other reason."""

    def __init__(self, message: str = "Persistence failure", cause: Optional[Exception] = None):
        super().__init__(message, code="PERSISTENCE_ERROR")
        self.cause = cause

