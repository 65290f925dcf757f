"""
Custom exceptions for the application.

Domain layers raise these; controllers translate them to HTTP status codes
(validation -> 400, not found -> 404).
"""


class ShowcaseError(Exception):
    """Base class for every application error."""

    pass


# ------------------- Validation -------------------


class DomainValidationError(ShowcaseError, ValueError):
    """A field check or business rule was violated."""

    pass


class EmptyTitleError(DomainValidationError):
    def __init__(self):
        super().__init__("task title cannot be empty")


class TitleTooLongError(DomainValidationError):
    def __init__(self, limit: int = 200):
        super().__init__(f"task title cannot exceed {limit} characters")


class DescriptionTooLongError(DomainValidationError):
    def __init__(self, limit: int = 1000):
        super().__init__(f"task description cannot exceed {limit} characters")


class NegativeAmountError(DomainValidationError):
    def __init__(self, message: str = "money amount cannot be negative"):
        super().__init__(message)


class CurrencyMismatchError(DomainValidationError):
    def __init__(self):
        super().__init__("currency mismatch")


class EmptyCategoryError(DomainValidationError):
    def __init__(self):
        super().__init__("category name cannot be empty")


class EmptyProductNameError(DomainValidationError):
    def __init__(self):
        super().__init__("product name cannot be empty")


class NonPositivePriceError(DomainValidationError):
    def __init__(self):
        super().__init__("price must be positive")


class InvalidDiscountError(DomainValidationError):
    def __init__(self):
        super().__init__("discount must be between 0 and 100")


class NonPositiveQuantityError(DomainValidationError):
    def __init__(self):
        super().__init__("quantity must be positive")


class EmptyOrderError(DomainValidationError):
    def __init__(self):
        super().__init__("order must have at least one item")


class InvalidOrderStateError(DomainValidationError):
    """Raised when an order status transition is not allowed."""

    pass


class UnsupportedPaymentTypeError(DomainValidationError):
    def __init__(self, payment_type: str = ""):
        self.payment_type = payment_type
        super().__init__("unsupported payment type")


# ------------------- Lookup -------------------


class NotFoundError(ShowcaseError, LookupError):
    """A requested record does not exist."""

    pass


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id=None):
        self.task_id = task_id
        super().__init__("task not found")


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id=None):
        self.product_id = product_id
        super().__init__("product not found")


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id=None):
        self.order_id = order_id
        super().__init__("order not found")


# ------------------- Integration -------------------


class PaymentFailedError(ShowcaseError):
    """A payment strategy declined the charge."""

    pass


class UpstreamServiceError(ShowcaseError):
    """The API gateway could not reach an upstream service."""

    def __init__(self, service: str, reason: str = ""):
        self.service = service
        self.reason = reason
        super().__init__("upstream service unavailable")
