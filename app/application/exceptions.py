class UnknownFieldError(ValueError):
    """Raised when an event names a field the order form does not have."""
    pass


class OrderSubmissionError(RuntimeError):
    """Raised when the order endpoint rejects an order or cannot be reached."""

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message or "Order submission failed")
        self.message = message
        self.status_code = status_code


class UnknownToppingError(ValueError):
    """Raised when a topping id is not in the catalog."""
    pass
