"""Domain errors. Raised where a rule is broken; the service turns them into results."""


class ContactValidationError(ValueError):
    """A field value failed a structural or content-safety rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class CapacityExceededError(RuntimeError):
    """The store already holds the maximum number of contacts."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Maximum contact limit reached: {limit}")
        self.limit = limit
