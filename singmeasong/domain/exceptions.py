"""Domain errors raised by the recommendation service."""


class DomainError(Exception):
    """Base class for expected, caller-recoverable failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when a candidate recommendation is malformed or rejected."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConflictError(DomainError):
    """Raised when a recommendation with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Recommendation '{name}' already exists")
        self.name = name


class NotFoundError(DomainError):
    """Raised when a recommendation does not exist (or none exist at all)."""

    def __init__(self, message: str = "Recommendation not found") -> None:
        super().__init__(message)

    @classmethod
    def for_id(cls, recommendation_id: int) -> "NotFoundError":
        return cls(f"Recommendation {recommendation_id} not found")
