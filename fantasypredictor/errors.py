"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message, 400)


class CapacityError(AppError):
    """Raised when a bounded collection is already full."""

    def __init__(self, message="Capacity reached."):
        """Initialize the error."""
        super().__init__(message, 409)


class InsufficientFundsError(AppError):
    """Raised when a debit would take a balance below zero."""

    def __init__(self, message="Insufficient balance."):
        """Initialize the error."""
        super().__init__(message, 402)


class InvalidTransitionError(AppError):
    """Raised when the game is asked to move to a screen it cannot reach."""

    def __init__(self, message="That action is not available right now."):
        """Initialize the error."""
        super().__init__(message, 409)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class ExternalServiceError(AppError):
    """Raised when Firebase Auth or Firestore rejects a call."""

    def __init__(self, message="Service unavailable. Please try again later."):
        """Initialize the error."""
        super().__init__(message, 502)
