"""Authentication and password-reset exceptions.

These exceptions are raised by the keyforge_auth package and should be
caught and mapped to responses by the transport layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(AuthError):
    """Raised when no user is registered under the given email."""

    def __init__(self, email: str | None = None, message: str = "user not found"):
        self.email = email
        super().__init__(message)


class EmailAlreadyExistsError(AuthError):
    """Raised when a user is added under an email that is already registered."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class IncorrectPasswordError(AuthError):
    """Raised when the presented password does not match the stored hash."""

    def __init__(self, message: str = "incorrect password"):
        super().__init__(message)


class NoValidTokenFoundError(AuthError):
    """Raised when no reset token matches the presented email/token pair."""

    def __init__(self, message: str = "no valid token found"):
        super().__init__(message)


class ProviderError(AuthError):
    """A collaborator failure annotated with the step that failed.

    The original exception is kept as ``cause`` and is also chained via
    ``raise ... from cause``.
    """

    def __init__(self, context: str, cause: BaseException):
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {cause}")


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class PasswordTooLongError(AuthError):
    """Raised when a password exceeds bcrypt's 72 byte input limit."""

    def __init__(self, max_bytes: int = 72):
        self.max_bytes = max_bytes
        super().__init__(f"password cannot be longer than {max_bytes} bytes")
