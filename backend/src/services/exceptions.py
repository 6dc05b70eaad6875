"""Shared exceptions for service layer operations."""


class ConflictError(Exception):
    """
    Raised when a write would violate a uniqueness rule.

    Used by both signup and profile edit when the email already belongs to
    another account.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidCredentialsError(Exception):
    """
    Raised when signin fails.

    The message is the same whether the email is unknown or the password is
    wrong, so callers cannot tell which accounts exist.
    """

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")


class UnauthenticatedError(Exception):
    """Raised when a bearer token is missing, invalid, expired, or its user is gone."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class ForbiddenError(Exception):
    """
    Raised when the acting user does not own the resource.

    Also raised when the resource does not exist at all, so a caller cannot
    probe for ids owned by other users.
    """

    def __init__(self, message: str = "Access to resource denied") -> None:
        super().__init__(message)
