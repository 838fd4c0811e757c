"""Exceptions shared by services and the HTTP layer."""


class GatehouseError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotAuthenticatedError(GatehouseError):
    """A strict accessor was called without a session."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class UserAlreadyExistsError(GatehouseError):
    """The user store rejected an insert because the email is taken."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("User already exists")


class SignupRedirect(GatehouseError):
    """Raised after a successful signup when SIGNUP_SUCCESS_MODE is redirect."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Redirect to {location}")
