"""
Users module exceptions.
"""

from shared.exceptions import ConflictError


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an email is already used by another account."""

    def __init__(self, email: str):
        super().__init__(
            "Email is already registered",
            code="EMAIL_TAKEN",
            details={"email": email},
        )
