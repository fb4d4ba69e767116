"""
Authentication service implementation.

Orchestrates signup and login over the user repository, the password
hasher and the token issuer.
"""

import logging

import pydantic

from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.interfaces import IUserRepository

from .exceptions import InvalidCredentialsError
from .interfaces import IAuthService
from .models import AuthResult, SignupRequest
from .passwords import PasswordHasher
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are stored as bcrypt hashes; successful signup and login
    both return a freshly signed bearer token.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    async def signup(self, name: str, email: str, password: str) -> AuthResult:
        """Validate, create the user, and sign them in."""
        try:
            request = SignupRequest(name=name, email=email, password=password)
        except pydantic.ValidationError as e:
            raise ValidationError.from_pydantic(e)

        if self._users.get_by_email(request.email) is not None:
            raise EmailAlreadyRegisteredError(request.email)

        # The unique index still guards against a concurrent signup
        user = self._users.create({
            "name": request.name,
            "email": request.email,
            "password_hash": self._hasher.hash(request.password),
        })
        logger.info("Registered user %s", user.id)

        return AuthResult(token=self._tokens.issue(user.id), user=user.to_public())

    async def login(self, email: str, password: str) -> AuthResult:
        """Verify credentials and issue a new token."""
        user = self._users.get_by_email(email) if email else None

        if user is None or not self._hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return AuthResult(token=self._tokens.issue(user.id), user=user.to_public())

    async def logout(self, user: AuthenticatedUser) -> None:
        logger.info("User %s logged out", user.id)
