"""
Bearer token issuing and verification.

Tokens are self-contained HS256 JWTs whose only identity claim is the
user ID in `sub`. Verification is a pure function of the token and the
secret, so nothing is shared between requests.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import TokenClaims

DEFAULT_ALGORITHM = "HS256"
DEFAULT_EXPIRE_MINUTES = 60 * 24 * 7


def verify_token(
    token: Optional[str],
    secret: str,
    algorithm: str = DEFAULT_ALGORITHM,
) -> TokenClaims:
    """
    Decode and validate a bearer token.

    Args:
        token: The JWT string
        secret: Shared signing secret
        algorithm: Signing algorithm the token must use

    Returns:
        TokenClaims with the decoded subject and timestamps

    Raises:
        MissingTokenError: If the token is empty
        ExpiredTokenError: If the token is past its expiry
        InvalidTokenError: If the signature, format or claims are invalid
    """
    if not token:
        raise MissingTokenError()

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise ExpiredTokenError()
    except jwt.InvalidTokenError:
        raise InvalidTokenError()

    if not isinstance(payload["sub"], str) or not payload["sub"]:
        raise InvalidTokenError()

    return TokenClaims(sub=payload["sub"], exp=payload["exp"], iat=payload["iat"])


class TokenIssuer:
    """Creates and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = timedelta(minutes=expire_minutes)

    def issue(self, user_id: str) -> str:
        """Sign a token asserting `user_id` as the subject."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        return verify_token(token, self._secret, self._algorithm)
