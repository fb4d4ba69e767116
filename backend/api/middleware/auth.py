"""
Bearer token authentication middleware.

Protected routes depend on get_current_user. The resolved identity is
handed to the route as an AuthenticatedUser argument; failures raise
UnauthorizedError subclasses that the error handlers turn into 401s.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.models import TokenClaims
from modules.auth.tokens import TokenIssuer
from shared.models import AuthenticatedUser

from ..dependencies import get_token_issuer

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_user_from_claims(claims: TokenClaims) -> AuthenticatedUser:
    """
    Convert verified token claims to AuthenticatedUser.

    Args:
        claims: Decoded token claims

    Returns:
        AuthenticatedUser instance
    """
    return AuthenticatedUser(
        id=claims.sub,
        issued_at=claims.issued_at,
        expires_at=claims.expires_at,
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    claims = tokens.verify(credentials.credentials)
    return get_user_from_claims(claims)

