"""
API dependencies for dependency injection.
"""
from typing import Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobportal.core.security import ACCESS_TOKEN_TYPE, decode_token, verify_token_type
from jobportal.core.exceptions import UnauthorizedException, InvalidTokenException


# Security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> UUID:
    """
    Resolve the authenticated user's id from the bearer token.

    The id is the ownership key routes pass on to services. No database
    lookup happens here; services report a vanished user themselves.

    Raises:
        UnauthorizedException: If no bearer token provided
        InvalidTokenException: If token is invalid
        TokenExpiredException: If token has expired
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    payload = decode_token(credentials.credentials)

    if not verify_token_type(payload, ACCESS_TOKEN_TYPE):
        raise InvalidTokenException()

    subject = payload.get("sub")
    if not subject:
        raise InvalidTokenException()

    try:
        return UUID(subject)
    except (TypeError, ValueError):
        raise InvalidTokenException()
