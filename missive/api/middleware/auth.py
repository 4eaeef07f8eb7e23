"""JWT caller resolution for API requests.

The caller identity is taken from a bearer token claim. The engine never
authenticates callers itself; whatever identity this dependency yields is
trusted.
"""

import os
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from structlog.contextvars import bind_contextvars

from missive.api.dependencies import SettingsDep
from missive.api.exceptions import AuthNotConfiguredError
from missive.config.settings import Settings
from missive.observability.logging import get_logger
from missive.records import IdentityKey

logger = get_logger(__name__)

# Security scheme for OpenAPI docs
security_scheme = HTTPBearer(auto_error=False)


def get_jwt_secret(settings: Settings) -> str:
    """Get the JWT secret from the configured environment variable.

    Raises:
        AuthNotConfiguredError: If the variable is unset or empty
    """
    secret = os.environ.get(settings.auth.jwt_secret_env)
    if not secret:
        logger.error("auth_secret_missing", env_var=settings.auth.jwt_secret_env)
        raise AuthNotConfiguredError(
            f"{settings.auth.jwt_secret_env} environment variable not set"
        )
    return secret


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_caller(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security_scheme)],
    settings: SettingsDep,
) -> IdentityKey:
    """Resolve the caller identity from the JWT bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired, or
            lacks the identity claim
        AuthNotConfiguredError: If no JWT secret is configured
    """
    if credentials is None:
        logger.warning("auth_missing_token", path=request.url.path)
        raise _unauthorized("Missing authentication token")

    claim = settings.auth.identity_claim

    try:
        payload = jwt.decode(
            credentials.credentials,
            get_jwt_secret(settings),
            algorithms=[settings.auth.jwt_algorithm],
        )
    except JWTError as e:
        logger.warning("auth_jwt_error", error=str(e), path=request.url.path)
        raise _unauthorized("Invalid or expired token") from None

    identity = payload.get(claim)
    if not isinstance(identity, str) or not identity:
        logger.warning("auth_missing_identity", claim=claim, path=request.url.path)
        raise _unauthorized(f"Token missing {claim} claim")

    bind_contextvars(caller=identity)
    logger.debug("auth_success", caller=identity)

    return IdentityKey(identity)


# Type alias for dependency injection
CallerDep = Annotated[IdentityKey, Depends(get_caller)]
