"""Request authentication helpers."""

from uuid import UUID

from fastapi import HTTPException, status

from brew.domain.service import JWTService


def _is_uuid(value: str) -> bool:
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the authenticated user ID from the ``auth_token`` cookie.

    Raises:
        HTTPException: 401 if the token is missing, invalid, or does not
            carry a UUID user ID
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id or not _is_uuid(user_id):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "not_authenticated", "message": "Authentication required"},
        )
    return user_id
