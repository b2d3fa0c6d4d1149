"""FastAPI dependencies shared by endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import Header, status

from gujlearn.core.errors import raise_app_error

OWNER_HEADER = "X-User-Id"


def get_current_user_id(
    x_user_id: Annotated[str | None, Header(alias=OWNER_HEADER)] = None,
) -> UUID:
    """
    Resolve the acting user's id.

    Authentication happens upstream; the gateway forwards the verified user id
    in the X-User-Id header.
    """
    if not x_user_id:
        raise_app_error(
            status.HTTP_401_UNAUTHORIZED,
            "UNAUTHORIZED",
            f"{OWNER_HEADER} header missing",
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise_app_error(
            status.HTTP_401_UNAUTHORIZED,
            "UNAUTHORIZED",
            f"{OWNER_HEADER} header is not a valid UUID",
        )
