"""
API dependencies for dependency injection
"""

from dataclasses import dataclass
from typing import Generator, Optional
from uuid import UUID

from fastapi import Header
from sqlalchemy.orm import Session

from domain.models import get_db_session
from app.exceptions import UnauthorizedError


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


@dataclass(frozen=True)
class AuthContext:
    """Identity of the acting user for one request (None when anonymous)."""

    user_id: Optional[UUID] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


def get_auth_context(
    x_user_id: Optional[str] = Header(
        default=None, description="Authenticated user id forwarded by the auth gateway"
    ),
) -> AuthContext:
    """
    Build the acting-user context from the auth gateway header.

    Session management belongs to the external auth provider; the gateway
    in front of this service forwards the resolved user id on every request.
    """
    if not x_user_id:
        return AuthContext()
    try:
        return AuthContext(user_id=UUID(x_user_id))
    except ValueError:
        raise UnauthorizedError("Invalid session", code="INVALID_SESSION")
