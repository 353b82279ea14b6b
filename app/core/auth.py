import logging
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from uuid import UUID

from app.core.security import verify_token
from app.db.base import get_db
from app.db.models.admin import Admin as AdminModel

logger = logging.getLogger(__name__)

# Only used to describe the scheme in the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)

class CurrentAdmin(BaseModel):
    id: UUID
    email: str
    role: str

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

async def get_current_admin(
    request: Request,
    db: AsyncSession = Depends(get_db),
    _token: str = Depends(oauth2_scheme),
) -> CurrentAdmin:
    """
    Validate the bearer token and return the admin it was issued to.
    """
    # Extract token from Authorization header
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.lower().startswith("bearer "):
        raise _unauthorized("No token provided")
    token = auth_header.split(" ", 1)[1].strip()

    try:
        payload = verify_token(token)
        admin_id = payload.get("sub")
        if admin_id is None:
            raise _unauthorized("Invalid token")
        admin_uuid = UUID(admin_id)
    except ExpiredSignatureError:
        raise _unauthorized("Token expired")
    except (JWTError, ValueError, UnicodeDecodeError) as e:
        logger.debug("Rejected bearer token: %s", e)
        raise _unauthorized("Invalid token")

    stmt = select(AdminModel).where(AdminModel.id == admin_uuid)
    result = await db.execute(stmt)
    admin = result.scalars().first()

    if admin is None or not admin.is_active:
        raise _unauthorized("Invalid token")

    return CurrentAdmin(id=admin.id, email=admin.email, role=admin.role)

async def require_super_admin(
    current_admin: CurrentAdmin = Depends(get_current_admin),
) -> CurrentAdmin:
    if current_admin.role != "super_admin":
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Super admin access required",
        )
    return current_admin
