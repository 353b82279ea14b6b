import logging
from typing import Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from app.db.models.admin import Admin as AdminModel
from app.core.security import verify_password, hash_password, create_access_token

logger = logging.getLogger(__name__)

def normalize_email(email: str) -> str:
    return email.strip().lower()

async def get_admin_by_email(email: str, db: AsyncSession) -> Optional[AdminModel]:
    stmt = select(AdminModel).where(AdminModel.email == normalize_email(email))
    result = await db.execute(stmt)
    return result.scalars().first()

async def get_admin_by_id(admin_id: UUID, db: AsyncSession) -> Optional[AdminModel]:
    stmt = select(AdminModel).where(AdminModel.id == admin_id)
    result = await db.execute(stmt)
    return result.scalars().first()

async def authenticate_admin(email: str, password: str, db: AsyncSession) -> AdminModel:
    """
    Authenticate an admin by verifying email and password.
    Raises 401 for unknown email or wrong password and 403 for a deactivated account.
    """
    admin = await get_admin_by_email(email, db)

    if not admin or not verify_password(password, admin.hashed_password):
        logger.info("Failed login attempt for %s", normalize_email(email))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not admin.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is deactivated"
        )

    return admin

async def create_admin(email: str, password: str, name: str, db: AsyncSession, role: str = "admin") -> AdminModel:
    """
    Create a new admin with the given credentials.
    Returns the created admin.
    """
    # Check if admin already exists
    existing_admin = await get_admin_by_email(email, db)
    if existing_admin:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Admin already exists with this email"
        )

    admin = AdminModel(
        email=normalize_email(email),
        hashed_password=hash_password(password),
        name=name.strip(),
        role=role,
        is_active=True,
    )

    db.add(admin)
    await db.commit()
    await db.refresh(admin)

    logger.info("Registered %s %s", admin.role, admin.email)
    return admin

def create_admin_token(admin: AdminModel) -> str:
    """
    Create an access token for the given admin.
    """
    return create_access_token(
        data={"sub": str(admin.id), "email": admin.email, "role": admin.role}
    )
