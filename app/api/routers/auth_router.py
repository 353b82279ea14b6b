from fastapi import APIRouter, Depends, HTTPException, status, Form
from pydantic import EmailStr
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import CurrentAdmin, get_current_admin
from app.db.base import get_db
from app.schemas.admin import AdminRole, AuthResponse, LoginResponse, ProfileResponse
from app.services.auth_service import (
    authenticate_admin,
    create_admin,
    create_admin_token,
    get_admin_by_id,
)

router = APIRouter()

@router.post("/auth/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_admin(
    email: EmailStr = Form(...),
    password: str = Form(..., min_length=6),
    name: str = Form(..., min_length=1),
    role: AdminRole = Form("admin"),
    db: AsyncSession = Depends(get_db)
):
    """
    Register a new admin.
    """
    admin = await create_admin(email, password, name, db, role=role)
    return {
        "message": "Admin registered successfully",
        "token": create_admin_token(admin),
        "admin": admin,
    }

@router.post("/auth/token", response_model=LoginResponse)
async def login_for_access_token(
    email: str = Form(...),
    password: str = Form(...),
    db: AsyncSession = Depends(get_db)
):
    """
    Get an access token for future authenticated requests.
    """
    admin = await authenticate_admin(email, password, db)
    token = create_admin_token(admin)
    return {
        "message": "Login successful",
        "token": token,
        "access_token": token,
        "token_type": "bearer",
        "admin": admin,
    }

@router.get("/auth/profile", response_model=ProfileResponse)
async def get_profile(
    current_admin: CurrentAdmin = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db)
):
    """
    Return the profile of the authenticated admin.
    """
    admin = await get_admin_by_id(current_admin.id, db)
    if admin is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Admin not found")
    return {"admin": admin}
