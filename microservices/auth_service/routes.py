"""
Customer Auth API Routes
"""

from fastapi import APIRouter, Depends, status
from typing import Optional

from core.auth_dependencies import get_authorization
from microservices.bff_service.dependencies import get_auth_service

from .auth_service import AuthService
from .models import RegisterCustomerRequest, LoginCustomerRequest

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterCustomerRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Register a new customer"""
    return await service.register(request)


@router.post("/login")
async def login(
    request: LoginCustomerRequest,
    service: AuthService = Depends(get_auth_service),
):
    return await service.login(request)


@router.get("/me")
async def get_profile(
    authorization: Optional[str] = Depends(get_authorization),
    service: AuthService = Depends(get_auth_service),
):
    """Profile of the authenticated customer"""
    return await service.get_profile(authorization)


@router.post("/logout")
async def logout(
    authorization: Optional[str] = Depends(get_authorization),
    service: AuthService = Depends(get_auth_service),
):
    return await service.logout(authorization)
