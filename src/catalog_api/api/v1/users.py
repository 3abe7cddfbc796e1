"""
User routes: registration, login, refresh-token rotation and logout, plus the
protected user listing.

The refresh token travels in an http-only cookie (settings.REFRESH_COOKIE_NAME)
set on login / refresh and cleared on logout.
"""

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.config.settings import get_settings
from catalog_api.core.dependencies import verify_token
from catalog_api.database.session import get_async_session
from catalog_api.schemas.service_response import ServiceResponse
from catalog_api.schemas.user import UserLogin, UserRegister
from catalog_api.services.auth_service import AuthService
from catalog_api.services.user_service import UserService
from .crud import list_query

router = APIRouter()


def _set_refresh_cookie(response: JSONResponse, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.REFRESH_COOKIE_NAME,
        value=token,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 3600,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="strict",
        path="/",
    )


def _token_response(result: ServiceResponse) -> JSONResponse:
    """Envelope response that also (re)sets the refresh cookie on success."""
    response = result.to_response()
    if result.success:
        _set_refresh_cookie(response, result.response_object.refresh_token)
    return response


@router.get("", response_model=None, dependencies=[Depends(verify_token)], summary="List users")
async def find_all(
    params: dict = Depends(list_query),
    db: AsyncSession = Depends(get_async_session),
) -> JSONResponse:
    response = await UserService(db).find_all(**params)
    return response.to_response()


@router.get("/{id}", response_model=None, dependencies=[Depends(verify_token)], summary="Get a user by id")
async def find_by_id(
    id: int = Path(..., gt=0),
    db: AsyncSession = Depends(get_async_session),
) -> JSONResponse:
    response = await UserService(db).find_by_id(id)
    return response.to_response()


@router.post("/register", response_model=None, summary="Register a user")
async def register(payload: UserRegister, db: AsyncSession = Depends(get_async_session)) -> JSONResponse:
    response = await UserService(db).create(payload)
    return response.to_response()


@router.post("/login", response_model=None, summary="Log in and receive an access / refresh token pair")
async def login(payload: UserLogin, db: AsyncSession = Depends(get_async_session)) -> JSONResponse:
    return _token_response(await AuthService(db).login(payload))


@router.post("/refresh", response_model=None, summary="Rotate the refresh token from the cookie")
async def refresh(request: Request, db: AsyncSession = Depends(get_async_session)) -> JSONResponse:
    token = request.cookies.get(get_settings().REFRESH_COOKIE_NAME)
    return _token_response(await AuthService(db).refresh(token))


@router.post("/logout", response_model=None, summary="Revoke the refresh token from the cookie")
async def logout(request: Request, db: AsyncSession = Depends(get_async_session)) -> JSONResponse:
    settings = get_settings()
    result = await AuthService(db).logout(request.cookies.get(settings.REFRESH_COOKIE_NAME))
    response = result.to_response()
    if result.success:
        response.delete_cookie(settings.REFRESH_COOKIE_NAME, path="/")
    return response
