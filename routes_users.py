"""User routes: registration, login and authenticated CRUD.

``/users/register`` and ``/users/login`` are public; every other route
requires a bearer token.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth import get_current_user_id
from crud import UserRepository
from database import get_db
from errors import AuthError, NotFoundError, ValidationError
from pagination import get_page
from payloads import body_of, request_body
from schemas import (
    ErrorResponse,
    Location,
    LoginBody,
    LoginResponse,
    Message,
    RegisterResponse,
    UserBody,
    UserDetail,
    UserList,
    UserOut,
)
from security import TokenService, get_token_service, verify_password
from validators import Mode, validate_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])

PROTECTED = [Depends(get_current_user_id)]
UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "You must log in"}}
INVALID = {400: {"model": ErrorResponse, "description": "Invalid data"}}

user_body = body_of(UserBody)
login_body = body_of(LoginBody)


@router.post(
    "/register",
    status_code=201,
    response_model=RegisterResponse,
    responses=INVALID,
    summary="Register a user",
    openapi_extra=request_body(UserBody),
)
async def register(
    body: UserBody = Depends(user_body), db: AsyncSession = Depends(get_db)
) -> dict:
    """Create a user; all of email, password, gender and role are required."""
    data = validate_user(Mode.CREATE, body.model_dump(exclude_unset=True))
    if data is None:
        raise ValidationError("Invalid data")

    user_id = await UserRepository(db).insert(data)
    logger.info("Registered user %s", user_id)
    return {"message": "User created", "userId": user_id}


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Email and password are required"},
        401: {"model": ErrorResponse, "description": "Wrong email or password"},
    },
    summary="Log in",
    openapi_extra=request_body(LoginBody),
)
async def login(
    body: LoginBody = Depends(login_body),
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> dict:
    """Check credentials and return a bearer token with the user profile."""
    data = validate_user(Mode.LOGIN, body.model_dump(exclude_unset=True))
    if data is None:
        raise ValidationError("Email and password are required")

    user = await UserRepository(db).find_by_email(data["email"])
    if user is None or not verify_password(data["password"], user.password):
        raise AuthError("Wrong email or password")

    token = tokens.issue_for_user(user.id)
    logger.info("User %s logged in", user.id)
    return {
        "token": token,
        "user": UserOut.model_validate(user),
        "message": "Logged in",
    }


@router.get(
    "/",
    response_model=UserList,
    dependencies=PROTECTED,
    include_in_schema=False,
)
@router.get(
    "",
    response_model=UserList,
    dependencies=PROTECTED,
    responses={**UNAUTHORIZED, 400: {"model": ErrorResponse}},
    summary="List users",
)
async def list_users(
    page: int = Depends(get_page), db: AsyncSession = Depends(get_db)
) -> dict:
    """Paginated user listing, at most 10 per page."""
    users = await UserRepository(db).find_all(page)
    return {"users": [UserOut.model_validate(u) for u in users]}


@router.get(
    "/{user_id:int}",
    response_model=UserDetail,
    dependencies=PROTECTED,
    responses={**UNAUTHORIZED, 404: {"model": ErrorResponse}},
    summary="Get a user",
)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)) -> dict:
    user = await UserRepository(db).find_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return {"user": UserOut.model_validate(user)}


@router.put(
    "/{user_id:int}",
    response_model=Location,
    dependencies=PROTECTED,
    responses={**UNAUTHORIZED, **INVALID},
    summary="Update a user",
    openapi_extra=request_body(UserBody),
)
async def update_user(
    user_id: int,
    body: UserBody = Depends(user_body),
    db: AsyncSession = Depends(get_db),
) -> dict:
    """Update only the supplied fields; at least one is required."""
    data = validate_user(Mode.UPDATE, body.model_dump(exclude_unset=True))
    if data is None:
        raise ValidationError("Invalid data")

    await UserRepository(db).update(user_id, data)
    return {"message": "User updated", "location": f"/users/{user_id}"}


@router.delete(
    "/{user_id:int}",
    response_model=Message,
    dependencies=PROTECTED,
    responses=UNAUTHORIZED,
    summary="Delete a user",
)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)) -> dict:
    await UserRepository(db).delete(user_id)
    logger.info("Deleted user %s", user_id)
    return {"message": "User deleted"}
