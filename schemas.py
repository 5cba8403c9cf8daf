"""Pydantic schemas for request and response bodies.

Request bodies only describe the allowed fields and their JSON types; which
fields are required is decided by :mod:`validators`, so every request field
is optional here. Response models never expose a password.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class UserBody(BaseModel):
    """User fields accepted on register and update."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "email": "joe@example.com",
                    "password": "secret",
                    "gender": "male",
                    "role": "user",
                }
            ]
        },
    )

    email: Optional[str] = None
    password: Optional[str] = None
    gender: Optional[str] = None
    role: Optional[str] = None


class LoginBody(BaseModel):
    """Credentials for ``POST /users/login``.

    Other profile fields sent along with the credentials are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    password: Optional[str] = None


class MovieBody(BaseModel):
    """Movie fields accepted on create and update."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {"title": "Heat", "genres": "Crime|Thriller", "year": "1995"}
            ]
        },
    )

    title: Optional[str] = None
    genres: Optional[str] = None
    year: Optional[str] = None


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    gender: str
    role: str


class MovieOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    genres: str
    year: str


class UserList(BaseModel):
    users: List[UserOut]


class UserDetail(BaseModel):
    user: UserOut


class MovieList(BaseModel):
    movies: List[MovieOut]


class MovieDetail(BaseModel):
    movie: MovieOut


class RegisterResponse(BaseModel):
    message: str
    userId: int


class LoginResponse(BaseModel):
    token: str
    user: UserOut
    message: str


class MovieCreated(BaseModel):
    message: str
    movieId: int


class Message(BaseModel):
    message: str


class Location(BaseModel):
    message: str
    location: str


class ErrorResponse(BaseModel):
    error: str
