"""Movie routes. Every route requires a bearer token."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth import get_current_user_id
from crud import MovieRepository
from database import get_db
from errors import NotFoundError, ValidationError
from pagination import get_page
from payloads import body_of, request_body
from schemas import (
    ErrorResponse,
    Location,
    Message,
    MovieBody,
    MovieCreated,
    MovieDetail,
    MovieList,
    MovieOut,
)
from validators import Mode, validate_movie

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
    dependencies=[Depends(get_current_user_id)],
    responses={401: {"model": ErrorResponse, "description": "You must log in"}},
)

INVALID = {400: {"model": ErrorResponse, "description": "Invalid data"}}

movie_body = body_of(MovieBody)


@router.get("/", response_model=MovieList, include_in_schema=False)
@router.get(
    "",
    response_model=MovieList,
    responses={400: {"model": ErrorResponse}},
    summary="List movies",
)
async def list_movies(
    page: int = Depends(get_page), db: AsyncSession = Depends(get_db)
) -> dict:
    """Paginated movie listing, at most 10 per page."""
    movies = await MovieRepository(db).find_all(page)
    return {"movies": [MovieOut.model_validate(m) for m in movies]}


@router.get(
    "/{movie_id:int}",
    response_model=MovieDetail,
    responses={404: {"model": ErrorResponse}},
    summary="Get a movie",
)
async def get_movie(movie_id: int, db: AsyncSession = Depends(get_db)) -> dict:
    movie = await MovieRepository(db).find_by_id(movie_id)
    if movie is None:
        raise NotFoundError("Movie not found")
    return {"movie": MovieOut.model_validate(movie)}


@router.post(
    "/", status_code=201, response_model=MovieCreated, include_in_schema=False
)
@router.post(
    "",
    status_code=201,
    response_model=MovieCreated,
    responses=INVALID,
    summary="Create a movie",
    openapi_extra=request_body(MovieBody),
)
async def create_movie(
    body: MovieBody = Depends(movie_body), db: AsyncSession = Depends(get_db)
) -> dict:
    """Create a movie; title, genres and year are all required."""
    data = validate_movie(Mode.CREATE, body.model_dump(exclude_unset=True))
    if data is None:
        raise ValidationError("Invalid data")

    movie_id = await MovieRepository(db).insert(data)
    logger.info("Created movie %s", movie_id)
    return {"message": "Movie created", "movieId": movie_id}


@router.put(
    "/{movie_id:int}",
    response_model=Location,
    responses=INVALID,
    summary="Update a movie",
    openapi_extra=request_body(MovieBody),
)
async def update_movie(
    movie_id: int,
    body: MovieBody = Depends(movie_body),
    db: AsyncSession = Depends(get_db),
) -> dict:
    data = validate_movie(Mode.UPDATE, body.model_dump(exclude_unset=True))
    if data is None:
        raise ValidationError("Invalid data")

    await MovieRepository(db).update(movie_id, data)
    return {"message": "Movie updated", "location": f"/movies/{movie_id}"}


@router.delete(
    "/{movie_id:int}",
    response_model=Message,
    summary="Delete a movie",
)
async def delete_movie(movie_id: int, db: AsyncSession = Depends(get_db)) -> dict:
    await MovieRepository(db).delete(movie_id)
    logger.info("Deleted movie %s", movie_id)
    return {"message": "Movie deleted"}
