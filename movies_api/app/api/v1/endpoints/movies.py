"""
Movie endpoints for API v1.

These routes expose CRUD operations for movies plus lookups by title
and by country.  Handlers delegate to the ``MovieService`` attached to
the application at startup and translate its exceptions into HTTP
status codes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from movies_api.app.core.errors import MovieNotFoundError, PersistError
from movies_api.app.schemas.movie import MovieCreate, MovieRead, MovieUpdate
from movies_api.app.services.movie_service import MovieService

router = APIRouter()


def get_movie_service(request: Request) -> MovieService:
    """Return the service built by ``create_app`` for this application."""
    return request.app.state.movie_service


@router.get("", response_model=List[MovieRead])
async def list_movies(service: MovieService = Depends(get_movie_service)) -> List[MovieRead]:
    """Return every movie.  The list may be empty."""
    return await service.list_movies()


@router.get("/title/{title}", response_model=MovieRead)
async def get_movie_by_title(title: str, service: MovieService = Depends(get_movie_service)) -> MovieRead:
    """Retrieve the movie with exactly this title.

    Raises 404 if no movie has the title.  Several movies sharing it
    is reported as a server error by the application handler.
    """
    try:
        return await service.get_movie_by_title(title)
    except MovieNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("/country/{country}", response_model=List[MovieRead])
async def list_movies_by_country(
    country: str,
    service: MovieService = Depends(get_movie_service),
) -> List[MovieRead]:
    """Return the movies of a country, most recently created first."""
    return await service.list_movies_by_country(country)


@router.get("/{movie_id}", response_model=MovieRead)
async def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)) -> MovieRead:
    """Retrieve a single movie by its ID.  Raises 404 if it does not exist."""
    try:
        return await service.get_movie(movie_id)
    except MovieNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_movie(
    movie_in: MovieCreate,
    request: Request,
    service: MovieService = Depends(get_movie_service),
) -> Response:
    """Create a movie.

    Responds with an empty body and a ``Location`` header pointing at
    the new record, or 400 if the movie could not be stored.
    """
    try:
        movie = await service.create_movie(movie_in)
    except PersistError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    location = request.url_for("get_movie", movie_id=movie.id).path
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.put("/{movie_id}", response_model=MovieRead)
async def update_movie(
    movie_id: int,
    movie_in: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
) -> MovieRead:
    """Update the title of an existing movie.

    Only ``title`` is taken from the body.  Raises 404 if the movie
    does not exist and 400 if the new title is rejected by the store.
    """
    try:
        return await service.update_movie_title(movie_id, movie_in)
    except MovieNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except PersistError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)) -> None:
    """Delete a movie.  Raises 404 if it does not exist."""
    try:
        await service.delete_movie(movie_id)
    except MovieNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
