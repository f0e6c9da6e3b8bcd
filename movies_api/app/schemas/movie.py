"""
Pydantic models for movie data.

``MovieBase`` holds the shared fields; ``MovieCreate`` and
``MovieUpdate`` are request bodies and ``MovieRead`` adds the ``id``
for responses.  Length limits are not checked here: the database
enforces them and a violation surfaces as a failed write.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MovieBase(BaseModel):
    title: Optional[str] = Field(None, examples=["Inception"])
    description: Optional[str] = Field(None, examples=["A thief who steals corporate secrets through dreams"])
    director: Optional[str] = Field(None, examples=["Christopher Nolan"])
    country: Optional[str] = Field(None, examples=["USA"])


class MovieCreate(MovieBase):
    """Schema for creating a movie.

    The id is assigned by the store; an ``id`` sent by the client is
    ignored.
    """
    pass


class MovieUpdate(MovieBase):
    """Schema for updating a movie.

    Only ``title`` is applied.  The other fields are accepted so
    clients can send back a full movie object, but they are ignored.
    """
    pass


class MovieRead(MovieBase):
    """Schema for reading a movie from the API."""

    id: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
