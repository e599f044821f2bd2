"""
Pydantic schemas for the movie list API.
"""

from pydantic import BaseModel, ConfigDict


class MovieListItem(BaseModel):
    """A single entry on a user's movie list."""

    model_config = ConfigDict(from_attributes=True)

    movie_id: str
    movie_name: str


class MovieAdded(BaseModel):
    added: MovieListItem


class RemovedMovie(BaseModel):
    movie_id: str


class MovieRemoved(BaseModel):
    removed: RemovedMovie
