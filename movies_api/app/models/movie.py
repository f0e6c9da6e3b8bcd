"""
The movie entity.

``Movie`` is a plain record with no persistence behaviour attached;
stores create, read and return instances of it.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Movie:
    """A single movie record.

    Attributes:
        id: Assigned by the store on creation, ``None`` before that.
        title: Up to 100 characters.
        description: Up to 200 characters.
        director: Free text.
        country: Free text, used as a filter key.
    """

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    director: Optional[str] = None
    country: Optional[str] = None
