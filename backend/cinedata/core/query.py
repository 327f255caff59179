"""
Pure lookups over an ordered sequence of movie records.

Nothing here touches the filesystem; callers load the dataset first and
pass it in.
"""
import re
from typing import List, Optional, Sequence

from cinedata.core.exceptions import (
    InvalidArgumentException, OutOfRangeException,
    MovieNotFoundException, TitleNotFoundException
)
from cinedata.schemas.movie import Movie

_INTEGER_RE = re.compile(r"[+-]?\d+")

def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)

def parse_index(raw: Optional[str]) -> int:
    """Validate a position path parameter"""
    index = _parse_int(raw)
    if index is None:
        raise InvalidArgumentException()
    return index

def parse_movie_id(raw: Optional[str]) -> int:
    """Validate an identifier form field"""
    movie_id = _parse_int(raw)
    if movie_id is None:
        raise InvalidArgumentException("Invalid movie ID.")
    return movie_id

def movie_at(movies: Sequence[Movie], index: int) -> Movie:
    """Record at a zero-based position; negative positions never wrap"""
    if 0 <= index < len(movies):
        return movies[index]
    raise OutOfRangeException()

def find_by_id(movies: Sequence[Movie], movie_id: int) -> Movie:
    """First record with the given identifier"""
    for movie in movies:
        if movie.movie_id == movie_id:
            return movie
    raise MovieNotFoundException()

def search_by_title(movies: Sequence[Movie], query: str) -> List[Movie]:
    """Case-insensitive substring match on titles, in dataset order"""
    needle = query.lower()
    matches = [movie for movie in movies if needle in movie.title.lower()]
    if not matches:
        raise TitleNotFoundException()
    return matches

def list_all(movies: Sequence[Movie]) -> List[Movie]:
    return list(movies)
