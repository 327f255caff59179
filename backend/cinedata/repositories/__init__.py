from .movie_repository import JsonMovieRepository

__all__ = [
    "JsonMovieRepository"
]
