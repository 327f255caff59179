from .movie import Movie

__all__ = ["Movie"]
