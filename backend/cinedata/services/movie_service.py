import logging
from typing import List, Optional

from cinedata.core import query
from cinedata.core.exceptions import InvalidArgumentException
from cinedata.core.interfaces import MovieRepositoryInterface
from cinedata.schemas.movie import Movie

logger = logging.getLogger(__name__)

class MovieService:
    """Service for movie lookups over the dataset"""
    
    def __init__(self, repository: MovieRepositoryInterface):
        self.repository = repository
    
    async def load_movies(self) -> List[Movie]:
        """Load the dataset and log its parsed content"""
        movies = await self.repository.load()
        for movie in movies:
            logger.debug(movie.model_dump(by_alias=True))
        return movies
    
    async def list_movies(self) -> List[Movie]:
        """Get all movies in dataset order"""
        movies = await self.repository.load()
        return query.list_all(movies)
    
    async def get_movie_by_index(self, index: int) -> Movie:
        """Get the movie at a zero-based position"""
        movies = await self.repository.load()
        return query.movie_at(movies, index)
    
    async def get_movie_by_id(self, raw_movie_id: Optional[str]) -> Movie:
        """Get the first movie with the given ID"""
        movie_id = query.parse_movie_id(raw_movie_id)
        movies = await self.repository.load()
        return query.find_by_id(movies, movie_id)
    
    async def search_movies_by_title(self, title: Optional[str]) -> List[Movie]:
        """Search movies by title substring"""
        if title is None:
            raise InvalidArgumentException("Missing movie title.")
        movies = await self.repository.load()
        matches = query.search_by_title(movies, title)
        logger.info(f"Title search '{title}' matched {len(matches)} movies")
        return matches
