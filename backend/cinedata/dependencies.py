from fastapi import Depends, Request

from cinedata.core.interfaces import MovieRepositoryInterface
from cinedata.repositories.movie_repository import JsonMovieRepository
from cinedata.services.movie_service import MovieService

def get_movie_repository(request: Request) -> MovieRepositoryInterface:
    """Dependency to get the dataset repository for this request"""
    return JsonMovieRepository(request.app.state.settings.DATASET_PATH)

def get_movie_service(
    repository: MovieRepositoryInterface = Depends(get_movie_repository)
) -> MovieService:
    return MovieService(repository)
