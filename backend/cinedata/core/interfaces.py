from abc import ABC, abstractmethod
from typing import List

from cinedata.schemas.movie import Movie

class MovieRepositoryInterface(ABC):
    """Abstract interface for movie dataset access"""
    
    @abstractmethod
    async def load(self) -> List[Movie]:
        pass
