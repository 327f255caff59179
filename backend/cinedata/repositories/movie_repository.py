import json
import logging
from pathlib import Path
from typing import List, Union

import aiofiles
from pydantic import ValidationError

from cinedata.core.exceptions import DatasetReadError, DatasetParseError
from cinedata.core.interfaces import MovieRepositoryInterface
from cinedata.schemas.movie import Movie

logger = logging.getLogger(__name__)

class JsonMovieRepository(MovieRepositoryInterface):
    """Reads the movie dataset from a JSON array file on every call"""
    
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
    
    async def read_text(self) -> str:
        """Raw file contents"""
        try:
            async with aiofiles.open(self.path, mode="r", encoding="utf-8") as f:
                return await f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error loading JSON data from {self.path}: {str(e)}")
            raise DatasetReadError() from e
    
    async def load(self) -> List[Movie]:
        """Load and validate every movie record, in file order"""
        text = await self.read_text()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Malformed JSON in {self.path}: {str(e)}")
            raise DatasetParseError() from e
        
        if not isinstance(data, list):
            logger.error(f"Expected a JSON array in {self.path}, got {type(data).__name__}")
            raise DatasetParseError()
        
        try:
            movies = [Movie.model_validate(item) for item in data]
        except ValidationError as e:
            logger.error(f"Invalid movie record in {self.path}: {str(e)}")
            raise DatasetParseError() from e
        
        logger.info(f"Loaded {len(movies)} movies from {self.path}")
        return movies
