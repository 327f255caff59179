from pydantic import BaseModel, Field
from typing import Union

class Movie(BaseModel):
    """One record of the movie dataset"""
    movie_id: int = Field(..., alias="Movie_ID")
    title: str = Field(..., alias="Title")
    year: Union[int, str] = Field("", alias="Year")
    rated: str = Field("", alias="Rated")
    released: str = Field("", alias="Released")
    runtime: str = Field("", alias="Runtime")
    genre: str = Field("", alias="Genre")
    director: str = Field("", alias="Director")
    writer: str = Field("", alias="Writer")
    actors: str = Field("", alias="Actors")
    plot: str = Field("", alias="Plot")
    language: str = Field("", alias="Language")
    country: str = Field("", alias="Country")
    awards: str = Field("", alias="Awards")
    imdb_rating: Union[int, float, str] = Field("", alias="imdbRating", description="Score or 'N/A'")
    imdb_votes: Union[int, str] = Field("", alias="imdbVotes")
    metascore: Union[int, float, str] = Field("", alias="Metascore", description="Score, '' or 'N/A'")
    
    class Config:
        frozen = True
        populate_by_name = True
        extra = "allow"
        coerce_numbers_to_str = True
