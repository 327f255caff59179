"""Pytest configuration and fixtures."""

import json

import pytest
from fastapi.testclient import TestClient

from cinedata.core.config import Settings
from cinedata.main import create_app
from cinedata.schemas.movie import Movie


SAMPLE_MOVIES = [
    {
        "Movie_ID": 10,
        "Title": "Alien",
        "Year": "1979",
        "Rated": "R",
        "Released": "22 Jun 1979",
        "Runtime": "117 min",
        "Genre": "Horror, Sci-Fi",
        "Director": "Ridley Scott",
        "Writer": "Dan O'Bannon, Ronald Shusett",
        "Actors": "Sigourney Weaver, Tom Skerritt, John Hurt",
        "Plot": "The crew of a commercial spacecraft encounters a deadly lifeform.",
        "Language": "English",
        "Country": "United Kingdom, United States",
        "Awards": "Won 1 Oscar",
        "Metascore": 89,
        "imdbRating": 8.5,
        "imdbVotes": "946,035",
    },
    {
        "Movie_ID": 20,
        "Title": "Aliens",
        "Year": "1986",
        "Genre": "Action, Adventure, Sci-Fi",
        "Director": "James Cameron",
        "Metascore": "",
        "imdbRating": 8.4,
        "imdbVotes": "754,512",
    },
    {
        "Movie_ID": 30,
        "Title": "Heat",
        "Year": 1995,
        "Genre": "Action, Crime, Drama",
        "Director": "Michael Mann",
        "Metascore": "76",
        "imdbRating": "N/A",
        "imdbVotes": "700,000",
    },
    {
        "Movie_ID": 40,
        "Title": "ALIEN: Resurrection",
        "Year": "1997",
        "Genre": "Action, Horror, Sci-Fi",
        "Director": "Jean-Pierre Jeunet",
        "Metascore": 63,
        "imdbRating": 6.2,
        "imdbVotes": "268,000",
    },
    {
        "Movie_ID": 50,
        "Title": "Solaris",
        "Year": "1972",
        "Genre": "Drama, Mystery, Sci-Fi",
        "Director": "Andrei Tarkovsky",
        "Metascore": "N/A",
        "imdbRating": 8.0,
        "imdbVotes": "99,000",
    },
]


@pytest.fixture
def sample_movies():
    """Parsed sample dataset."""
    return [Movie.model_validate(item) for item in SAMPLE_MOVIES]


@pytest.fixture
def dataset_file(tmp_path):
    """Write the sample dataset to a temporary JSON file."""
    path = tmp_path / "movies.json"
    path.write_text(json.dumps(SAMPLE_MOVIES), encoding="utf-8")
    return path


@pytest.fixture
def settings(dataset_file, tmp_path):
    """Settings pointing at the temporary dataset."""
    return Settings(DATASET_PATH=dataset_file, PUBLIC_DIR=tmp_path / "public", APP_TITLE="Test Movies")


@pytest.fixture
def client(settings):
    """Test client for an app built from the test settings."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
