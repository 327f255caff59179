from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from cinedata.core.query import parse_index
from cinedata.dependencies import get_movie_service
from cinedata.services.movie_service import MovieService
from cinedata.services.presentation import (
    ID_SEARCH_FORM, TITLE_SEARCH_FORM, render_movie_detail, render_movie_list
)

router = APIRouter(tags=["data"])

@router.get("/data", response_class=PlainTextResponse)
async def load_data(movie_service: MovieService = Depends(get_movie_service)):
    await movie_service.load_movies()
    return "JSON data is loaded and ready!"

@router.get("/data/movie/{index}", response_class=PlainTextResponse)
async def get_movie_id_at_index(
    index: str,
    movie_service: MovieService = Depends(get_movie_service)
):
    position = parse_index(index)
    movie = await movie_service.get_movie_by_index(position)
    return f"Movie ID at index {position}: {movie.movie_id}"

# Search by ID
@router.get("/data/search/id/", response_class=HTMLResponse)
async def id_search_form():
    return ID_SEARCH_FORM

@router.post("/data/search/id/", response_class=HTMLResponse)
async def search_by_id(
    movie_id: Optional[str] = Form(None),
    movie_service: MovieService = Depends(get_movie_service)
):
    movie = await movie_service.get_movie_by_id(movie_id)
    return render_movie_detail(movie)

# Search by title
@router.get("/data/search/title/", response_class=HTMLResponse)
async def title_search_form():
    return TITLE_SEARCH_FORM

@router.post("/data/search/title/result", response_class=HTMLResponse)
async def search_by_title(
    movie_title: Optional[str] = Form(None),
    movie_service: MovieService = Depends(get_movie_service)
):
    movies = await movie_service.search_movies_by_title(movie_title)
    return render_movie_list(movies)

@router.get("/allData", response_class=HTMLResponse)
async def all_data(
    request: Request,
    movie_service: MovieService = Depends(get_movie_service)
):
    movies = await movie_service.list_movies()
    return request.app.state.templates.TemplateResponse(
        request, "all_data.html", {"title": "All Movie Data", "movies": movies}
    )
