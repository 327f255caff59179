"""
HTML fragments returned directly by the search routes.

Full pages go through the Jinja2 templates instead.
"""
from html import escape
from typing import Any, List, Sequence, Tuple

from cinedata.schemas.movie import Movie

ID_SEARCH_FORM = """
<form method="POST" action="/data/search/id/">
    <input type="text" name="movie_id" placeholder="Enter Movie ID" required>
    <input type="submit" value="Search">
</form>
"""

TITLE_SEARCH_FORM = """
<form method="POST" action="/data/search/title/result">
    <input type="text" name="movie_title" placeholder="Enter Movie Title" required>
    <input type="submit" value="Search">
</form>
"""

DETAIL_FIELDS: List[Tuple[str, str]] = [
    ("Movie ID", "movie_id"),
    ("Title", "title"),
    ("Year", "year"),
    ("Rated", "rated"),
    ("Released", "released"),
    ("Runtime", "runtime"),
    ("Genre", "genre"),
    ("Director", "director"),
    ("Writer", "writer"),
    ("Actors", "actors"),
    ("Plot", "plot"),
    ("Language", "language"),
    ("Country", "country"),
    ("Awards", "awards"),
    ("IMDB Rating", "imdb_rating"),
    ("IMDB Votes", "imdb_votes"),
]

SUMMARY_FIELDS: List[Tuple[str, str]] = [
    ("Movie ID", "movie_id"),
    ("Title", "title"),
    ("Genre", "genre"),
    ("Director", "director"),
    ("Year", "year"),
]

def _text(value: Any) -> str:
    return escape(str(value))

def render_movie_detail(movie: Movie) -> str:
    """Every detail field of one movie, one paragraph each"""
    lines = ["<h2>Movie Information:</h2>"]
    for label, attr in DETAIL_FIELDS:
        lines.append(f"<p>{label}: {_text(getattr(movie, attr))}</p>")
    return "\n".join(lines)

def render_movie_list(movies: Sequence[Movie]) -> str:
    """Summary list of several movies"""
    items = []
    for movie in movies:
        fields = "<br>\n".join(
            f"{label}: {_text(getattr(movie, attr))}" for label, attr in SUMMARY_FIELDS
        )
        items.append(f"<li>\n{fields}\n</li>")
    return "<h2>Movies:</h2><ul>" + "\n".join(items) + "</ul>"
