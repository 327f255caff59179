"""Test the HTML fragments."""

from cinedata.schemas.movie import Movie
from cinedata.services.presentation import render_movie_detail, render_movie_list


def test_detail_lists_fields_in_order(sample_movies):
    html = render_movie_detail(sample_movies[0])

    labels = [
        "Movie ID: 10", "Title: Alien", "Year: 1979", "Rated: R", "Released: 22 Jun 1979",
        "Runtime: 117 min", "Genre: Horror, Sci-Fi", "Director: Ridley Scott", "Writer:",
        "Actors:", "Plot:", "Language: English", "Country:", "Awards: Won 1 Oscar",
        "IMDB Rating: 8.5", "IMDB Votes: 946,035",
    ]
    positions = [html.index(label) for label in labels]

    assert html.startswith("<h2>Movie Information:</h2>")
    assert positions == sorted(positions)
    assert html.count("<p>") == 16


def test_detail_escapes_values():
    movie = Movie.model_validate({"Movie_ID": 1, "Title": "<script>x</script>"})

    html = render_movie_detail(movie)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_list_has_one_entry_per_movie(sample_movies):
    html = render_movie_list(sample_movies[:2])

    assert html.startswith("<h2>Movies:</h2><ul>")
    assert html.endswith("</ul>")
    assert html.count("<li>") == 2
    assert html.index("Movie ID: 10") < html.index("Movie ID: 20")
    assert "Director: James Cameron" in html
