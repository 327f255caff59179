"""Test the template helper functions."""

import pytest

from cinedata.core.helpers import HIGHLIGHT_CLASS, filter_by_metascore, highlight_if_blank


def test_filter_by_metascore_threshold(sample_movies):
    result = filter_by_metascore(sample_movies, 70)

    assert [movie.movie_id for movie in result] == [10, 30]


def test_filter_by_metascore_excludes_non_numeric(sample_movies):
    result = filter_by_metascore(sample_movies, 0)

    assert [movie.movie_id for movie in result] == [10, 30, 40]


def test_filter_by_metascore_is_inclusive(sample_movies):
    result = filter_by_metascore(sample_movies, 89)

    assert [movie.movie_id for movie in result] == [10]


def test_filter_by_metascore_empty_input():
    assert filter_by_metascore([], 70) == []


@pytest.mark.parametrize("score", ["", "N/A"])
def test_highlight_if_blank_marks_missing_scores(score):
    assert highlight_if_blank(score) == HIGHLIGHT_CLASS


@pytest.mark.parametrize("score", ["85", 85, "n/a", "0"])
def test_highlight_if_blank_leaves_other_scores(score):
    assert highlight_if_blank(score) == ""
