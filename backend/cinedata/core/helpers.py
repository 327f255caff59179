import math
from typing import Any, Iterable, List, Optional

HIGHLIGHT_CLASS = "highlight"
BLANK_SCORES = ("", "N/A")

def _as_number(value: Any) -> Optional[float]:
    """Numeric value of a score, or None when it is not a number"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None

def filter_by_metascore(movies: Iterable[Any], threshold: Any) -> List[Any]:
    """Movies whose metascore is a number >= threshold; non-numeric scores are dropped"""
    limit = _as_number(threshold)
    if limit is None:
        return []
    result = []
    for movie in movies:
        score = _as_number(movie.metascore)
        if score is not None and score >= limit:
            result.append(movie)
    return result

def highlight_if_blank(score: Any) -> str:
    """CSS class for a missing score"""
    return HIGHLIGHT_CLASS if score in BLANK_SCORES else ""
