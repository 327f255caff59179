from pathlib import Path
from typing import Union

from fastapi.templating import Jinja2Templates

from cinedata.core.helpers import filter_by_metascore, highlight_if_blank

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

def create_templates(directory: Union[str, Path] = TEMPLATES_DIR) -> Jinja2Templates:
    """Jinja2 templates with the movie helpers registered"""
    templates = Jinja2Templates(directory=str(directory))
    templates.env.globals["filter_by_metascore"] = filter_by_metascore
    templates.env.globals["highlight_if_blank"] = highlight_if_blank
    templates.env.filters["highlight_if_blank"] = highlight_if_blank
    return templates
