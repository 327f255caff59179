import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from cinedata.core.config import Settings, get_settings
from cinedata.core.exceptions import BaseAppException
from cinedata.core.logging import setup_logging
from cinedata.routers import data, pages
from cinedata.templating import create_templates

logger = logging.getLogger(__name__)

NOT_FOUND_PAGE = "<h1>404 - ERROR: Try a different Route.</h1>"
UNMATCHED_ROUTE_STATUSES = (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED)

async def handle_app_exception(request: Request, exc: BaseAppException) -> PlainTextResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.__cause__!r})")
    return PlainTextResponse(exc.message, status_code=exc.status_code)

async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    # Unknown paths and known paths with an unsupported method share one page
    if exc.status_code in UNMATCHED_ROUTE_STATUSES:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings"""
    settings = settings or get_settings()
    
    app = FastAPI(
        title="Cinedata",
        description="Read-only movie dataset browser",
        version="1.0.0",
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.templates = create_templates()
    
    app.add_exception_handler(BaseAppException, handle_app_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    
    app.include_router(pages.router)
    app.include_router(data.router)
    
    if settings.PUBLIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(settings.PUBLIC_DIR)), name="static")
    else:
        logger.warning(f"Static directory {settings.PUBLIC_DIR} not found, /static is disabled")
    
    @app.on_event("startup")
    async def announce():
        logger.info(f"Cinedata listening at http://localhost:{settings.PORT}")
        logger.info(f"Serving movies from {settings.DATASET_PATH}")
    
    return app

setup_logging(get_settings().LOG_LEVEL)
app = create_app()
