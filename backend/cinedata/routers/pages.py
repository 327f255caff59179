from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

router = APIRouter(tags=["pages"])

@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    settings = request.app.state.settings
    return request.app.state.templates.TemplateResponse(
        request, "index.html", {"title": settings.APP_TITLE}
    )

@router.get("/users", response_class=PlainTextResponse)
async def users():
    return "respond with a resource"
