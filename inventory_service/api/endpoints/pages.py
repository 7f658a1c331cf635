from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse

from inventory_service.core.errors import NotFoundError

router = APIRouter(include_in_schema=False)


def _static_page(request: Request, filename: str) -> FileResponse:
    path = Path(request.app.state.settings.STATIC_DIR) / filename
    if not path.is_file():
        raise NotFoundError()
    return FileResponse(path, media_type="text/html")


@router.get("/RegisterForm.html")
async def register_form(request: Request) -> FileResponse:
    return _static_page(request, "RegisterForm.html")


@router.get("/SearchForm.html")
async def search_form(request: Request) -> FileResponse:
    return _static_page(request, "SearchForm.html")


@router.get("/docs/swagger.json")
async def api_description(request: Request) -> JSONResponse:
    """The hand-written API description the docs page renders."""
    return JSONResponse(request.app.state.api_description)


@router.get("/docs")
async def api_docs(request: Request) -> HTMLResponse:
    return get_swagger_ui_html(
        openapi_url="/docs/swagger.json",
        title=f"{request.app.title} - API docs",
    )
