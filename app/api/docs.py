"""
API documentation routes: the OpenAPI document and the Swagger UI page.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, JSONResponse

from app.docs import OPENAPI_SPEC, SWAGGER_UI_HTML

router = APIRouter()


@router.get("/swagger.json")
async def swagger_json():
    """OpenAPI specification."""
    return JSONResponse(content=OPENAPI_SPEC, media_type="application/json")


@router.get("/api-docs")
async def api_docs():
    """Swagger UI documentation page."""
    return HTMLResponse(content=SWAGGER_UI_HTML, media_type="text/html")
