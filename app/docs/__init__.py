"""Static API documentation."""

from app.docs.openapi import OPENAPI_SPEC
from app.docs.viewer import SWAGGER_UI_HTML

__all__ = [
    "OPENAPI_SPEC",
    "SWAGGER_UI_HTML",
]
