"""
Demo API routes: greeting and users.
"""

import os
import random
from typing import Any, Optional
from pydantic import BaseModel

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

router = APIRouter()


# =============================================================================
# Request/Response Models
# =============================================================================

class UserCreate(BaseModel):
    """User creation payload. Field types are not checked, only presence."""
    name: Optional[Any] = None
    email: Optional[Any] = None


class User(BaseModel):
    """User record."""
    id: int
    name: Any
    email: Any


# =============================================================================
# Greeting
# =============================================================================

@router.get("/", response_class=PlainTextResponse)
async def greeting():
    """Plain-text greeting. NAME is read on every request."""
    name = os.environ.get("NAME") or "World"
    return f"Hello {name}!"


# =============================================================================
# Users
# =============================================================================

@router.get("/api/users")
async def list_users():
    """Get the fixed demo users."""
    users = [
        User(id=1, name="John Doe", email="john@example.com"),
        User(id=2, name="Jane Smith", email="jane@example.com"),
    ]
    return [user.model_dump() for user in users]


@router.post("/api/users", status_code=201)
async def create_user(request: Request):
    """
    Echo back a new user with a random id.
    Nothing is stored; the id is neither unique nor retrievable later.
    """
    payload = await read_payload(request)

    if is_missing(payload.name) or is_missing(payload.email):
        return JSONResponse(
            status_code=400,
            content={"error": "Name and email are required"}
        )

    user = User(id=random.randrange(1000), name=payload.name, email=payload.email)
    return user.model_dump()


# =============================================================================
# Utilities
# =============================================================================

def is_missing(value: Any) -> bool:
    """Only null, false, zero, NaN and the empty string count as missing."""
    if value is None or isinstance(value, str):
        return not value
    if isinstance(value, (bool, int, float)):
        return not value or value != value
    return False


async def read_payload(request: Request) -> UserCreate:
    """
    Parse a JSON body. Bodies sent with another content type, malformed JSON
    and JSON values other than an object all count as empty.
    """
    content_type = request.headers.get("content-type", "").lower()
    if not content_type.startswith("application/json"):
        return UserCreate()

    try:
        body = await request.json()
    except ValueError:
        body = {}

    if not isinstance(body, dict):
        body = {}

    return UserCreate.model_validate(body)
