"""
Hand-written OpenAPI 3.0 document for the demo API.
Served as-is from /swagger.json; nothing here is generated from the routes.
"""

from typing import Any, Dict


def _user_schema(example_id: int, example_name: str, example_email: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "id": {"type": "integer", "example": example_id},
            "name": {"type": "string", "example": example_name},
            "email": {"type": "string", "example": example_email},
        },
    }


def _json_content(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"application/json": {"schema": schema}}


OPENAPI_SPEC: Dict[str, Any] = {
    "openapi": "3.0.0",
    "info": {
        "title": "My API",
        "version": "1.0.0",
        "description": "A simple demo API with hand-written Swagger docs",
    },
    "servers": [
        {
            "url": "http://localhost:3000",
            "description": "Development server",
        },
    ],
    "paths": {
        "/": {
            "get": {
                "summary": "Returns a greeting message",
                "description": "Get a simple hello world message",
                "responses": {
                    "200": {
                        "description": "Successful response",
                        "content": {
                            "text/plain": {
                                "schema": {"type": "string", "example": "Hello World!"},
                            },
                        },
                    },
                },
            },
        },
        "/api/users": {
            "get": {
                "summary": "Get all users",
                "description": "Retrieve a list of all users",
                "responses": {
                    "200": {
                        "description": "List of users",
                        "content": _json_content({
                            "type": "array",
                            "items": _user_schema(1, "John Doe", "john@example.com"),
                        }),
                    },
                },
            },
            "post": {
                "summary": "Create a new user",
                "description": "Create a new user with the provided information",
                "requestBody": {
                    "required": True,
                    "content": _json_content({
                        "type": "object",
                        "required": ["name", "email"],
                        "properties": {
                            "name": {"type": "string", "example": "Alice Johnson"},
                            "email": {"type": "string", "example": "alice@example.com"},
                        },
                    }),
                },
                "responses": {
                    "201": {
                        "description": "User created successfully",
                        "content": _json_content(
                            _user_schema(3, "Alice Johnson", "alice@example.com")
                        ),
                    },
                    "400": {
                        "description": "Bad request",
                        "content": _json_content({
                            "type": "object",
                            "properties": {
                                "error": {
                                    "type": "string",
                                    "example": "Name and email are required",
                                },
                            },
                        }),
                    },
                },
            },
        },
        "/swagger.json": {
            "get": {
                "summary": "Get OpenAPI specification",
                "description": "Returns the OpenAPI specification in JSON format",
                "responses": {
                    "200": {
                        "description": "OpenAPI specification",
                        "content": _json_content({"type": "object"}),
                    },
                },
            },
        },
        "/api-docs": {
            "get": {
                "summary": "Get API documentation",
                "description": "Returns the Swagger UI documentation page",
                "responses": {
                    "200": {
                        "description": "HTML documentation page",
                        "content": {
                            "text/html": {"schema": {"type": "string"}},
                        },
                    },
                },
            },
        },
    },
}
