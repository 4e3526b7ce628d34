"""FastAPI application factory for the todo.txt REST API."""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI

from todotxt.api.task_routes import register_task_routes


def create_app(default_file: Optional[Path] = None) -> FastAPI:
    """Build and return a FastAPI app; file routes fall back to default_file."""
    app = FastAPI(title="todotxt-mcp", docs_url="/api/docs", openapi_url="/api/openapi.json")

    api = APIRouter(prefix="/api")
    register_task_routes(api, default_file)
    app.include_router(api)

    return app
