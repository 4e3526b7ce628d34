"""REST API routes for todo.txt operations."""

from pathlib import Path
from typing import List, Optional, Tuple

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from todotxt.tools.task_tools import (
    handle_file_list,
    handle_task_add,
    handle_task_format,
    handle_task_parse,
    handle_task_update,
    handle_task_validate,
    resolve_todo_path,
)
from todotxt.utils.validation import TaskValidationError


class LineBody(BaseModel):
    line: str


class TaskBody(BaseModel):
    is_complete: bool = False
    priority: Optional[str] = None
    description: str = ""
    projects: List[str] = []
    contexts: List[str] = []
    attributes: List[Tuple[str, str]] = []


class TodoAddBody(BaseModel):
    line: str
    file_path: Optional[str] = None


class TodoUpdateBody(BaseModel):
    is_complete: Optional[bool] = None
    priority: Optional[str] = None
    description: Optional[str] = None


def register_task_routes(app_router: APIRouter, default_file: Optional[Path] = None) -> None:
    """Attach todo.txt REST routes."""

    def _path(file_path: Optional[str]) -> Path:
        try:
            return resolve_todo_path(file_path, default_file)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app_router.post("/parse")
    def parse_line(body: LineBody):
        return handle_task_parse(line=body.line)

    @app_router.post("/format")
    def format_line(body: TaskBody, strict: bool = Query(False)):
        try:
            return handle_task_format(task=body.model_dump(), strict=strict)
        except TaskValidationError as e:
            raise HTTPException(status_code=422, detail=e.problems)

    @app_router.post("/validate")
    def validate_line(body: LineBody):
        return handle_task_validate(line=body.line)

    @app_router.get("/todo")
    def list_todo(file_path: Optional[str] = Query(None)):
        path = _path(file_path)
        try:
            return handle_file_list(file_path=path)
        except FileNotFoundError:
            raise HTTPException(status_code=404, detail=f"File not found: {path}")

    @app_router.post("/todo", status_code=201)
    def add_todo(body: TodoAddBody):
        path = _path(body.file_path)
        try:
            return handle_task_add(file_path=path, line=body.line)
        except Exception as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app_router.patch("/todo/{index}")
    def update_todo(index: int, body: TodoUpdateBody, file_path: Optional[str] = Query(None)):
        path = _path(file_path)
        try:
            result = handle_task_update(file_path=path, index=index, **body.model_dump())
        except FileNotFoundError:
            raise HTTPException(status_code=404, detail=f"File not found: {path}")
        except Exception as e:
            raise HTTPException(status_code=400, detail=str(e))
        if "error" in result:
            raise HTTPException(status_code=404, detail=result["error"])
        return result
