"""
Task tool handlers.

Core logic lives in handle_* functions (return dicts).
MCP wrappers in register_task_tools() serialize to JSON strings.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from mcp.server.fastmcp import FastMCP

from todotxt.models.task import Task
from todotxt.parsers.task_parser import parse_file, parse_task, write_file
from todotxt.utils.formatting import format_task
from todotxt.utils.validation import check_task, validate_task

log = logging.getLogger(__name__)


def task_to_dict(task: Task) -> dict:
    """Serialize a Task to a JSON-serializable dict."""
    return {
        "is_complete": task.is_complete,
        "priority": task.priority,
        "description": task.description,
        "projects": list(task.projects),
        "contexts": list(task.contexts),
        "attributes": [[k, v] for k, v in task.attributes],
    }


def task_from_dict(data: dict) -> Task:
    """Build a Task from a dict shaped like task_to_dict's output."""
    return Task(
        is_complete=bool(data.get("is_complete", False)),
        priority=data.get("priority") or None,
        description=data.get("description") or "",
        projects=list(data.get("projects") or []),
        contexts=list(data.get("contexts") or []),
        attributes=[tuple(pair) for pair in data.get("attributes") or []],
    )


def resolve_todo_path(file_path: Optional[str], default_file: Optional[Path]) -> Path:
    if file_path:
        return Path(file_path)
    if default_file is not None:
        return default_file
    raise ValueError("No file_path given and no default todo file is configured")


# ---------------------------------------------------------------------------
# Handler functions (return dicts, shared by MCP tools and REST API)
# ---------------------------------------------------------------------------


def handle_task_parse(*, line: str) -> dict:
    return task_to_dict(parse_task(line))


def handle_task_format(*, task: dict, strict: bool = False) -> dict:
    parsed = task_from_dict(task)
    if strict:
        check_task(parsed)
    return {"line": format_task(parsed)}


def handle_task_validate(*, line: str) -> dict:
    task = parse_task(line)
    problems = validate_task(task)
    return {
        "valid": not problems,
        "problems": problems,
        "task": task_to_dict(task),
    }


def handle_file_list(*, file_path: Path) -> List[dict]:
    tasks = parse_file(file_path)
    result = []
    for index, task in enumerate(tasks):
        d = task_to_dict(task)
        d["index"] = index
        d["line"] = format_task(task)
        result.append(d)
    return result


def handle_task_add(*, file_path: Path, line: str) -> dict:
    # Blank lines are skipped on read, so they cannot be stored as tasks.
    if not line.strip():
        raise ValueError("line is empty")
    task = check_task(parse_task(line))

    tasks = parse_file(file_path) if file_path.exists() else []
    tasks.append(task)
    write_file(file_path, tasks)
    log.info("Added task %d to %s", len(tasks) - 1, file_path)

    result = task_to_dict(task)
    result["index"] = len(tasks) - 1
    result["line"] = format_task(task)
    result["file_path"] = str(file_path)
    return result


def handle_task_update(
    *,
    file_path: Path,
    index: int,
    is_complete: Optional[bool] = None,
    priority: Optional[str] = None,
    description: Optional[str] = None,
) -> dict:
    tasks = parse_file(file_path)
    if not 0 <= index < len(tasks):
        return {"error": f"Task index {index} out of range ({len(tasks)} tasks in {file_path})"}

    task = tasks[index].copy()
    if is_complete is not None:
        task.is_complete = is_complete
    if priority is not None:
        task.priority = priority or None
    if description is not None:
        task.description = description.strip()
    check_task(task)

    tasks[index] = task
    write_file(file_path, tasks)
    log.info("Updated task %d in %s", index, file_path)

    result = task_to_dict(task)
    result["index"] = index
    result["line"] = format_task(task)
    return result


# ---------------------------------------------------------------------------
# MCP tool registration (thin wrappers)
# ---------------------------------------------------------------------------


def register_task_tools(mcp: FastMCP, default_file: Optional[Path] = None) -> None:
    """Register all todo.txt MCP tools onto the FastMCP instance."""

    @mcp.tool()
    def task_parse(line: str) -> str:
        """
        Parse a single todo.txt line.

        Args:
            line: A todo.txt line, e.g. "(A) Call mom +family @phone due:friday"

        Returns:
            JSON task object with is_complete, priority, description,
            projects, contexts and attributes ([key, value] pairs)
        """
        return json.dumps(handle_task_parse(line=line), indent=2)

    @mcp.tool()
    def task_format(
        description: str = "",
        is_complete: bool = False,
        priority: Optional[str] = None,
        projects: Optional[List[str]] = None,
        contexts: Optional[List[str]] = None,
        attributes: Optional[List[Tuple[str, str]]] = None,
        strict: bool = False,
    ) -> str:
        """
        Render task fields as a canonical todo.txt line.

        Args:
            description: Free text without tags
            is_complete: Prefix the line with "x"
            priority: Single letter A-Z
            projects: Project names without "+"
            contexts: Context names without "@"
            attributes: [key, value] pairs, rendered as key:value
            strict: Reject tasks that would not parse back unchanged

        Returns:
            JSON object {"line": ...} or error message
        """
        task = {
            "is_complete": is_complete,
            "priority": priority,
            "description": description,
            "projects": projects,
            "contexts": contexts,
            "attributes": attributes,
        }
        try:
            return json.dumps(handle_task_format(task=task, strict=strict), indent=2)
        except Exception as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def task_validate(line: str) -> str:
        """
        Check whether a todo.txt line is well formed.

        Args:
            line: A todo.txt line

        Returns:
            JSON with "valid", a list of "problems" and the parsed "task"
        """
        return json.dumps(handle_task_validate(line=line), indent=2)

    @mcp.tool()
    def todo_list(file_path: Optional[str] = None) -> str:
        """
        List every task in a todo.txt file.

        Blank lines are skipped; "index" is the position among the tasks
        and is what todo_update expects.

        Args:
            file_path: Path to the todo.txt file (defaults to TODO_FILE)

        Returns:
            JSON array of task objects
        """
        try:
            path = resolve_todo_path(file_path, default_file)
            return json.dumps(handle_file_list(file_path=path), indent=2)
        except Exception as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def todo_add(line: str, file_path: Optional[str] = None) -> str:
        """
        Append a task to a todo.txt file.

        The line is parsed and written back in canonical order, so tags
        move to the end of the line. The file is created if missing.

        Args:
            line: The task as a todo.txt line
            file_path: Path to the todo.txt file (defaults to TODO_FILE)

        Returns:
            JSON object with the new task and its index
        """
        try:
            path = resolve_todo_path(file_path, default_file)
            return json.dumps(handle_task_add(file_path=path, line=line), indent=2)
        except Exception as e:
            return json.dumps({"error": str(e)})

    @mcp.tool()
    def todo_update(
        index: int,
        is_complete: Optional[bool] = None,
        priority: Optional[str] = None,
        description: Optional[str] = None,
        file_path: Optional[str] = None,
    ) -> str:
        """
        Update a task in a todo.txt file.

        Only fields you pass will be changed. Pass priority="" to clear it.

        Args:
            index: Task index as returned by todo_list
            is_complete: Mark the task complete or open
            priority: New priority letter A-Z (or "" to clear)
            description: New description (tags belong in the other fields)
            file_path: Path to the todo.txt file (defaults to TODO_FILE)

        Returns:
            Updated task JSON or error message
        """
        try:
            path = resolve_todo_path(file_path, default_file)
            return json.dumps(
                handle_task_update(
                    file_path=path,
                    index=index,
                    is_complete=is_complete,
                    priority=priority,
                    description=description,
                ),
                indent=2,
            )
        except Exception as e:
            return json.dumps({"error": str(e)})
