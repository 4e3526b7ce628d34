"""
Canonical todo.txt line formatting.

This module is the single source of truth for how a Task is rendered back
to a line. Token order is fixed regardless of where tags sat in the
original line:

    x (A) description +project @context key:value

Every token is followed by one space and only trailing whitespace is
trimmed at the end, so an empty description between other tokens leaves a
double space (e.g. "x  +proj").
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from todotxt.models.task import Task


def render_priority(priority: str) -> str:
    return f"({priority})"


def render_project(name: str) -> str:
    return f"+{name}"


def render_context(name: str) -> str:
    return f"@{name}"


def render_attribute(key: str, value: str) -> str:
    return f"{key}:{value}"


def format_tokens(task: Task) -> List[str]:
    """
    Return the tokens of a task in canonical order.

    The description is always included, even when empty.
    """
    tokens: List[str] = []
    if task.is_complete:
        tokens.append("x")
    if task.priority is not None:
        tokens.append(render_priority(task.priority))
    tokens.append(task.description)
    tokens.extend(render_project(p) for p in task.projects)
    tokens.extend(render_context(c) for c in task.contexts)
    tokens.extend(render_attribute(k, v) for k, v in task.attributes)
    return tokens


def format_task(task: Task) -> str:
    """
    Render a Task as a single todo.txt line.

    Args:
        task: The task to render

    Returns:
        Space-joined canonical tokens with trailing whitespace removed
    """
    return " ".join(format_tokens(task)).rstrip()
