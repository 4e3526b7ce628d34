"""
Optional strict checks for Task values.

parse_task and format_task accept anything. This layer is for callers that
build Tasks by hand (e.g. through the MCP tools or REST API) and want to know
whether the result is well formed and will parse back to the same Task.
Attribute values are checked for shape only; their meaning (dates etc.) is
the caller's concern.
"""

import re
from typing import List

from todotxt.models.task import Task
from todotxt.parsers.task_parser import parse_task
from todotxt.utils.formatting import format_task

_WORD_RE = re.compile(r"\w+", re.ASCII)
_PRIORITY_RE = re.compile(r"[A-Z]")


class TaskValidationError(ValueError):
    """Raised by check_task when a Task has one or more problems."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def _is_word(value) -> bool:
    return isinstance(value, str) and _WORD_RE.fullmatch(value) is not None


def validate_task(task: Task) -> List[str]:
    """
    Return a list of problems with a Task, empty if it is well formed.

    A well-formed task has a single A-Z priority (or none), non-empty word
    names for every project, context, attribute key and value, and survives
    a format → parse round trip unchanged.
    """
    problems: List[str] = []

    if task.priority is not None and not (
        isinstance(task.priority, str) and _PRIORITY_RE.fullmatch(task.priority)
    ):
        problems.append(f"priority must be a single letter A-Z, got {task.priority!r}")

    for name in task.projects:
        if not _is_word(name):
            problems.append(f"invalid project name {name!r}")
    for name in task.contexts:
        if not _is_word(name):
            problems.append(f"invalid context name {name!r}")
    for pair in task.attributes:
        if len(pair) != 2:
            problems.append(f"attribute must be a (key, value) pair, got {pair!r}")
            continue
        key, value = pair
        if not _is_word(key):
            problems.append(f"invalid attribute key {key!r}")
        if not _is_word(value):
            problems.append(f"invalid attribute value {value!r} for key {key!r}")

    # Field problems already break the round trip; only report it on its own.
    if not problems:
        line = format_task(task)
        if parse_task(line) != _normalized(task):
            problems.append(f"task does not parse back unchanged from {line!r}")

    return problems


def _normalized(task: Task) -> Task:
    # Attribute pairs may arrive as lists (e.g. from JSON); compare as tuples.
    normalized = task.copy()
    normalized.attributes = [tuple(pair) for pair in task.attributes]
    return normalized


def check_task(task: Task) -> Task:
    """Return the task unchanged, or raise TaskValidationError."""
    problems = validate_task(task)
    if problems:
        raise TaskValidationError(problems)
    return task
