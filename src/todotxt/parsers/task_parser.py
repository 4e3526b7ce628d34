"""
Parser for todo.txt task lines.

Main API:
    parse_task(line)  → Task
    parse_file(path)  → List[Task]
    write_file(path, tasks)  → None

parse_task never fails: any text is a valid (if low-information) task, and
anything that does not match a marker's exact shape stays in the description.
write_file serialises back through formatting.py so the canonical token
order is always applied on write-back.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Tuple

from todotxt.models.task import Task
from todotxt.utils.formatting import format_task

log = logging.getLogger(__name__)

# Leading markers. The description group stops at the first line break.
_TASK_RE = re.compile(r"(?P<complete>x )?(?:\((?P<priority>[A-Z])\) )?(?P<description>.*)")

# Inline tokens; WORD is ASCII [A-Za-z0-9_]+
_PROJECT_RE = re.compile(r"\+(\w+)", re.ASCII)
_CONTEXT_RE = re.compile(r"@(\w+)", re.ASCII)
_ATTRIBUTE_RE = re.compile(r"(\w+):(\w+)", re.ASCII)


# ---------------------------------------------------------------------------
# Token extraction
# ---------------------------------------------------------------------------

def extract_projects(text: str) -> Tuple[List[str], str]:
    """Return (project names, text with every +project token removed)."""
    return _PROJECT_RE.findall(text), _PROJECT_RE.sub("", text)


def extract_contexts(text: str) -> Tuple[List[str], str]:
    """Return (context names, text with every @context token removed)."""
    return _CONTEXT_RE.findall(text), _CONTEXT_RE.sub("", text)


def extract_attributes(text: str) -> Tuple[List[Tuple[str, str]], str]:
    """Return ((key, value) pairs, text with every key:value token removed)."""
    return _ATTRIBUTE_RE.findall(text), _ATTRIBUTE_RE.sub("", text)


# ---------------------------------------------------------------------------
# Line parser
# ---------------------------------------------------------------------------

def parse_task(line: str) -> Task:
    """
    Parse a single todo.txt line into a Task.

    Markers are only recognised at the start of the line: "x " first, then
    "(A) ". The rest is scanned for projects, then contexts, then attributes;
    each pass runs on the text left over by the one before it, so a token is
    claimed by the earliest category that matches it.

    Whitespace left behind by removed tokens is not collapsed; only the ends
    of the final description are stripped.
    """
    # The description group accepts the empty string, so this always matches.
    m = _TASK_RE.match(line)

    projects, rest = extract_projects(m.group("description"))
    contexts, rest = extract_contexts(rest)
    attributes, rest = extract_attributes(rest)

    return Task(
        is_complete=m.group("complete") is not None,
        priority=m.group("priority"),
        description=rest.strip(),
        projects=projects,
        contexts=contexts,
        attributes=attributes,
    )


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------

def parse_content(content: str) -> List[Task]:
    """
    Parse todo.txt content into a list of Tasks, one per non-blank line.

    Each line is parsed on its own; blank and whitespace-only lines are
    skipped, so list indices do not track physical line numbers.
    """
    return [parse_task(line) for line in content.splitlines() if line.strip()]


def parse_file(file_path: Path) -> List[Task]:
    """Parse a todo.txt file into a list of Tasks."""
    tasks = parse_content(file_path.read_text(encoding="utf-8"))
    log.debug("Parsed %d tasks from %s", len(tasks), file_path)
    return tasks


def write_file(file_path: Path, tasks: Iterable[Task]) -> None:
    """Write tasks to a todo.txt file, one canonical line per task."""
    lines = [format_task(task) for task in tasks]
    file_path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    log.debug("Wrote %d tasks to %s", len(lines), file_path)
