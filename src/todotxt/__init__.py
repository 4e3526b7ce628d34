"""
todo.txt task parsing and formatting.

Main API:
    from todotxt import parse_task, format_task, Task

    task = parse_task("(B) Write some code +python @work due:tomorrow")
    task.is_complete = True
    format_task(task)  # "x (B) Write some code +python @work due:tomorrow"
"""

from .models import Task
from .parsers import parse_content, parse_file, parse_task, write_file
from .utils.formatting import format_task
from .utils.validation import TaskValidationError, check_task, validate_task

__all__ = [
    # Model
    "Task",
    # Main API
    "parse_task",
    "format_task",
    # Files
    "parse_content",
    "parse_file",
    "write_file",
    # Validation
    "validate_task",
    "check_task",
    "TaskValidationError",
]
