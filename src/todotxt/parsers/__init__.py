from .task_parser import (
    parse_task,
    parse_content,
    parse_file,
    write_file,
    extract_projects,
    extract_contexts,
    extract_attributes,
)

__all__ = [
    "parse_task",
    "parse_content",
    "parse_file",
    "write_file",
    "extract_projects",
    "extract_contexts",
    "extract_attributes",
]
