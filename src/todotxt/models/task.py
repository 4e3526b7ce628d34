"""
Core task data model.

A Task captures every field of a single todo.txt line. No raw line is kept —
the model IS the source of truth, and utils.formatting defines the canonical
rendering back to text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Task:
    """
    A single todo.txt task.

    Attributes are kept as an ordered list of (key, value) pairs rather than
    a dict: keys may repeat and their order matters for round-tripping.
    """

    is_complete: bool = False
    priority: Optional[str] = None
    description: str = ""
    projects: List[str] = field(default_factory=list)
    contexts: List[str] = field(default_factory=list)
    attributes: List[Tuple[str, str]] = field(default_factory=list)

    def __str__(self) -> str:
        from todotxt.utils.formatting import format_task

        return format_task(self)

    def copy(self) -> Task:
        """Return an independent copy that shares no lists with this task."""
        return Task(
            is_complete=self.is_complete,
            priority=self.priority,
            description=self.description,
            projects=list(self.projects),
            contexts=list(self.contexts),
            attributes=list(self.attributes),
        )

    def get_attribute(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Value of the first attribute with this key, or default."""
        for k, v in self.attributes:
            if k == key:
                return v
        return default
