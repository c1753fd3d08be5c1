"""
Team domain model.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Team:
    """A team a user belongs to. Only presence and equality matter to User."""

    id: Optional[int]
    name: str

    def __str__(self) -> str:
        return f"Team(id={self.id}, name='{self.name}')"
