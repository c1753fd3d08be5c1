"""
User domain model.

A user is an immutable pairing of a display name and a team. Changing team
produces a new, re-validated User; the original is never modified.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional

from team import Team

# A plain integer literal: "0", or an optionally negative number without leading zeros.
_NUMERIC_NAME = re.compile(r"0|-?[1-9][0-9]*", re.ASCII)


class InvalidNameError(ValueError):
    """Raised when a user name is not an acceptable display name."""


class MissingTeamError(ValueError):
    """Raised when a user is given no team."""


def is_numeric(name: str) -> bool:
    """True when the whole name reads as a plain integer."""
    return _NUMERIC_NAME.fullmatch(name) is not None


@dataclass(frozen=True)
class User:
    """Represents a named member of a team."""

    name: str
    team: Optional[Team]

    def __post_init__(self) -> None:
        self._validate(self.name, self.team)

    @staticmethod
    def _validate(name: str, team: Optional[Team]) -> None:
        # Name is checked before team, so a bad name wins when both are bad.
        if not isinstance(name, str):
            raise InvalidNameError("User name must be a string.")
        if is_numeric(name):
            raise InvalidNameError(f"User name cannot be a number: '{name}'.")
        if team is None:
            raise MissingTeamError("User must be assigned to a team.")

    def change_team(self, new_team: Optional[Team]) -> "User":
        """Returns a copy of this user on new_team; self is left as is."""
        self._validate(self.name, new_team)
        return replace(self, team=new_team)

    def print_user(self) -> None:
        print(f"{self.name} {self.team}")

    def __str__(self) -> str:
        return f"User(name='{self.name}', team={self.team})"
