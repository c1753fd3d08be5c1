"""
Command-line interface (CLI) for the team user model.

Builds a User from prompted input and lets the operator show it or move it
to another team. Every team change yields a new User; the menu keeps the
latest one.
"""

from __future__ import annotations

from typing import Optional

from team import Team
from user import User


def _prompt_int(prompt: str, *, min_value: Optional[int] = None) -> int:
    # Keep prompting until user provides a valid integer (with optional min constraint).
    while True:
        raw = input(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            print("Please enter a valid whole number (integer).")
            continue

        if min_value is not None and value < min_value:
            print(f"Please enter a value >= {min_value}.")
            continue

        return value


def _prompt_team(prompt: str) -> Optional[Team]:
    # Blank input means no team; User validation decides what to do with that.
    team_name = input(prompt).strip()
    if not team_name:
        return None
    return Team(id=None, name=team_name)


def _prompt_user() -> User:
    # Keep prompting until the name and team pass validation.
    while True:
        name = input("Enter user name: ").strip()
        team = _prompt_team("Enter team name: ")
        try:
            return User(name=name, team=team)
        except ValueError as e:
            print(f"Error: {e}")


def run() -> None:
    print("Team User Tool")
    print("--------------")

    try:
        user = _prompt_user()

        while True:
            print("\nMenu:")
            print(" 1) Show user")
            print(" 2) Change team")
            print(" 3) Exit")

            choice = _prompt_int("Choose an option: ", min_value=1)

            if choice == 1:
                user.print_user()

            elif choice == 2:
                new_team = _prompt_team("New team name: ")
                try:
                    user = user.change_team(new_team)
                    print("Team changed.")
                except ValueError as e:
                    print(f"Error: {e}")

            elif choice == 3:
                print("Goodbye.")
                return

            else:
                print("Invalid choice. Please try again.")

    except KeyboardInterrupt:
        print("\nExiting...")


if __name__ == "__main__":
    run()
