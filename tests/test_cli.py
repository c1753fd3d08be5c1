import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

import cli


class CliTests(unittest.TestCase):
    def _run(self, *answers: object) -> str:
        out = io.StringIO()
        with patch("builtins.input", side_effect=list(answers)), redirect_stdout(out):
            cli.run()
        return out.getvalue()

    def test_show_and_change_team(self) -> None:
        output = self._run("alice", "Red", "1", "2", "Blue", "1", "3")

        self.assertIn("alice Team(id=None, name='Red')", output)
        self.assertIn("Team changed.", output)
        self.assertIn("alice Team(id=None, name='Blue')", output)
        self.assertIn("Goodbye.", output)

    def test_numeric_name_reprompted(self) -> None:
        output = self._run("42", "Red", "bob", "Red", "1", "3")

        self.assertIn("Error: User name cannot be a number: '42'.", output)
        self.assertIn("bob Team(id=None, name='Red')", output)

    def test_blank_team_on_change_keeps_user(self) -> None:
        output = self._run("alice", "Red", "2", "", "1", "3")

        self.assertIn("Error: User must be assigned to a team.", output)
        self.assertNotIn("Team changed.", output)
        self.assertIn("alice Team(id=None, name='Red')", output)

    def test_keyboard_interrupt_exits(self) -> None:
        output = self._run("alice", "Red", KeyboardInterrupt())

        self.assertIn("Exiting...", output)
        self.assertNotIn("Goodbye.", output)


if __name__ == "__main__":
    unittest.main(verbosity=2)
