"""
Unit tests for the `flask todos` CLI group.
"""
import unittest
from unittest.mock import patch

from todoboard import create_app
from todoboard.todos.client import TodoServiceClient
from todoboard.todos.errors import ServiceError
from todoboard.todos.models import Todo, User


class TestShowCommand(unittest.TestCase):

    def setUp(self):
        self.app = create_app({"TESTING": True, "SECRET_KEY": "test-secret"})
        self.runner = self.app.test_cli_runner()

    @patch.object(TodoServiceClient, "list_users", return_value=[User(1, "Alice")])
    @patch.object(TodoServiceClient, "list_todos", return_value=[
        Todo(1, 1, "A", False),
        Todo(2, 7, "B", True),
    ])
    def test_show_prints_newest_first(self, mock_todos, mock_users):
        result = self.runner.invoke(args=["todos", "show"])

        self.assertEqual(result.exit_code, 0)
        lines = result.output.splitlines()
        self.assertEqual(lines[0], "[x] B (Unknown user)")
        self.assertEqual(lines[1], "[ ] A (Alice)")
        self.assertEqual(lines[2], "Total: 2  Done: 1")
        mock_todos.assert_called_once_with(15)
        mock_users.assert_called_once_with(5)

    @patch.object(TodoServiceClient, "list_users", return_value=[])
    @patch.object(TodoServiceClient, "list_todos", side_effect=ServiceError("load todos"))
    def test_show_failure_exits_nonzero(self, mock_todos, mock_users):
        result = self.runner.invoke(args=["todos", "show"])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Failed to load todos. Please try later.", result.output)
