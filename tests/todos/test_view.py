"""
Unit tests for board rendering.
"""
import unittest

from todoboard.todos.models import Todo, User
from todoboard.todos.store import Snapshot
from todoboard.todos.view import (
    Status,
    render_board,
    board_status_for,
    escape_text,
    USER_PLACEHOLDER,
)


def _snapshot(todos=(), users=(), loaded=True):
    return Snapshot(todos=tuple(todos), users=tuple(users), loaded=loaded)


class TestEscaping(unittest.TestCase):

    def test_escape_text_covers_markup_characters(self):
        escaped = str(escape_text('<b>&"\'</b>'))
        for raw in ('<', '>', '"', "'"):
            self.assertNotIn(raw, escaped)
        self.assertEqual(escaped.count('&'), escaped.count(';'))
        self.assertEqual(escaped, '&lt;b&gt;&amp;&#34;&#39;&lt;/b&gt;')

    def test_title_and_user_name_are_escaped(self):
        board = render_board(
            _snapshot([Todo(1, 1, '<b>&"\'</b>', False)], [User(1, '<Eve>')]),
            Status('', ''),
        )
        entry = board.entries[0]
        self.assertEqual(str(entry.title), '&lt;b&gt;&amp;&#34;&#39;&lt;/b&gt;')
        self.assertEqual(str(entry.user_name), '&lt;Eve&gt;')
        self.assertEqual(str(board.user_options[1].label), '&lt;Eve&gt;')

    def test_status_is_escaped(self):
        board = render_board(_snapshot(), Status('Task "<i>" added.', 'hint'))
        self.assertEqual(str(board.message), 'Task &#34;&lt;i&gt;&#34; added.')


class TestRenderBoard(unittest.TestCase):

    def test_single_todo_scenario(self):
        board = render_board(
            _snapshot([Todo(1, 1, "A", False)], [User(1, "Alice")]),
            board_status_for([Todo(1, 1, "A", False)]),
        )
        self.assertEqual(len(board.entries), 1)
        self.assertEqual(str(board.entries[0].title), "A")
        self.assertEqual(str(board.entries[0].user_name), "Alice")
        self.assertEqual((board.total, board.done), (1, 0))
        self.assertFalse(board.empty)
        self.assertEqual(str(board.message), "Todos are loaded and ready.")

    def test_entries_newest_first(self):
        board = render_board(
            _snapshot([Todo(1, 1, "old", False), Todo(2, 1, "new", True)], [User(1, "Alice")]),
            Status('', ''),
        )
        self.assertEqual([entry.id for entry in board.entries], [2, 1])
        self.assertEqual((board.total, board.done), (2, 1))

    def test_unknown_user_placeholder(self):
        board = render_board(_snapshot([Todo(1, 99, "A", False)], [User(1, "Alice")]), Status('', ''))
        self.assertEqual(str(board.entries[0].user_name), "Unknown user")

    def test_user_options_in_load_order_after_placeholder(self):
        board = render_board(_snapshot(users=[User(3, "Cy"), User(1, "Al")]), Status('', ''))
        self.assertEqual(board.user_options[0], USER_PLACEHOLDER)
        self.assertEqual([option.value for option in board.user_options], [0, 3, 1])

    def test_empty_board(self):
        status = board_status_for([])
        board = render_board(_snapshot(), status)
        self.assertTrue(board.empty)
        self.assertEqual(board.entries, [])
        self.assertEqual((board.total, board.done), (0, 0))
        self.assertEqual(str(board.message), "No tasks yet. Add your first todo.")
        self.assertEqual(str(board.hint), "Choose user, type task title, then click Add Todo.")

    def test_unloaded_flag_passes_through(self):
        board = render_board(_snapshot(loaded=False), Status('', ''))
        self.assertFalse(board.loaded)
