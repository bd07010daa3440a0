"""
Todo board interaction controller.

Binds the four user actions (startup load, submit, toggle, remove) to the
service client. The store is only mutated after the service confirmed the
change. Each action returns an ActionResult instead of raising, so routes
and the CLI decide how to surface errors.
"""
import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

from todoboard.todos.errors import ServiceError
from todoboard.todos.view import board_status_for

logger = logging.getLogger(__name__)

ActionResult = namedtuple('ActionResult', ['ok', 'error', 'todo'], defaults=(None, None))


def parse_user_id(value):
    """Form value to user id; anything unusable becomes 0 (no user selected)."""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


class BoardController:

    def __init__(self, context):
        self.context = context

    @property
    def client(self):
        return self.context.client

    @property
    def store(self):
        return self.context.store

    def _report(self, error):
        self.context.set_status(str(error))
        return ActionResult(ok=False, error=error)

    def load(self):
        """
        Fetch todos and users in parallel and populate the store.
        Both requests must succeed; if either fails the store is left empty
        and unloaded, dropping whatever an earlier load put there.
        """
        with ThreadPoolExecutor(max_workers=2) as pool:
            todos_future = pool.submit(self.client.list_todos, self.context.todos_limit)
            users_future = pool.submit(self.client.list_users, self.context.users_limit)
            try:
                todos = todos_future.result()
                users = users_future.result()
            except ServiceError as e:
                self.store.clear()
                return self._report(e)

        self.store.replace_all(todos, users)
        status = board_status_for(todos)
        self.context.set_status(status.message, status.hint)
        logger.info(f"Loaded {len(todos)} todos and {len(users)} users")
        return ActionResult(ok=True)

    def submit(self, title, user_id):
        """
        Create a todo. Blank titles and a missing user are ignored silently:
        no request is made and the status line is left alone.
        """
        title = (title or '').strip()
        user_id = parse_user_id(user_id)

        if not title or user_id <= 0:
            return ActionResult(ok=False)

        try:
            todo = self.client.create_todo(user_id, title, completed=False)
        except ServiceError as e:
            return self._report(e)

        self.store.add_todo(todo)
        self.context.set_status(f'Task "{title}" added.', 'You can mark it done or remove it.')
        logger.info(f"Created todo {todo.id} for user {user_id}")
        return ActionResult(ok=True, todo=todo)

    def toggle(self, todo_id, completed):
        """
        Confirm a checkbox change with the service. ``completed`` is the value
        the checkbox already shows. On failure the store is untouched, so the
        next render shows the checkbox's previous value.
        """
        try:
            self.client.update_todo_completion(todo_id, completed)
        except ServiceError as e:
            return self._report(e)

        self.store.set_completed(todo_id, completed)
        self.context.set_status(
            'Task marked as completed.' if completed else 'Task moved back to active.'
        )
        logger.info(f"Todo {todo_id} completed={completed}")
        return ActionResult(ok=True, todo=self.store.get(todo_id))

    def remove(self, todo_id):
        try:
            self.client.delete_todo(todo_id)
        except ServiceError as e:
            return self._report(e)

        self.store.remove(todo_id)
        self.context.set_status('Task removed.')
        logger.info(f"Removed todo {todo_id}")
        return ActionResult(ok=True)
