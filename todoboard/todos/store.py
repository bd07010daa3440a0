import threading
from collections import namedtuple
from dataclasses import replace

UNKNOWN_USER = "Unknown user"

Snapshot = namedtuple('Snapshot', ['todos', 'users', 'loaded'])


class TodoStore:
    """
    In-memory cache of the todos and users the remote service confirmed.

    Only the controller mutates it, and only after the matching service
    call succeeded. Todos keep server order; users keep load order.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._todos = []
        self._users = {}
        self.loaded = False

    def replace_all(self, todos, users):
        with self._lock:
            self._todos = list(todos or [])
            self._users = {user.id: user for user in users or []}
            self.loaded = True

    def clear(self):
        """Back to the empty, unloaded state of a fresh store."""
        with self._lock:
            self._todos = []
            self._users = {}
            self.loaded = False

    def add_todo(self, todo):
        with self._lock:
            self._todos.append(todo)

    def set_completed(self, todo_id, completed):
        """Flip one todo's flag; unknown ids are ignored."""
        with self._lock:
            for index, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    self._todos[index] = replace(todo, completed=completed)
                    return

    def remove(self, todo_id):
        with self._lock:
            self._todos = [todo for todo in self._todos if todo.id != todo_id]

    def get(self, todo_id):
        for todo in self.todos():
            if todo.id == todo_id:
                return todo
        return None

    def todos(self):
        with self._lock:
            return tuple(self._todos)

    def users(self):
        with self._lock:
            return tuple(self._users.values())

    def counts(self):
        todos = self.todos()
        return {
            'total': len(todos),
            'done': sum(1 for todo in todos if todo.completed),
        }

    def user_name(self, user_id):
        user = self._users.get(user_id)
        return user.name if user else UNKNOWN_USER

    def snapshot(self):
        """Immutable copy of the current state for rendering."""
        with self._lock:
            return Snapshot(
                todos=tuple(self._todos),
                users=tuple(self._users.values()),
                loaded=self.loaded,
            )
