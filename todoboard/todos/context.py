from todoboard.todos.client import TodoServiceClient
from todoboard.todos.store import TodoStore
from todoboard.todos.view import Status


class BoardContext:
    """
    Everything one todo board instance owns: the service client, the
    in-memory store, the startup page sizes and the current status line.

    create_app() builds one per Flask app from its config; tests build their own.
    """

    def __init__(self, client, todos_limit, users_limit, store=None):
        self.client = client
        self.store = store or TodoStore()
        self.todos_limit = todos_limit
        self.users_limit = users_limit
        self.status = Status(message='', hint='')

    @classmethod
    def from_config(cls, config):
        client = TodoServiceClient(
            base_url=config['TODO_API_URL'],
            timeout=config.get('TODO_API_TIMEOUT'),
        )
        return cls(
            client=client,
            todos_limit=config['TODOS_LIMIT'],
            users_limit=config['USERS_LIMIT'],
        )

    def set_status(self, message, hint=None):
        """Overwrite the status line; the hint is kept unless a new one is given."""
        self.status = Status(
            message=message,
            hint=self.status.hint if hint is None else hint,
        )
