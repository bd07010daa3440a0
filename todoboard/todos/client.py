import requests
import logging

from todoboard.todos.errors import ServiceError
from todoboard.todos.models import Todo, User

logger = logging.getLogger(__name__)


class TodoServiceClient:
    """
    Client for the remote REST todo service (jsonplaceholder-compatible).
    Every call is a single attempt; failures surface as ServiceError.
    """

    def __init__(self, base_url, timeout=None, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, operation, method, endpoint, params=None, payload=None):
        """Internal helper: one round trip, raising ServiceError on any failure."""
        url = f"{self.base_url}/{endpoint}"

        try:
            response = self.session.request(
                method, url, params=params, json=payload, timeout=self.timeout
            )
            response.raise_for_status()
            return response
        except requests.RequestException as e:
            logger.error(f"Todo service error ({operation}) {method} {url}: {e}")
            raise ServiceError(operation) from e

    def _decode(self, operation, response, build):
        """Decode a JSON body with ``build``; bad bodies count as failures."""
        try:
            return build(response.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Todo service returned an unexpected body ({operation}): {e}")
            raise ServiceError(operation) from e

    def list_todos(self, limit):
        """GET /todos?_limit=N - Returns the first N todos in server order."""
        operation = "load todos"
        response = self._request(operation, "GET", "todos", params={"_limit": limit})
        return self._decode(operation, response, lambda rows: [Todo.from_json(row) for row in rows or []])

    def list_users(self, limit):
        """GET /users?_limit=N - Returns the first N users."""
        operation = "load users"
        response = self._request(operation, "GET", "users", params={"_limit": limit})
        return self._decode(operation, response, lambda rows: [User.from_json(row) for row in rows or []])

    def create_todo(self, user_id, title, completed=False):
        """POST /todos - The server assigns the new todo's id."""
        operation = "create todo"
        payload = {
            "userId": user_id,
            "title": title,
            "completed": completed,
        }
        response = self._request(operation, "POST", "todos", payload=payload)
        return self._decode(operation, response, Todo.from_json)

    def update_todo_completion(self, todo_id, completed):
        """PATCH /todos/{id} - Only the completed flag is sent; the body is ignored."""
        self._request("update todo", "PATCH", f"todos/{todo_id}", payload={"completed": completed})

    def delete_todo(self, todo_id):
        """DELETE /todos/{id}"""
        self._request("delete todo", "DELETE", f"todos/{todo_id}")
