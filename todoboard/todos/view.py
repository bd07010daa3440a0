"""
View rendering for the todo board.

render_board() turns a store snapshot plus the current status line into a
BoardView: a plain description of what the page shows. It never touches the
store. Every piece of text that came from the service or the user is escaped
here and handed to the template as Markup.
"""
from collections import namedtuple

from markupsafe import Markup, escape

from todoboard.todos.store import UNKNOWN_USER

Status = namedtuple('Status', ['message', 'hint'])

UserOption = namedtuple('UserOption', ['value', 'label'])
TodoEntry = namedtuple('TodoEntry', ['id', 'title', 'user_name', 'completed'])
BoardView = namedtuple('BoardView', [
    'user_options', 'entries', 'empty', 'total', 'done', 'message', 'hint', 'loaded',
])

USER_PLACEHOLDER = UserOption(value=0, label=Markup('Select user'))
EMPTY_ENTRY_TEXT = 'No tasks yet'


def escape_text(text):
    """Escape &, <, >, " and ' so text can be interpolated into HTML."""
    return escape(str(text))


def empty_board_status():
    return Status(
        message='No tasks yet. Add your first todo.',
        hint='Choose user, type task title, then click Add Todo.',
    )


def loaded_board_status():
    return Status(
        message='Todos are loaded and ready.',
        hint='Use checkbox to complete task and × to remove it.',
    )


def board_status_for(todos):
    """Status shown right after a full render of ``todos``."""
    return loaded_board_status() if todos else empty_board_status()


def render_user_options(users):
    options = [USER_PLACEHOLDER]
    options.extend(UserOption(value=user.id, label=escape_text(user.name)) for user in users)
    return options


def render_entries(todos, users):
    """Newest first: the reverse of store order."""
    names = {user.id: user.name for user in users}
    return [
        TodoEntry(
            id=todo.id,
            title=escape_text(todo.title),
            user_name=escape_text(names.get(todo.user_id, UNKNOWN_USER)),
            completed=todo.completed,
        )
        for todo in reversed(todos)
    ]


def render_board(snapshot, status):
    todos = snapshot.todos
    done = sum(1 for todo in todos if todo.completed)

    return BoardView(
        user_options=render_user_options(snapshot.users),
        entries=render_entries(todos, snapshot.users),
        empty=not todos,
        total=len(todos),
        done=done,
        message=escape_text(status.message),
        hint=escape_text(status.hint),
        loaded=snapshot.loaded,
    )
