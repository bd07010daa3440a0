import click
from flask import current_app
from flask.cli import with_appcontext

from todoboard.todos.context import BoardContext
from todoboard.todos.controller import BoardController


@click.group(name='todos')
def todos_cli():
    """Todo board commands."""
    pass


@todos_cli.command('show')
@with_appcontext
def show_command():
    """Load the board from the todo service and print it."""
    context = BoardContext.from_config(current_app.config)
    result = BoardController(context).load()

    if not result.ok:
        raise click.ClickException(str(result.error))

    store = context.store
    for todo in reversed(store.todos()):
        mark = 'x' if todo.completed else ' '
        click.echo(f"[{mark}] {todo.title} ({store.user_name(todo.user_id)})")

    counts = store.counts()
    click.echo(f"Total: {counts['total']}  Done: {counts['done']}")


def init_app(app):
    """Register CLI commands with the app."""
    app.cli.add_command(todos_cli)
