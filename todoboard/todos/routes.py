from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app

from todoboard.todos.controller import BoardController
from todoboard.todos.forms import TodoForm
from todoboard.todos.view import render_board

todos_bp = Blueprint('todos', __name__,
                     template_folder='templates',
                     static_folder='static',
                     static_url_path='/todos/static')


# --- Helper Functions ---

def get_board_context():
    """The BoardContext create_app() attached to the running app."""
    return current_app.extensions['todoboard']


def get_controller():
    return BoardController(get_board_context())


def report(result):
    """Flash a failed action's error as an alert banner."""
    if result.error is not None:
        flash(str(result.error), 'error')


def render_board_page(context, form=None):
    board = render_board(context.store.snapshot(), context.status)
    form = form or TodoForm()
    form.set_user_choices(board.user_options)
    return render_template('todos/index.html', form=form, board=board)


# --- Routes ---

@todos_bp.route('/')
def index():
    """Todo board. The first visit (or one after a failed load) fetches from the service."""
    context = get_board_context()
    if not context.store.loaded:
        report(BoardController(context).load())
    return render_board_page(context)


@todos_bp.route('/reload', methods=['POST'])
def reload():
    """Throw away the cached board and fetch it again."""
    report(get_controller().load())
    return redirect(url_for('todos.index'))


@todos_bp.route('/add', methods=['POST'])
def add():
    """Create a todo; the form stays populated unless the service confirmed it."""
    form = TodoForm()
    result = get_controller().submit(form.todo.data, request.form.get('user'))

    if result.ok:
        return redirect(url_for('todos.index'))

    report(result)
    return render_board_page(get_board_context(), form)


@todos_bp.route('/toggle/<int:todo_id>', methods=['POST'])
def toggle(todo_id):
    """Confirm a checkbox change; on failure the board re-renders with the old value."""
    completed = request.form.get('completed') == 'on'
    report(get_controller().toggle(todo_id, completed))
    return redirect(url_for('todos.index'))


@todos_bp.route('/delete/<int:todo_id>', methods=['POST'])
def delete(todo_id):
    """Remove a todo once the service confirmed the delete."""
    report(get_controller().remove(todo_id))
    return redirect(url_for('todos.index'))
