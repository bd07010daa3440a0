from datetime import date

from flask import Flask, render_template
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import logging

load_dotenv()

csrf = CSRFProtect()

def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config')

    if test_config is not None:
        app.config.update(test_config)
    elif not os.getenv('SECRET_KEY'):
        # Validate required environment variables
        raise ValueError("Required environment variable SECRET_KEY is not set")

    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    csrf.init_app(app)

    # One todo board per app; routes and commands reach it through app.extensions
    from todoboard.todos.context import BoardContext
    app.extensions['todoboard'] = BoardContext.from_config(app.config)

    # Register blueprints
    from todoboard.todos.routes import todos_bp
    app.register_blueprint(todos_bp)

    from todoboard.todos import commands as todos_commands
    todos_commands.init_app(app)

    @app.context_processor
    def inject_footer_year():
        return {'footer_year': date.today().year}

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    return app
