import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Remote todo service (jsonplaceholder-compatible REST API)
TODO_API_URL = os.getenv("TODO_API_URL", "https://jsonplaceholder.typicode.com")

# Seconds; unset means no timeout beyond the transport default
TODO_API_TIMEOUT = float(os.getenv("TODO_API_TIMEOUT")) if os.getenv("TODO_API_TIMEOUT") else None

# Page sizes for the startup load
TODOS_LIMIT = 15
USERS_LIMIT = 5

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
