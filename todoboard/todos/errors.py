class ServiceError(Exception):
    """A remote todo service call failed.

    ``operation`` names the failing call ("load todos", "create todo", ...)
    and is what the UI reports back to the user.
    """

    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"Failed to {operation}. Please try later.")
