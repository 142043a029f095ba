"""
Custom exception types for the path generation package.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class ConfigurationError(ValueError):
    """A configuration mapping holds a value the generator cannot use."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"Configuration Error: {message}")

    def __str__(self):
        return f"Configuration Error: {self.original_message}"


class PathDocumentError(RuntimeError):
    """A saved path document is missing required sections or is malformed."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"Path Document Error: {message}")

    def __str__(self):
        return f"Path Document Error: {self.original_message}"
