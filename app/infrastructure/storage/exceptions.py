"""Exceptions raised by content stores."""


class ContentStoreError(Exception):
    """Base exception for content store failures.

    Raised directly when the store itself cannot be read (missing root
    directory, permission problems).
    """


class ContentNotFoundError(ContentStoreError):
    """Raised when a path does not exist in the content store.

    Example:
        >>> store.read_file("templates/missing.html")
        Traceback (most recent call last):
        ...
        ContentNotFoundError: Content not found: templates/missing.html
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Content not found: {path}")
