"""Storage error types."""


class StorageError(Exception):
    """Raised when a statement against the catalog database fails."""

    def __init__(self, message: str, statement: str | None = None):
        self.statement = statement
        super().__init__(message)
