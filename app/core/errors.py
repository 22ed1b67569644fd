"""
Error types raised by the store and gateway clients.
"""


class DocumentStoreError(Exception):
    """A document store call failed."""

    status_code: int | None = None

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotModifiedError(DocumentStoreError):
    """The schema already exists with an identical body."""

    status_code = 304


class GatewayError(Exception):
    """Normalized outbound gateway failure carrying only a readable message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
