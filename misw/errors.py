"""
Errors that end the client.

Everything else (bad input, a rejected move, a wrong password) is handled
where it happens and never reaches the top level.
"""


class FatalError(Exception):
    """Raised when the client cannot continue; the CLI exits non-zero."""


class InputClosedError(FatalError):
    """Raised when the terminal input reaches end of file."""

    def __init__(self, message: str = "Input closed."):
        super().__init__(message)
