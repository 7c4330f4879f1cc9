"""Exception hierarchy for path-nice.

Filesystem failures are not wrapped: they surface as the ``OSError`` the
filesystem implementation raised. Only errors detected by path-nice itself
derive from ``PathNiceError``.
"""

from __future__ import annotations


class PathNiceError(Exception):
    """Base exception for all errors raised by path-nice itself."""


class PathArgumentError(PathNiceError, TypeError):
    """Invalid call shape, e.g. calling a path module with no arguments."""


class IncompatiblePathError(PathNiceError, ValueError):
    """Two path values bound to different path or filesystem implementations.

    Attributes:
        expected: Description of the binding in use
        actual: Description of the binding of the rejected value
    """

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            "The input PathNice uses an underlying path or fs implementation that is "
            f"different from the one currently in use (expected {expected}, got {actual})."
        )


class PathConflictError(PathNiceError):
    """An existing filesystem entry has the wrong kind for the requested operation.

    Attributes:
        path: The conflicting path
        operation: Name of the helper that detected the conflict
    """

    def __init__(self, operation: str, path: str, reason: str) -> None:
        self.operation = operation
        self.path = path
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        return f".{self.operation}(): {self.path} {self.reason}"


class UnsupportedFileSystemError(PathNiceError):
    """An operation that only works on the real filesystem was asked of another one.

    Attributes:
        operation: Name of the refused method
        fs: The filesystem the path value is bound to
    """

    def __init__(self, operation: str, fs: object) -> None:
        self.operation = operation
        self.fs = fs
        super().__init__(
            f".{operation}(): the path is bound to {type(fs).__name__}, but {operation} "
            "only works on the real filesystem. Pass force_even_different_fs=True if "
            "you are sure the operation makes sense."
        )
