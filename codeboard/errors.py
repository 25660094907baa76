"""Exception types raised by Codeboard."""


class CodeboardError(Exception):
    """Base class for Codeboard errors"""
    pass


class FetchError(CodeboardError):
    """Raised when the leaderboard feed cannot be retrieved"""

    def __init__(self, message: str, source: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.source = source
        self.status_code = status_code


class CapabilityError(CodeboardError, PermissionError):
    """Raised when a read-only caller invokes a privileged operation"""
    pass
