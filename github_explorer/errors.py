"""
Exceptions raised by the GitHub explorer.

Both fetch failures are caught by the command loop, reported to the user,
and never abort the session.
"""


class GitHubExplorerError(Exception):
    """Base class for all explorer errors."""


class HttpStatusError(GitHubExplorerError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: int, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"{status} {reason}".rstrip())


class TransportError(GitHubExplorerError):
    """The request never produced a usable response (network or parse failure)."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
