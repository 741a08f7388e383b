"""
Data models for the GitHub explorer.

This module contains the shared data structures used across all modules:
the raw shapes returned by the GitHub REST API and the aggregate that is
kept in the session cache.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple


def _count(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key!r} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{key!r} must be non-negative, got {value}")
    return value


def _text(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class UserProfile:
    """Profile fields from ``GET /users/{username}``."""
    login: str
    public_repos: int
    created_at: str
    followers: int
    following: int

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "UserProfile":
        """
        Build a profile from the decoded response body.

        ``created_at`` is kept verbatim; it is never parsed into a datetime.

        Raises:
            KeyError, TypeError, ValueError: If the body is not a user object
        """
        return cls(
            login=_text(data, "login"),
            public_repos=_count(data, "public_repos"),
            created_at=_text(data, "created_at"),
            followers=_count(data, "followers"),
            following=_count(data, "following"),
        )


@dataclass(frozen=True)
class Repository:
    """One element of ``GET /users/{username}/repos``."""
    name: str
    html_url: str
    description: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Repository":
        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise TypeError("'description' must be a string or null")
        return cls(
            name=_text(data, "name"),
            html_url=_text(data, "html_url"),
            description=description,
        )


@dataclass(frozen=True)
class CachedUser:
    """Profile plus repository list for one username, cached as a unit."""
    login: str
    public_repos: int
    created_at: str
    followers: int
    following: int
    repos: Tuple[Repository, ...] = ()

    @classmethod
    def assemble(cls, profile: UserProfile, repos: Sequence[Repository]) -> "CachedUser":
        """
        Combine a profile and its repository list.

        Args:
            profile: Result of the user fetch
            repos: Result of the repository fetch, in API response order

        Returns:
            Immutable aggregate ready for the cache
        """
        return cls(
            login=profile.login,
            public_repos=profile.public_repos,
            created_at=profile.created_at,
            followers=profile.followers,
            following=profile.following,
            repos=tuple(repos),
        )
