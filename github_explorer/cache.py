"""
Session cache of fetched users.

Entries live for the lifetime of the process. Keys are usernames exactly as
typed; no case normalization is applied, so "Octocat" and "octocat" are
separate entries.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .models import CachedUser, Repository

logger = logging.getLogger("github-explorer.cache")


class UserCache:
    """Insert-only in-memory mapping of username -> CachedUser."""

    def __init__(self) -> None:
        self._users: Dict[str, CachedUser] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._users

    def __len__(self) -> int:
        return len(self._users)

    def get(self, key: str) -> Optional[CachedUser]:
        return self._users.get(key)

    def put(self, key: str, value: CachedUser) -> None:
        """
        Insert a newly fetched user.

        Raises:
            ValueError: If ``key`` is already cached; entries are never replaced
        """
        if key in self._users:
            raise ValueError(f"User '{key}' is already cached")
        self._users[key] = value
        logger.debug("Cached %s (%d repositories)", key, len(value.repos))

    def keys(self) -> List[str]:
        return list(self._users)

    def values(self) -> List[CachedUser]:
        return list(self._users.values())

    def find_users(self, term: str) -> List[str]:
        """Return cached usernames containing ``term``, ignoring case."""
        needle = term.lower()
        return [key for key in self._users if needle in key.lower()]

    def find_repositories(self, term: str) -> List[Tuple[str, Repository]]:
        """
        Search repository names across every cached user.

        Args:
            term: Substring to look for, case-insensitive

        Returns:
            (login, repository) pairs in cache order, then repository order
        """
        needle = term.lower()
        return [
            (user.login, repo)
            for user in self._users.values()
            for repo in user.repos
            if needle in repo.name.lower()
        ]
