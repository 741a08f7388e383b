"""
GitHub data fetching module.

This module handles the two GitHub API calls the explorer needs, the user
profile and the first page of the user's repositories, using PyGithub.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .errors import HttpStatusError, TransportError
from .models import Repository, UserProfile

# External libs
try:
    from github import Github, GithubException
except Exception as e:
    raise RuntimeError("PyGithub is required. Install with: pip install PyGithub") from e

# Set up logging
logger = logging.getLogger("github-explorer.fetcher")

DEFAULT_BASE_URL = "https://api.github.com"


def _status_error(exc: GithubException) -> HttpStatusError:
    data = exc.data
    if isinstance(data, dict):
        reason = str(data.get("message") or "")
    else:
        reason = str(data or "")
    return HttpStatusError(exc.status, reason)


def _repository(repo: Any) -> Repository:
    # list items are incomplete; raw_data would trigger GET /repos/{owner}/{name}
    return Repository.from_json({
        "name": repo.name,
        "html_url": repo.html_url,
        "description": repo.description,
    })


class GitHubFetcher:
    """
    Fetch user profiles and repository lists from GitHub using PyGithub.

    Requests are unauthenticated and are never retried (PyGithub's default
    retry policy is switched off). Only the first page of repositories is read.

    Args:
        base_url: API root, e.g. for GitHub Enterprise or a test server.
        client: Preconfigured ``Github`` instance; built from ``base_url`` if omitted.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, client: Optional[Any] = None) -> None:
        self.base_url = base_url
        try:
            self._g = client if client is not None else Github(base_url=base_url, retry=None)
            logger.debug("GitHub client initialized (base_url=%s)", base_url)
        except Exception as e:
            logger.error("Failed to initialize GitHub client: %s", e)
            raise RuntimeError(f"GitHub client initialization failed: {e}") from e
        # user handles resolved by fetch_user, consumed by fetch_repos
        self._handles: Dict[str, Any] = {}

    def fetch_user(self, username: str) -> UserProfile:
        """
        Fetch a user profile (``GET /users/{username}``).

        Args:
            username: GitHub login, used exactly as typed

        Returns:
            UserProfile built from the response body

        Raises:
            HttpStatusError: If GitHub answers with a non-2xx status
            TransportError: If the request fails or the body is malformed
        """
        logger.debug("GET /users/%s", username)
        try:
            user = self._g.get_user(username)
            profile = UserProfile.from_json(user.raw_data)
        except GithubException as e:
            logger.warning("User fetch for %s failed with status %s", username, e.status)
            raise _status_error(e) from e
        except requests.exceptions.RequestException as e:
            logger.warning("User fetch for %s failed: %s", username, e)
            raise TransportError(str(e)) from e
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed user response for %s: %s", username, e)
            raise TransportError(f"Malformed user response: {e}") from e

        self._handles[username] = user
        logger.info("Fetched profile for %s", profile.login)
        return profile

    def fetch_repos(self, username: str) -> List[Repository]:
        """
        Fetch the first page of a user's repositories (``GET /users/{username}/repos``).

        Reuses the user handle resolved by a preceding ``fetch_user`` call so
        the pair costs exactly two requests.

        Raises:
            HttpStatusError: If GitHub answers with a non-2xx status
            TransportError: If the request fails or the body is malformed
        """
        logger.debug("GET /users/%s/repos", username)
        try:
            user = self._handles.pop(username, None)
            if user is None:
                user = self._g.get_user(username)
            page = user.get_repos().get_page(0)
            repos = [_repository(r) for r in page]
        except GithubException as e:
            logger.warning("Repository fetch for %s failed with status %s", username, e.status)
            raise _status_error(e) from e
        except requests.exceptions.RequestException as e:
            logger.warning("Repository fetch for %s failed: %s", username, e)
            raise TransportError(str(e)) from e
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed repository response for %s: %s", username, e)
            raise TransportError(f"Malformed repository response: {e}") from e

        logger.info("Fetched %d repositories for %s", len(repos), username)
        return repos
