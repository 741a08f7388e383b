#!/usr/bin/env python3
"""
Main driver script for the GitHub explorer.

This script provides the interactive menu and coordinates the fetcher, cache
and formatter. Fetched users are kept in memory until the program exits.

Usage (example):
    python -m github_explorer.main
    python -m github_explorer.main --base-url https://github.example.com/api/v3 --verbose
"""

import argparse
import logging
import re
import sys
from typing import Callable, Dict, Optional

from .cache import UserCache
from .errors import HttpStatusError, TransportError
from .fetcher import DEFAULT_BASE_URL, GitHubFetcher
from .formatter import ReportFormatter
from .models import CachedUser

logger = logging.getLogger("github-explorer")

# 1-39 alphanumerics, '-' or '_', no leading '-' or '_'. Looser than GitHub, which rejects '_'
USERNAME_RE = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9\-_]{0,38}$")

MENU = "\n".join([
    "=== GitHub CLI Menu ===",
    "1. Fetch user info",
    "2. List cached users",
    "3. Search cached users",
    "4. Search cached repositories",
    "5. Exit",
])


class CommandLoop:
    """
    Menu-driven REPL over a session cache.

    One choice is handled to completion, network calls included, before the
    next one is read.

    Args:
        fetcher: Source of user profiles and repository lists
        cache: Session cache; a fresh one is created if omitted
        formatter: Output formatter; defaults to the plain report layout
        input_fn: Called with a prompt, returns one line of user input (default: input)
        output: Called with each block of text to display (default: print)
    """

    def __init__(
        self,
        fetcher: GitHubFetcher,
        cache: Optional[UserCache] = None,
        formatter: Optional[ReportFormatter] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache if cache is not None else UserCache()
        self.formatter = formatter or ReportFormatter()
        self._input = input_fn or input
        self._out = output or print
        self._handlers: Dict[str, Callable[[], bool]] = {
            "1": self.fetch_user,
            "2": self.list_users,
            "3": self.search_users,
            "4": self.search_repositories,
            "5": self.exit,
        }

    def run(self) -> None:
        """Loop until the user chooses Exit or input runs out."""
        while True:
            self._out(MENU)
            try:
                choice = self._read("Enter your choice: ")
                handler = self._handlers.get(choice)
                if handler is None:
                    self._out("Invalid choice. Please try again.\n")
                    continue
                if not handler():
                    break
            except EOFError:
                logger.debug("Input closed, leaving menu")
                self._out("")
                self.exit()
                break

    def _read(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def fetch_user(self) -> bool:
        username = self._read("Enter GitHub username: ")
        if not username:
            self._out("Username cannot be empty.\n")
            return True
        if not USERNAME_RE.match(username):
            self._out("Invalid GitHub username.\n")
            return True

        cached = self.cache.get(username)
        if cached is not None:
            self._out(f"User '{username}' is already cached.")
            self._out(self.formatter.format_user(cached))
            return True

        try:
            profile = self.fetcher.fetch_user(username)
        except HttpStatusError as e:
            self._out(f"Error fetching user: {e.status} {e.reason}\n")
            return True
        except TransportError as e:
            self._out(f"Exception occurred: {e.message}\n")
            return True

        try:
            repos = self.fetcher.fetch_repos(username)
        except HttpStatusError as e:
            self._out(f"Error fetching repos: {e.status} {e.reason}\n")
            return True
        except TransportError as e:
            self._out(f"Exception occurred: {e.message}\n")
            return True

        user = CachedUser.assemble(profile, repos)
        self.cache.put(username, user)
        self._out(self.formatter.format_user(user))
        return True

    def list_users(self) -> bool:
        self._out(self.formatter.format_listing("Cached users:", self.cache.keys(), "No users cached."))
        return True

    def search_users(self) -> bool:
        term = self._read("Enter search term for username: ")
        matches = self.cache.find_users(term)
        self._out(self.formatter.format_listing("Matching users:", matches, "No matching users found."))
        return True

    def search_repositories(self) -> bool:
        term = self._read("Enter search term for repository name: ")
        self._out(self.formatter.format_repo_matches(self.cache.find_repositories(term)))
        return True

    def exit(self) -> bool:
        self._out("Goodbye!")
        return False


def main() -> None:
    """
    Main entry point for the GitHub explorer.

    Parses the optional command line flags, configures logging and runs the
    interactive menu until the user exits.
    """
    parser = argparse.ArgumentParser(description="Explore GitHub users and repositories interactively.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="GitHub API root URL")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log API activity to stderr")
    parser.add_argument("--show-descriptions", action="store_true", help="Show repository descriptions in user info")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        fetcher = GitHubFetcher(base_url=args.base_url)
        loop = CommandLoop(fetcher, formatter=ReportFormatter(include_descriptions=args.show_descriptions))
        loop.run()
        logger.info("Session ended with %d cached users", len(loop.cache))

    except KeyboardInterrupt:
        logger.info("Session interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error("GitHub explorer failed: %s", e)
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
