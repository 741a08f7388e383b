"""
Presentation module

This module contains the ReportFormatter class responsible for turning cached
users and search results into the line-oriented text shown in the terminal.
"""

from typing import Iterable, List, Sequence, Tuple

from .models import CachedUser, Repository


class ReportFormatter:
    """
    Compose terminal output for users and search results.

    Every block ends with a blank line so consecutive menu iterations stay
    visually separated.
    """

    def __init__(self, include_descriptions: bool = False) -> None:
        """
        Initialize the formatter.

        Args:
            include_descriptions: Append each repository's description, when it
                                  has one, to its line in the user report
        """
        self.include_descriptions = include_descriptions

    def format_user(self, user: CachedUser) -> str:
        """
        Build the report for one cached user.

        Args:
            user: Aggregate to render

        Returns:
            Header, profile counts and one line per repository
        """
        lines: List[str] = [
            f"=== User Info for {user.login} ===",
            f"Public repos: {user.public_repos}",
            f"Account created at: {user.created_at}",
            f"Followers: {user.followers}",
            f"Following: {user.following}",
            "Repositories:",
        ]
        lines.extend(self._format_repo(repo) for repo in user.repos)
        lines.append("")
        return "\n".join(lines)

    def format_listing(self, header: str, items: Iterable[str], empty_message: str) -> str:
        """Render ``header`` plus one ``- item`` line each, or ``empty_message`` alone."""
        items = list(items)
        if not items:
            return empty_message + "\n"
        lines = [header]
        lines.extend(f"- {item}" for item in items)
        lines.append("")
        return "\n".join(lines)

    def format_repo_matches(self, matches: Sequence[Tuple[str, Repository]]) -> str:
        return self.format_listing(
            "Matching repositories:",
            (f"{login}/{repo.name} -> {repo.html_url}" for login, repo in matches),
            "No matching repositories found.",
        )

    def _format_repo(self, repo: Repository) -> str:
        line = f"- {repo.name}: {repo.html_url}"
        if self.include_descriptions and repo.description:
            line += f" ({repo.description})"
        return line
