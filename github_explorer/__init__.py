"""
GitHub Explorer - An interactive client for browsing GitHub users and their repositories.
"""

from .models import CachedUser, Repository, UserProfile
from .errors import GitHubExplorerError, HttpStatusError, TransportError
from .fetcher import GitHubFetcher
from .cache import UserCache
from .formatter import ReportFormatter
from .main import CommandLoop, main

__all__ = [
    'CachedUser',
    'Repository',
    'UserProfile',
    'GitHubExplorerError',
    'HttpStatusError',
    'TransportError',
    'GitHubFetcher',
    'UserCache',
    'ReportFormatter',
    'CommandLoop',
    'main'
]
