from __future__ import annotations

import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

import pytest

from github_explorer.errors import HttpStatusError
from github_explorer.models import Repository, UserProfile

OCTOCAT = UserProfile(
    login="octocat",
    public_repos=8,
    created_at="2011-01-25T18:44:36Z",
    followers=100,
    following=9,
)
OCTOCAT_REPOS = [
    Repository(name="Hello-World", html_url="https://github.com/octocat/Hello-World", description=None),
]
TORVALDS = UserProfile(
    login="torvalds",
    public_repos=7,
    created_at="2011-09-03T15:26:22Z",
    followers=200000,
    following=0,
)
TORVALDS_REPOS = [
    Repository(name="linux", html_url="https://github.com/torvalds/linux", description="Linux kernel source tree"),
    Repository(name="subsurface", html_url="https://github.com/torvalds/subsurface", description=None),
]


class FakeFetcher:
    """Records calls and serves canned users; unknown names get a 404."""

    def __init__(self, users: Dict[str, tuple], repo_errors: Dict[str, Exception] | None = None) -> None:
        self.users = users
        self.repo_errors = repo_errors or {}
        self.calls: List[tuple] = []

    def fetch_user(self, username: str) -> UserProfile:
        self.calls.append(("user", username))
        if username not in self.users:
            raise HttpStatusError(404, "Not Found")
        return self.users[username][0]

    def fetch_repos(self, username: str) -> List[Repository]:
        self.calls.append(("repos", username))
        if username in self.repo_errors:
            raise self.repo_errors[username]
        return list(self.users[username][1])


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher({"octocat": (OCTOCAT, OCTOCAT_REPOS), "torvalds": (TORVALDS, TORVALDS_REPOS)})


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Turn a list of lines into an input function that raises EOFError when exhausted."""

    def _make(lines: Iterable[str]) -> Callable[[str], str]:
        remaining = iter(lines)

        def _input(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return _input

    return _make


class StubGitHub:
    """Local HTTP server standing in for the GitHub API; records every request path."""

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, object]] = {}
        self.requests: List[str] = []
        stub = self

        class _Handler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:
                path = self.path.split("?", 1)[0]
                stub.requests.append(path)
                status, body = stub.routes.get(path, (404, {"message": "Not Found"}))
                payload = json.dumps(body).encode("utf-8")
                self.send_response(status)
                self.send_header("Content-Type", "application/json; charset=utf-8")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            def log_message(self, format: str, *args: object) -> None:
                pass

        self._server = HTTPServer(("127.0.0.1", 0), _Handler)
        self.base_url = f"http://127.0.0.1:{self._server.server_port}"
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    def add_user(self, login: str, repos: List[Dict[str, object]]) -> None:
        self.routes[f"/users/{login}"] = (200, {
            "login": login,
            "url": f"{self.base_url}/users/{login}",
            "repos_url": f"{self.base_url}/users/{login}/repos",
            "public_repos": len(repos),
            "created_at": "2011-01-25T18:44:36Z",
            "followers": 100,
            "following": 9,
        })
        self.routes[f"/users/{login}/repos"] = (200, [
            dict(repo, url=f"{self.base_url}/repos/{login}/{repo['name']}", full_name=f"{login}/{repo['name']}")
            for repo in repos
        ])

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._server.shutdown()
        self._server.server_close()


@pytest.fixture
def github_api() -> Iterator[StubGitHub]:
    stub = StubGitHub()
    stub.start()
    yield stub
    stub.stop()
