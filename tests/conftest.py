"""
Pytest configuration: project root on sys.path and a fake GitHub client
so no test touches the network.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from main import app  # noqa: E402
from repo_analyzer.services.github import get_github_client  # noqa: E402


def make_commit(sha="a" * 40, message="Fix bug\n\nLonger body", author=None, html_url=None):
    return {
        "sha": sha,
        "commit": {"message": message, "author": author},
        "html_url": html_url or f"https://github.com/octocat/Hello-World/commit/{sha}",
    }


REPO_PAYLOAD = {
    "full_name": "octocat/Hello-World",
    "description": "My first repository on GitHub!",
    "stargazers_count": 80,
    "forks_count": 9,
    "open_issues_count": 0,
    "language": None,
    "created_at": "2011-01-26T19:01:12Z",
    "updated_at": "2011-01-26T19:14:43Z",
    "html_url": "https://github.com/octocat/Hello-World",
}

CONTRIBUTORS_PAYLOAD = [
    {
        "login": "octocat",
        "contributions": 32,
        "avatar_url": "https://github.com/images/error/octocat_happy.gif",
        "html_url": "https://github.com/octocat",
    }
]


class FakeGitHubClient:
    """Stand-in for GitHubClient; records calls and can raise on any lookup."""

    def __init__(self, repo=None, contributors=None, commits=None, error=None):
        self.repo = repo if repo is not None else dict(REPO_PAYLOAD)
        self.contributors = contributors if contributors is not None else list(CONTRIBUTORS_PAYLOAD)
        self.commits = commits if commits is not None else [
            make_commit(author={"name": "The Octocat", "date": "2012-03-06T23:06:50Z"})
        ]
        self.error = error
        self.calls = []

    def _call(self, name, owner, repo, result):
        self.calls.append((name, owner, repo))
        if self.error is not None:
            raise self.error
        return result

    def get_repo(self, owner, repo):
        return self._call("get_repo", owner, repo, self.repo)

    def list_contributors(self, owner, repo, per_page=10):
        return self._call("list_contributors", owner, repo, self.contributors)

    def list_commits(self, owner, repo, per_page=10):
        return self._call("list_commits", owner, repo, self.commits)


@pytest.fixture
def fake_github():
    return FakeGitHubClient()


@pytest.fixture
def client(fake_github):
    app.dependency_overrides[get_github_client] = lambda: fake_github
    yield TestClient(app)
    app.dependency_overrides.clear()
