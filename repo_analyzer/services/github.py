import logging
from typing import Any, Iterator, Optional
from urllib.parse import quote

import requests

from repo_analyzer.core.config import Settings, settings
from repo_analyzer.core.errors import GitHubAPIError

logger = logging.getLogger(__name__)


def _repo_path(owner: str, repo: str) -> str:
    # owner/repo van como segmentos de ruta: nada de "?" o "#" sin escapar
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


class GitHubClient:
    """Cliente REST mínimo: un GET autenticado (si hay token) contra la API de GitHub."""

    def __init__(self, config: Settings, session: Optional[requests.Session] = None):
        self.base_url = config.GITHUB_API
        self.timeout = config.GITHUB_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/vnd.github.v3+json"
        # sin token también funciona, pero con menos cuota (60 req/h)
        if config.GITHUB_TOKEN:
            self.session.headers["Authorization"] = f"token {config.GITHUB_TOKEN}"

    def close(self) -> None:
        self.session.close()

    def gh_get(self, path: str, params: dict | None = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            r = self.session.get(url, params=params or {}, timeout=self.timeout)
        except requests.RequestException:
            logger.exception("GitHub request failed: GET %s", path)
            raise GitHubAPIError(None, path=path)
        if r.status_code >= 400:
            logger.warning("GitHub API error %s on GET %s", r.status_code, path)
            raise GitHubAPIError(r.status_code, r.headers, path=path)
        if r.status_code == 204 or not r.content:
            # /contributors de un repo vacío responde 204 sin cuerpo
            return None
        try:
            return r.json()
        except ValueError:
            logger.warning("GitHub returned a non-JSON body on GET %s", path)
            raise GitHubAPIError(None, path=path)

    def _get_list(self, path: str, params: dict) -> list:
        data = self.gh_get(path, params)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Expected a list from GET %s, got %s", path, type(data).__name__)
            raise GitHubAPIError(None, path=path)
        return data

    def get_repo(self, owner: str, repo: str) -> dict:
        path = _repo_path(owner, repo)
        data = self.gh_get(path)
        if not isinstance(data, dict):
            raise GitHubAPIError(None, path=path)
        return data

    def list_contributors(self, owner: str, repo: str, per_page: int = 10) -> list:
        return self._get_list(f"{_repo_path(owner, repo)}/contributors", {"per_page": per_page})

    def list_commits(self, owner: str, repo: str, per_page: int = 10) -> list:
        return self._get_list(f"{_repo_path(owner, repo)}/commits", {"per_page": per_page})


def get_github_client() -> Iterator[GitHubClient]:
    """Dependencia de FastAPI; en tests se sustituye con app.dependency_overrides."""
    gh = GitHubClient(settings)
    try:
        yield gh
    finally:
        gh.close()
