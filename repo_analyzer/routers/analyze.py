import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from repo_analyzer.core.errors import GitHubAPIError, UpstreamFailure
from repo_analyzer.services.github import GitHubClient, get_github_client
from repo_analyzer.services.mapping import MAX_ITEMS, build_analysis
from repo_analyzer.utils.repos import parse_repo_url
from repo_analyzer.utils.time import reset_time_str

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_FAILURE = "Failed to fetch repository data. Please check the URL and try again."


class AnalyzeRequest(BaseModel):
    repoUrl: Optional[str] = None


def describe_upstream_failure(err: GitHubAPIError, owner: str, repo: str) -> UpstreamFailure:
    """Traduce el error de GitHub al status + mensaje que ve el usuario."""
    if err.status == 404:
        return UpstreamFailure(f"Repository '{owner}/{repo}' not found.", 404)
    if err.status == 403:
        # 403 puede ser rate limit o repo privado; lo distingue la cabecera de cuota
        headers = {k.lower(): v for k, v in err.headers.items()}
        reset = headers.get("x-ratelimit-reset")
        if headers.get("x-ratelimit-remaining") == "0" and reset:
            try:
                when = reset_time_str(reset)
            except (ValueError, OverflowError, OSError):
                logger.warning("Unparseable X-RateLimit-Reset header: %r", reset)
            else:
                return UpstreamFailure(f"API rate limit exceeded. Please try again after {when}.", 403)
        return UpstreamFailure(
            "Forbidden access to repository. It might be private or require authentication.", 403
        )
    return UpstreamFailure(GENERIC_FAILURE, err.status or 500)


@router.post("/analyze-repo")
def analyze_repo(body: AnalyzeRequest, gh: GitHubClient = Depends(get_github_client)):
    owner, repo = parse_repo_url(body.repoUrl)
    logger.info("Analyzing %s/%s", owner, repo)

    # Tres llamadas en secuencia; si una falla, no se devuelve nada parcial
    try:
        repo_info = gh.get_repo(owner, repo)
        contributors = gh.list_contributors(owner, repo, per_page=MAX_ITEMS)
        commits = gh.list_commits(owner, repo, per_page=MAX_ITEMS)
    except GitHubAPIError as e:
        raise describe_upstream_failure(e, owner, repo) from e

    return build_analysis(repo_info, contributors, commits)
