"""
Proyecciones de las respuestas de GitHub a la forma que consume el frontend.

Solo se copian los campos que se muestran; nada se guarda entre peticiones.
"""

UNKNOWN = "Unknown"
MAX_ITEMS = 10


def map_repo_info(r: dict) -> dict:
    return {
        "name": r.get("full_name"),
        "description": r.get("description"),
        "stars": r.get("stargazers_count"),
        "forks": r.get("forks_count"),
        "openIssues": r.get("open_issues_count"),
        "language": r.get("language"),
        "createdAt": r.get("created_at"),
        "updatedAt": r.get("updated_at"),
        "url": r.get("html_url"),
    }


def map_contributor(c: dict) -> dict:
    return {
        "login": c.get("login"),
        "contributions": c.get("contributions"),
        "avatarUrl": c.get("avatar_url"),
        "profileUrl": c.get("html_url"),
    }


def map_commit(c: dict) -> dict:
    commit = c.get("commit") or {}
    author = commit.get("author")
    message = commit.get("message") or ""
    return {
        "sha": (c.get("sha") or "")[:7],  # short SHA
        "message": message.split("\n", 1)[0],
        "author": author.get("name") if author else UNKNOWN,
        "date": author.get("date") if author else UNKNOWN,
        "url": c.get("html_url"),
    }


def build_analysis(repo_info: dict, contributors: list, commits: list) -> dict:
    return {
        "repoInfo": map_repo_info(repo_info),
        "contributors": [map_contributor(c) for c in contributors[:MAX_ITEMS]],
        "commits": [map_commit(c) for c in commits[:MAX_ITEMS]],
    }
