# repo_analyzer/utils/repos.py
import re
from typing import Tuple

from repo_analyzer.core.errors import InvalidInput

# github.com/<owner>/<repo>, con esquema y www opcionales y "/" final tolerada;
# owner y repo solo con los caracteres que GitHub admite en nombres
REPO_URL_RE = re.compile(r"^(?:https?://)?(?:www\.)?github\.com/([\w.-]+)/([\w.-]+?)/?$", re.IGNORECASE | re.ASCII)


def parse_repo_url(repo_url: str | None) -> Tuple[str, str]:
    """
    Extrae (owner, repo) de una URL de repositorio de GitHub.
    Lanza InvalidInput si falta la URL o no encaja con el patrón.
    """
    if not repo_url or not repo_url.strip():
        raise InvalidInput("GitHub repo URL is required.")

    m = REPO_URL_RE.match(repo_url.strip())
    if not m:
        raise InvalidInput("Invalid GitHub repo URL format.")

    owner, repo = m.group(1), m.group(2)
    if repo.lower().endswith(".git"):
        repo = repo[:-4]
    if not repo:
        raise InvalidInput("Invalid GitHub repo URL format.")
    return owner, repo
