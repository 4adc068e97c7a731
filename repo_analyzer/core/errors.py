"""
Errores de frontera del analizador.

Todos terminan en la respuesta HTTP como {"error": message} con su status_code
(ver el handler registrado en main.py).
"""

from typing import Mapping, Optional


class AnalyzerError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(AnalyzerError):
    """URL ausente o con formato inválido (siempre 400)."""

    status_code = 400


class UpstreamFailure(AnalyzerError):
    """Fallo de la API de GitHub, ya traducido a status + mensaje."""


class GitHubAPIError(Exception):
    """
    Respuesta no-2xx (o fallo de transporte) de la API de GitHub.
    `status` es None cuando no hubo respuesta (DNS, timeout, conexión rechazada).
    """

    def __init__(self, status: Optional[int], headers: Optional[Mapping[str, str]] = None, path: str = ""):
        self.status = status
        self.headers = dict(headers or {})
        self.path = path
        super().__init__(f"GitHub API error {status} on {path or '?'}")
