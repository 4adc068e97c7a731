import os
from dataclasses import dataclass, field
from typing import List


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()] or ["*"]


@dataclass(frozen=True)
class Settings:
    PORT: int = 3000
    GITHUB_TOKEN: str = ""
    GITHUB_API: str = "https://api.github.com"
    GITHUB_TIMEOUT: float = 20.0
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Lee la configuración del entorno (el .env ya debe estar cargado)."""
        return cls(
            PORT=int(os.getenv("PORT", "3000")),
            GITHUB_TOKEN=os.getenv("GITHUB_TOKEN", "").strip(),
            GITHUB_API=os.getenv("GITHUB_API", "https://api.github.com").rstrip("/"),
            GITHUB_TIMEOUT=float(os.getenv("GITHUB_TIMEOUT", "20")),
            CORS_ORIGINS=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


settings = Settings.from_env()
