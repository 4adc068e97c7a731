from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # carga .env antes de tocar settings

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from repo_analyzer.core.config import settings
from repo_analyzer.core.errors import AnalyzerError, InvalidInput
from repo_analyzer.routers import analyze, health

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)8s %(message)s",
)
logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent / "repo_analyzer" / "public"

app = FastAPI(title="GitHub Repo Analyzer")


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AnalyzerError)
async def analyzer_error_handler(request: Request, exc: AnalyzerError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # cuerpo no-JSON o repoUrl que no es string: mismo trato que una URL ausente
    return await analyzer_error_handler(request, InvalidInput("GitHub repo URL is required."))


app.include_router(health.router, tags=["health"])
app.include_router(analyze.router, prefix="", tags=["analyze"])

# el frontend va al final para que no tape las rutas de la API
app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running at http://localhost:%s", settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)

# uvicorn main:app --reload --port 3000
