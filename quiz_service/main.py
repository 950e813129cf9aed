# quiz_service/main.py
import logging
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from quiz_service.api.quiz_routes import router as quiz_router
from quiz_service.config import SERVICE_NAME, SERVICE_VERSION, Settings
from quiz_service.errors import register_exception_handlers
from quiz_service.llm_client import GeminiClient
from quiz_service.quiz_manager import QuizManager, TextGenerator

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, generator: Optional[TextGenerator] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title=SERVICE_NAME, version=SERVICE_VERSION)
    app.state.settings = settings
    app.state.quiz_manager = QuizManager(generator or GeminiClient(settings))

    # browser frontends call the API directly
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app, settings)

    @app.get("/", response_class=PlainTextResponse)
    async def wake():
        return f"Server awake - {SERVICE_NAME}"

    @app.get("/health")
    async def health():
        return {
            "status": "OK",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    app.include_router(quiz_router)
    return app


def run() -> None:
    settings = Settings.from_env()
    app = create_app(settings)
    logger.info("%s listening on http://localhost:%d", SERVICE_NAME, settings.port)
    logger.info("Health check: http://localhost:%d/health", settings.port)
    logger.info("AI endpoint: http://localhost:%d/generate-questions", settings.port)
    logger.info("Environment: %s", settings.environment)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
