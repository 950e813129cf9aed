# quiz_service/errors.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quiz_service.config import Settings

logger = logging.getLogger(__name__)

AVAILABLE_ENDPOINTS: List[str] = ["POST /generate-questions", "GET /health"]


def error_payload(error: str, details: Any = None, **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": False, "error": error}
    if details is not None:
        payload["details"] = details
    payload.update(extra)
    return payload


class QuizServiceError(Exception):
    """Base error for the quiz service.

    Raised from the quiz manager or the route and turned into a
    ``{"success": false, ...}`` envelope by the registered handlers.
    """

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ClientInputError(QuizServiceError):
    """Required request fields are missing or invalid."""

    status_code = 400

    @property
    def public_message(self) -> str:
        return self.message


class ModelServiceError(QuizServiceError):
    """The text-generation service is unreachable or answered with an error."""

    status_code = 503
    public_message = "AI service is currently unavailable"


class ParseError(QuizServiceError):
    """The model reply could not be turned into quiz questions."""

    status_code = 500
    public_message = "Could not process AI response"


class NoJsonFound(ParseError):
    pass


class MalformedJson(ParseError):
    pass


class InvalidShape(ParseError):
    pass


class NoValidQuestions(ParseError):
    pass


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the handlers that map every failure to the response envelope."""

    @app.exception_handler(ClientInputError)
    async def _client_input_handler(_request: Request, exc: ClientInputError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(exc.public_message, exc.details),
        )

    @app.exception_handler(ModelServiceError)
    async def _model_service_handler(_request: Request, exc: ModelServiceError) -> JSONResponse:
        # upstream detail stays in the server log
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(exc.public_message, "Please try again later"),
        )

    @app.exception_handler(ParseError)
    async def _parse_error_handler(_request: Request, exc: ParseError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(exc.public_message, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        details = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")} for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content=error_payload("invalid request body", details))

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # unknown method on a known path is reported like an unknown path
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content=error_payload("Endpoint not found", available=AVAILABLE_ENDPOINTS),
            )
        detail: Optional[Any] = getattr(exc, "detail", None)
        error = detail if isinstance(detail, str) else "Request failed"
        return JSONResponse(status_code=exc.status_code, content=error_payload(error))

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error: %s", exc)
        details = str(exc) if settings.expose_error_details else None
        return JSONResponse(status_code=500, content=error_payload("Internal server error", details))
