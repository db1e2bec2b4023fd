import logging
from typing import Dict, Optional

from fastapi import APIRouter, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .errors import InvalidInput, MethodNotAllowed, MissingConfiguration, RelayError
from .relay import relay_query

logger = logging.getLogger(__name__)

router = APIRouter()

RELAY_PATH = "/api/connections"
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
INTERNAL_ERROR = "An internal server error occurred."


def cors_headers(settings: Settings) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.FRONTEND_ORIGIN,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Max-Age": "86400",
    }


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _error_response(
    status_code: int,
    error: str,
    settings: Settings,
    headers: Dict[str, str],
    details: Optional[str] = None,
) -> JSONResponse:
    content = {"error": error}
    # Diagnostic detail only leaves the process outside production
    if details and not settings.is_production:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def _read_user_prompt(request: Request) -> str:
    try:
        payload = await request.json()
    except ValueError:
        raise InvalidInput("Request body is not valid JSON")
    user_prompt = payload.get("userPrompt") if isinstance(payload, dict) else None
    if not isinstance(user_prompt, str) or not user_prompt.strip():
        raise InvalidInput()
    return user_prompt


async def relay_http_error(request: Request, exc: StarletteHTTPException):
    # Verbs outside ALL_METHODS are rejected by the router before reaching relay()
    if exc.status_code == 405 and request.url.path == RELAY_PATH:
        settings = get_settings(request)
        return _error_response(405, MethodNotAllowed.message, settings, cors_headers(settings))
    return await http_exception_handler(request, exc)


@router.get("/healthz")
def healthz():
    return {"status": "ok"}


@router.api_route(RELAY_PATH, methods=ALL_METHODS)
async def relay(request: Request):
    settings = get_settings(request)
    headers = cors_headers(settings)

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=headers)

    try:
        if request.method != "POST":
            raise MethodNotAllowed()
        user_prompt = await _read_user_prompt(request)

        missing = settings.missing_secrets()
        if missing:
            logger.error("Missing environment variables: %s", ", ".join(missing))
            raise MissingConfiguration(missing)

        result = await run_in_threadpool(relay_query, user_prompt, settings)
    except (InvalidInput, MethodNotAllowed) as e:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, e)
        return _error_response(e.status_code, e.message, settings, headers)
    except MissingConfiguration as e:
        return _error_response(e.status_code, e.message, settings, headers, details=str(e))
    except RelayError as e:
        logger.exception("Relay error: %s", e)
        return _error_response(e.status_code, INTERNAL_ERROR, settings, headers, details=str(e))
    except Exception as e:
        logger.exception("Unhandled error in relay: %s", e)
        return _error_response(500, INTERNAL_ERROR, settings, headers, details=str(e) or "Unknown error")

    return JSONResponse(status_code=200, content=result, headers=headers)
