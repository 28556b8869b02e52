# ezelectronics/api/errors.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ezelectronics.exceptions import EZElectronicsError
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)


async def domain_error_handler(request: Request, exc: EZElectronicsError) -> JSONResponse:
    content = {"error": type(exc).__name__, "message": exc.message}

    if exc.status_code >= 500:
        # szczegoly bledu bazy tylko w logach, nie w odpowiedzi
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc!r}")
        content["details"] = exc.details

    return JSONResponse(status_code=exc.status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EZElectronicsError, domain_error_handler)
