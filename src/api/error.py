"""API error handling

Use case errors are raised as ClientError and rendered as
{"error": {"code": ..., "message": ..., "fields": {...}}}.
"""

import logging
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from libs.result import Error
from src.app.services.navigator import RedirectSignal

logger = logging.getLogger(__name__)


class ClientError(HTTPException):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=error.message)
        self.error = error


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.error.code} ({exc.error.reason})")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.error.to_dict()})


async def redirect_handler(request: Request, exc: RedirectSignal) -> RedirectResponse:
    return RedirectResponse(url=exc.path, status_code=status.HTTP_303_SEE_OTHER)
