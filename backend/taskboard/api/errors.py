import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.errors import InputError, TaskboardError
from ..schemas.common import ERROR

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    "input": status.HTTP_400_BAD_REQUEST,
    "validation": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "storage": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str, details=None) -> JSONResponse:
    body = {"status": ERROR, "message": message, "data": None}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def taskboard_error_handler(request: Request, exc: TaskboardError) -> JSONResponse:
    code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if code >= 500:
        logger.error("%s %s: %s", request.method, request.url.path, exc.message)
        # storage details stay in the log
        return error_response(code, "Internal server error")
    logger.warning("%s %s: %s", request.method, request.url.path, exc.message)
    return error_response(code, exc.message, exc.details if exc.kind == "input" else None)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()]
    return await taskboard_error_handler(request, InputError("Invalid request", {"errors": details}))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "not found"
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = "method not allowed"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s: unhandled error", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskboardError, taskboard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
