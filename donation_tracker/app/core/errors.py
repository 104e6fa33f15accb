"""
Exception handlers translating failures into JSON error bodies.

Every error response has the shape ``{"error": str}`` with an optional
``message`` or ``details`` field:

* request validation failures become 400, with dedicated messages for
  an unknown donation type and an unparseable date;
* ``DonationValidationError`` raised by the store becomes 400;
* ``HTTPException`` keeps its status and uses its detail as ``error``;
* unmatched routes (and unmatched methods on known paths) become 404;
* anything else is logged and becomes an opaque 500.  The exception
  text is only included outside production.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from donation_tracker.app.services.donation_service import DonationValidationError

logger = logging.getLogger(__name__)

# Field name in a failing request body -> error message reported for it.
FIELD_ERRORS = {
    "type": "Invalid donation type",
    "date": "Invalid date format",
}

# Detail strings Starlette uses when no route matches the request.
ROUTING_DETAILS = {"Not Found", "Method Not Allowed"}


def _summarize_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [
        {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in errors
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    for field, message in FIELD_ERRORS.items():
        for err in errors:
            loc = err.get("loc", ())
            if len(loc) == 2 and loc[0] == "body" and loc[1] == field and err.get("type") != "missing":
                return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": _summarize_errors(errors)},
    )


async def donation_validation_handler(request: Request, exc: DonationValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED) and exc.detail in ROUTING_DETAILS:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Not found",
                "message": f"Route {request.method} {request.url.path} not found",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content: Dict[str, Any] = {"error": "Internal server error"}
    if not request.app.state.settings.is_production:
        content["message"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DonationValidationError, donation_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
