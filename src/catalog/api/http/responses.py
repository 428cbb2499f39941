"""Projection of result envelopes and errors into JSON responses."""

from __future__ import annotations

from typing import Any, assert_never

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from pydantic import ValidationError
from starlette.responses import JSONResponse

from src.catalog.core.result import Failure, Result, Success, summarize
from src.catalog.entities.service.product import Product


def error_response(status_code: int, error: str) -> JSONResponse:
    """Uniform ``{"error", "status"}`` body used for every failure."""
    return JSONResponse(
        status_code=status_code, content={"error": error, "status": status_code}
    )


def validation_messages(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic error details into one message.

    Messages raised by our own validators are surfaced verbatim, without
    pydantic's "Value error, " prefix.
    """
    messages = []
    for err in errors:
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error is not None:
            messages.append(str(ctx_error))
            continue
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(messages)


def invariant_violation(exc: ValidationError) -> JSONResponse:
    return error_response(400, validation_messages(exc.errors()))


def product_body(product: Product) -> dict[str, Any]:
    return product.model_dump(mode="json")


def result_response(result: Result[Any], success_status: int = 200) -> JSONResponse:
    """Map a store result onto an HTTP response.

    Success becomes ``success_status`` with the product fields (if any) and
    the message; Failure carries its own status code.
    """
    logger.debug("result: {}", summarize(result))
    match result:
        case Success(value=Product() as product, message=message):
            content = {**product_body(product), "message": message}
        case Success(message=message):
            content = {"message": message}
        case Failure(status_code=status_code, error=error):
            return error_response(status_code, error)
        case _:
            assert_never(result)
    return JSONResponse(status_code=success_status, content=content)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Turn framework-level decoding errors into 400 failure bodies."""
    errors = list(exc.errors())
    path_errors = [e for e in errors if e.get("loc", ("",))[0] == "path"]
    if path_errors:
        return error_response(400, f"Invalid product id: {path_errors[0].get('input')}")
    return error_response(400, f"Invalid request body: {validation_messages(errors)}")
