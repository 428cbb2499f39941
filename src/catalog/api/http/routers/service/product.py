"""Product API router with CRUD operations."""

from typing import Any, assert_never

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError
from starlette.responses import JSONResponse

from src.catalog.api.http.deps import get_product_store
from src.catalog.api.http.responses import (
    error_response,
    invariant_violation,
    product_body,
    result_response,
)
from src.catalog.core.result import Failure, Success
from src.catalog.entities.service.product import Product, ProductStore

router = APIRouter(prefix="/products", tags=["products"])

_PRODUCT_FIELDS = ("name", "description", "price", "stock")


def decode_product(payload: dict[str, Any]) -> Product:
    """Build a candidate product from a decoded request body.

    Any ``id`` in the body is ignored; identities are owned by the store.

    Raises:
        ValidationError: If a field is missing, mistyped or breaks an invariant.
    """
    return Product.model_validate(
        {key: payload[key] for key in _PRODUCT_FIELDS if key in payload}
    )


@router.get("")
@router.get("/", include_in_schema=False)
def list_products(store: ProductStore = Depends(get_product_store)) -> JSONResponse:
    """List all products."""
    result = store.list_all()
    match result:
        case Success(value=products):
            data = [product_body(p) for p in products]
            return JSONResponse({"data": data, "count": len(data)})
        case Failure(status_code=status_code, error=error):
            return error_response(status_code, error)
        case _:
            assert_never(result)


@router.get("/{item_id}")
def get_product(
    item_id: int,
    store: ProductStore = Depends(get_product_store),
) -> JSONResponse:
    """Get a product by ID."""
    return result_response(store.get(item_id))


@router.post("")
@router.post("/", include_in_schema=False)
def create_product(
    payload: dict[str, Any] = Body(...),
    store: ProductStore = Depends(get_product_store),
) -> JSONResponse:
    """Create a new product."""
    try:
        candidate = decode_product(payload)
    except ValidationError as exc:
        return invariant_violation(exc)
    return result_response(store.create(candidate), success_status=201)


@router.put("/{item_id}")
def update_product(
    item_id: int,
    payload: dict[str, Any] = Body(...),
    store: ProductStore = Depends(get_product_store),
) -> JSONResponse:
    """Replace a product."""
    try:
        candidate = decode_product(payload)
    except ValidationError as exc:
        return invariant_violation(exc)
    return result_response(store.update(item_id, candidate))


@router.delete("/{item_id}")
def delete_product(
    item_id: int,
    store: ProductStore = Depends(get_product_store),
) -> JSONResponse:
    """Delete a product."""
    return result_response(store.delete(item_id))


@router.put("", include_in_schema=False)
@router.put("/", include_in_schema=False)
@router.delete("", include_in_schema=False)
@router.delete("/", include_in_schema=False)
def missing_product_id() -> JSONResponse:
    """Reject item operations addressed to the collection."""
    return error_response(400, "Missing product id in path")
