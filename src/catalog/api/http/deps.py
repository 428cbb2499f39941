"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.entities.service.product import ProductStore


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies wired by the application at startup."""
    return request.app.state.app_dependencies


def get_product_store(request: Request) -> ProductStore:
    """Get the product store instance."""
    return get_app_dependencies(request).product_store
