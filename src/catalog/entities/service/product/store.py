"""In-memory, thread-safe product store."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterable

from loguru import logger

from src.catalog.core.result import Failure, Result, Success
from src.catalog.entities.service.product.entity import Product


def default_seed() -> list[Product]:
    """Sample products a freshly started catalog is populated with."""
    return [
        Product(
            id=1,
            name="Laptop Pro",
            description="High-performance laptop",
            price=1299.99,
            stock=10,
        ),
        Product(
            id=2,
            name="Wireless Mouse",
            description="Ergonomic wireless mouse",
            price=49.99,
            stock=50,
        ),
        Product(
            id=3,
            name="Mechanical Keyboard",
            description="Tactile switches, RGB backlight",
            price=129.99,
            stock=25,
        ),
    ]


def _not_found(product_id: int) -> Failure:
    return Failure(404, f"entity with id {product_id} not found")


class ProductStore:
    """Authoritative mapping from identity to product.

    Every operation returns a ``Result``. A missing identity is reported as
    ``Failure(404, ...)`` and never raised. One lock guards both the mapping
    and the identity counter. It is held for a single map access or a single
    counter increment, never while a product is validated, so each operation
    is atomic with respect to every other.

    Identities are minted from a monotonically increasing counter that
    starts above every seed identity and are never reused, even after a
    delete.
    """

    def __init__(self, seed: Iterable[Product] | None = None) -> None:
        self._lock = threading.Lock()
        self._products: dict[int, Product] = {}

        seed_products = default_seed() if seed is None else list(seed)
        start = max((p.id for p in seed_products if p.id is not None), default=0) + 1
        self._ids = itertools.count(start)

        for product in seed_products:
            if product.id is None:
                product = product.with_id(next(self._ids))
            self._products[product.id] = product

        logger.debug("Product store initialized with {} products", len(self._products))

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._products

    def list_all(self) -> Result[list[Product]]:
        """Snapshot of every stored product, in no particular order."""
        with self._lock:
            products = list(self._products.values())
        logger.debug("list_all() -> {} products", len(products))
        return Success(products)

    def get(self, product_id: int) -> Result[Product]:
        with self._lock:
            product = self._products.get(product_id)
        if product is None:
            return _not_found(product_id)
        return Success(product)

    def create(self, candidate: Product) -> Result[Product]:
        """Store ``candidate`` under a freshly minted identity.

        Any identity already on the candidate is ignored.
        """
        with self._lock:
            product_id = next(self._ids)
        product = candidate.with_id(product_id)
        with self._lock:
            self._products[product_id] = product
        logger.bind(product_id=product.id).info("product.created: {}", product.name)
        return Success(product, "created")

    def update(self, product_id: int, candidate: Product) -> Result[Product]:
        """Replace the product stored under ``product_id``.

        The replacement keeps ``product_id`` whatever identity the candidate
        carries.
        """
        replacement = candidate.with_id(product_id)
        with self._lock:
            if product_id not in self._products:
                return _not_found(product_id)
            self._products[product_id] = replacement
        logger.bind(product_id=product_id).info("product.updated: {}", replacement.name)
        return Success(replacement, "updated")

    def delete(self, product_id: int) -> Result[None]:
        with self._lock:
            removed = self._products.pop(product_id, None)
        if removed is None:
            return _not_found(product_id)
        logger.bind(product_id=product_id).info("product.deleted")
        return Success(None, "deleted")
