"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Immutable domain model with its invariants
- store.py: Concurrency-safe storage returning result envelopes
"""

from .service.product import Product, ProductStore

__all__ = ["Product", "ProductStore"]
