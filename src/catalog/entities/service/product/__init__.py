"""Entity package: Product."""

from .entity import Product
from .store import ProductStore, default_seed

__all__ = ["Product", "ProductStore", "default_seed"]
