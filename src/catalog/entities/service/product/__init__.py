"""Entity package: Product."""

from .entity import MAX_PRICE, Price, Product, ProductPayload
from .repository import InMemoryProductRepository, ProductRepository

__all__ = [
    "MAX_PRICE",
    "Price",
    "Product",
    "ProductPayload",
    "ProductRepository",
    "InMemoryProductRepository",
]
