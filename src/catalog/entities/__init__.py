"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model and request payload
- repository.py: Data access layer
"""

from .service.product import (
    InMemoryProductRepository,
    Product,
    ProductPayload,
    ProductRepository,
)

__all__ = [
    "Product",
    "ProductPayload",
    "ProductRepository",
    "InMemoryProductRepository",
]
