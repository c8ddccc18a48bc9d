"""Product repository interface and in-memory implementation.

The repository is the sole keeper of product state. It performs no business
validation; that belongs to the service layer.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable

from loguru import logger

from src.catalog.entities.core._base import utc_now
from src.catalog.entities.service.product.entity import Product, ProductPayload


class ProductRepository(ABC):
    """Abstract interface for product storage backends."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""
        pass

    @abstractmethod
    def get(self, product_id: int) -> Product | None:
        """Return the product with the given id.

        Args:
            product_id: Product identifier

        Returns:
            The product or None if no record has that id
        """
        pass

    @abstractmethod
    def create(self, payload: ProductPayload) -> Product:
        """Store a new product.

        Assigns the next identifier and both timestamps.

        Args:
            payload: Caller-supplied product fields

        Returns:
            The stored product
        """
        pass

    @abstractmethod
    def update(self, product_id: int, payload: ProductPayload) -> Product | None:
        """Overwrite the mutable fields of an existing product.

        The lookup and the write happen as one atomic step.

        Args:
            product_id: Product identifier
            payload: New name, description, price and stock

        Returns:
            The updated product or None if no record has that id
        """
        pass

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove a product.

        Returns:
            True if a record was removed
        """
        pass

    @abstractmethod
    def exists(self, product_id: int) -> bool:
        """Check whether a product with the given id is stored."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""
        pass

    def seed(self, payloads: Iterable[ProductPayload]) -> list[Product]:
        """Populate the store through the normal create path."""
        return [self.create(payload) for payload in payloads]


class InMemoryProductRepository(ProductRepository):
    """List-backed product storage guarded by a single lock.

    Lookups are linear scans. Every public method holds the lock for its
    whole duration, and stored instances never leave this class: callers
    receive copies.
    """

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def list_all(self) -> list[Product]:
        with self._lock:
            return [product.model_copy() for product in self._products]

    def get(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._find(product_id)
            return product.model_copy() if product is not None else None

    def create(self, payload: ProductPayload) -> Product:
        with self._lock:
            now = utc_now()
            product = Product(
                id=self._next_id,
                name=payload.name,
                description=payload.description,
                price=payload.price,
                stock=payload.stock,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._products.append(product)
            logger.debug("Stored product {}", product.id)
            return product.model_copy()

    def update(self, product_id: int, payload: ProductPayload) -> Product | None:
        with self._lock:
            product = self._find(product_id)
            if product is None:
                return None

            product.name = payload.name
            product.description = payload.description
            product.price = payload.price
            product.stock = payload.stock
            product.updated_at = utc_now()
            return product.model_copy()

    def delete(self, product_id: int) -> bool:
        with self._lock:
            product = self._find(product_id)
            if product is None:
                return False

            self._products.remove(product)
            logger.debug("Removed product {}", product_id)
            return True

    def exists(self, product_id: int) -> bool:
        with self._lock:
            return self._find(product_id) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def _find(self, product_id: int) -> Product | None:
        # Caller must hold self._lock
        return next((p for p in self._products if p.id == product_id), None)
