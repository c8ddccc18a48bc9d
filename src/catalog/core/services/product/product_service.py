from decimal import Decimal

from loguru import logger

from src.catalog.core.services.product.results import ServiceResult
from src.catalog.entities.service.product import (
    MAX_PRICE,
    Product,
    ProductPayload,
    ProductRepository,
)


def _not_found_message(product_id: int) -> str:
    return f"Product with ID {product_id} not found"


class ProductService:
    """Business-rule gate in front of a product repository."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def get_all_products(self) -> list[Product]:
        return self._repository.list_all()

    def get_product_by_id(self, product_id: int) -> ServiceResult[Product]:
        product = self._repository.get(product_id)
        if product is None:
            return ServiceResult.not_found(_not_found_message(product_id))
        return ServiceResult.success(product)

    def create_product(self, payload: ProductPayload) -> ServiceResult[Product]:
        """Validate and store a new product.

        Args:
            payload: Caller-supplied product fields

        Returns:
            The stored product, or a validation error when the name is blank
            or the price is negative or above ``MAX_PRICE``
        """
        error = self._validate(payload)
        if error is not None:
            return ServiceResult.validation(error)

        product = self._repository.create(payload)
        logger.info("Created product {} ({})", product.id, product.name)
        return ServiceResult.success(product)

    def update_product(
        self, product_id: int, payload: ProductPayload
    ) -> ServiceResult[Product]:
        """Validate and apply an update to an existing product.

        Validation runs before the lookup, so an invalid payload for an
        unknown id reports the validation error rather than not-found.
        """
        error = self._validate(payload)
        if error is not None:
            return ServiceResult.validation(error)

        product = self._repository.update(product_id, payload)
        if product is None:
            return ServiceResult.not_found(_not_found_message(product_id))

        logger.info("Updated product {}", product_id)
        return ServiceResult.success(product)

    def delete_product(self, product_id: int) -> ServiceResult[bool]:
        if not self._repository.delete(product_id):
            return ServiceResult.not_found(_not_found_message(product_id))

        logger.info("Deleted product {}", product_id)
        return ServiceResult.success(True)

    def get_products_in_stock(self) -> list[Product]:
        return [p for p in self._repository.list_all() if p.stock > 0]

    def get_products_by_price_range(
        self,
        min_price: Decimal = Decimal(0),
        max_price: Decimal = MAX_PRICE,
    ) -> list[Product]:
        """Return products priced within ``[min_price, max_price]``, both ends inclusive."""
        return [
            p for p in self._repository.list_all() if min_price <= p.price <= max_price
        ]

    @staticmethod
    def _validate(payload: ProductPayload) -> str | None:
        if not payload.name or not payload.name.strip():
            return "Product name is required"
        if payload.price < 0:
            return "Product price cannot be negative"
        if payload.price > MAX_PRICE:
            return f"Product price cannot exceed {MAX_PRICE}"
        return None
