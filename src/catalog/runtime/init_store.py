"""Product store initialization."""

from decimal import Decimal

from loguru import logger

from src.catalog.entities.service.product import ProductPayload, ProductRepository

SAMPLE_PRODUCTS: tuple[ProductPayload, ...] = (
    ProductPayload(
        name="Laptop", description="Gaming laptop", price=Decimal("1299.99"), stock=10
    ),
    ProductPayload(
        name="Mouse",
        description="Wireless gaming mouse",
        price=Decimal("79.99"),
        stock=25,
    ),
    ProductPayload(
        name="Keyboard",
        description="Mechanical keyboard",
        price=Decimal("149.99"),
        stock=15,
    ),
)


def init_store(repository: ProductRepository, seed_sample_data: bool = True) -> None:
    """Populate a fresh store with the sample catalog."""
    if not seed_sample_data:
        logger.info("Sample data seeding disabled; starting with an empty catalog")
        return

    products = repository.seed(SAMPLE_PRODUCTS)
    logger.info("Store initialized with {} sample products", len(products))
