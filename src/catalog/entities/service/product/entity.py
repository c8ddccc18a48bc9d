"""Entity: Product."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import AfterValidator, Field

from src.catalog.entities.core._base import CamelModel, Entity

# Largest value of a 96-bit scaled decimal. No price may exceed it, so it also
# closes an unbounded price-range query.
MAX_PRICE = Decimal("79228162514264337593543950335")


def _drop_negative_zero(value: Decimal) -> Decimal:
    return value.copy_abs() if value.is_zero() else value


# Serialized by pydantic as an exact decimal string, e.g. "1299.99".
Price = Annotated[Decimal, AfterValidator(_drop_negative_zero)]


class ProductPayload(CamelModel):
    """Caller-supplied product fields for create and update requests.

    Server-assigned fields (``id``, ``createdAt``, ``updatedAt``) are not part
    of the payload and are dropped if a client sends them. Business rules are
    checked by the service layer, not here.
    """

    name: str = Field(default="", description="Product name")
    description: str | None = Field(default=None, description="Free-form description")
    price: Price = Field(default=Decimal(0), description="Unit price")
    stock: int = Field(default=0, description="Quantity on hand")


class Product(Entity):
    """Product entity representing a catalog item.

    Instances are owned by the repository, which alone assigns ``id`` and the
    timestamps. Anything handed out to callers is a copy.
    """

    name: str = Field(description="Product name")
    description: str | None = Field(default=None, description="Free-form description")
    price: Price = Field(default=Decimal(0), description="Unit price")
    stock: int = Field(default=0, description="Quantity on hand")

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.stock == other.stock
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
            self.stock,
        ))
