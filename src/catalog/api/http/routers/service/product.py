"""Product API router with CRUD operations and filtered views."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from loguru import logger

from src.catalog.api.http.deps import get_product_service
from src.catalog.core.services import ErrorKind, ProductService, ServiceResult
from src.catalog.entities.service.product import MAX_PRICE, Product, ProductPayload

T = TypeVar("T")

INTERNAL_ERROR_DETAIL = "Internal server error"

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

router = APIRouter()


@contextmanager
def _handle_unexpected(
    operation: str, product_id: int | None = None
) -> Iterator[None]:
    """Turn any unexpected failure into an opaque 500, logging the original."""
    try:
        yield
    except HTTPException:
        raise
    except Exception as exc:
        target = f" for product {product_id}" if product_id is not None else ""
        logger.bind(operation=operation, product_id=product_id).exception(
            "Unexpected error in {}{}", operation, target
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL,
        ) from exc


def _unwrap(result: ServiceResult[T]) -> T:
    if result.error is not None:
        raise HTTPException(
            status_code=_STATUS_BY_KIND[result.error.kind],
            detail=result.error.message,
        )
    return result.value


# Static paths come before "/{product_id}" so they are matched first.


@router.get("/in-stock", response_model=list[Product])
def list_products_in_stock(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List products with a positive stock quantity."""
    with _handle_unexpected("list_products_in_stock"):
        return service.get_products_in_stock()


@router.get("/price-range", response_model=list[Product])
def list_products_by_price_range(
    min_price: Decimal = Query(default=Decimal(0), alias="minPrice"),
    max_price: Decimal = Query(default=MAX_PRICE, alias="maxPrice"),
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List products priced between minPrice and maxPrice, inclusive."""
    with _handle_unexpected("list_products_by_price_range"):
        return service.get_products_by_price_range(min_price, max_price)


@router.get("", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    with _handle_unexpected("list_products"):
        return service.get_all_products()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductPayload,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    with _handle_unexpected("create_product"):
        product = _unwrap(service.create_product(payload))
        response.headers["Location"] = str(
            request.url_for("get_product", product_id=product.id)
        )
        return product


@router.get("/{product_id:int}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    with _handle_unexpected("get_product", product_id):
        return _unwrap(service.get_product_by_id(product_id))


@router.put("/{product_id:int}", response_model=Product)
def update_product(
    product_id: int,
    payload: ProductPayload,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Update a product."""
    with _handle_unexpected("update_product", product_id):
        return _unwrap(service.update_product(product_id, payload))


@router.delete("/{product_id:int}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product."""
    with _handle_unexpected("delete_product", product_id):
        _unwrap(service.delete_product(product_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)
