"""Core services exports."""

# Product Services
from .product.product_service import ProductService
from .product.results import ErrorKind, ServiceError, ServiceResult

__all__ = [
    # Product Services
    "ProductService",
    # Results
    "ErrorKind",
    "ServiceError",
    "ServiceResult",
]
