from dataclasses import dataclass

from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import ProductRepository


@dataclass
class ApplicationDependencies:
    product_repository: ProductRepository
    product_service: ProductService
