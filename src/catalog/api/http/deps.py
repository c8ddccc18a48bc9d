"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import ProductRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the application-wide dependency container."""
    return request.app.state.app_dependencies


def get_product_repository(request: Request) -> ProductRepository:
    """Get the product repository instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.product_repository


def get_product_service(request: Request) -> ProductService:
    """Get the product service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.product_service
