"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.model.cart import CartManager
from storefront.domain.repository.cart_storage import CartStorage
from storefront.infrastructure.config import Settings, load_settings
from storefront.infrastructure.persistence.in_memory_storage import InMemoryStorage
from storefront.infrastructure.persistence.json_file_storage import JsonFileStorage
from storefront.infrastructure.persistence.static_product_repository import (
    StaticProductRepository,
)


def settings() -> Settings:
    return load_settings()


def product_repository() -> StaticProductRepository:
    return StaticProductRepository()


def cart_storage(config: Settings | None = None) -> CartStorage:
    config = config or settings()
    if config.storage_backend == "memory":
        return InMemoryStorage()
    return JsonFileStorage(config.storage_path)


def cart_manager(config: Settings | None = None) -> CartManager:
    return CartManager(cart_storage(config))
