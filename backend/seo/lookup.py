"""
Collaborator interfaces and the explicit lookup result type.

Stores return the record or None, and raise only for genuine transport or
storage failures. `guarded_lookup` folds both outcomes into
Found | NotFound | Unavailable so callers branch on values, not exceptions.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from models import Category, MetadataOverride, ProductSummary

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Unavailable:
    reason: str


LookupResult = Found[T] | NotFound | Unavailable

ProductLookup = Callable[[], Awaitable[ProductSummary | None]]


class MetadataStore(Protocol):
    async def find_override_by_path(self, path: str) -> MetadataOverride | None: ...


class ProductCatalog(Protocol):
    async def find_product_by_id(self, product_id: str) -> ProductSummary | None: ...

    async def list_product_ids(self) -> list[str]: ...

    async def list_categories(self) -> list[Category]: ...


async def guarded_lookup(
    label: str,
    call: Callable[[], Awaitable[T | None]],
    *,
    timeout: float | None = None,
) -> LookupResult[T]:
    """Run one collaborator call; errors and timeouts become Unavailable and are logged."""
    try:
        if timeout is None:
            value = await call()
        else:
            try:
                value = await asyncio.wait_for(call(), timeout=timeout)
            except asyncio.TimeoutError:
                logger.warning("%s timed out after %ss, using fallback", label, timeout)
                return Unavailable(reason="timeout")
    except Exception as exc:
        logger.warning("%s failed, using fallback: %s", label, exc)
        return Unavailable(reason=str(exc) or type(exc).__name__)
    if value is None:
        return NotFound()
    return Found(value)
