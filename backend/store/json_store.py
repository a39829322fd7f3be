"""
JSON-file implementations of the metadata store and product catalog.

The catalog follows the PRODUCTS_DIR/{id}.json layout. Override rows live in a
single JSON list keyed by exact path. I/O and parse failures are raised as
StoreError so the resolver can tell "unavailable" from "not found".

File access runs in worker threads via asyncio.to_thread so the event loop is
never blocked. Override writes are read-modify-write under one process-wide
lock.
"""
from __future__ import annotations

import asyncio
import json
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from models import Category, MetadataOverride, ProductSummary

logger = logging.getLogger(__name__)

_OVERRIDES = TypeAdapter(list[MetadataOverride])
_CATEGORIES = TypeAdapter(list[Category])

_WRITE_LOCK = threading.Lock()


class StoreError(RuntimeError):
    """Backing file could not be read, parsed or written."""


class JsonMetadataStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, MetadataOverride]:
        if not self.path.exists():
            return {}
        try:
            rows = _OVERRIDES.validate_json(self.path.read_text())
        except (OSError, ValidationError) as exc:
            raise StoreError(f"Cannot read overrides from {self.path}: {exc}") from exc
        return {row.path: row for row in rows}

    def _write(self, rows: dict[str, MetadataOverride]) -> None:
        ordered = [rows[path] for path in sorted(rows)]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_OVERRIDES.dump_json(ordered, indent=2))
        except OSError as exc:
            raise StoreError(f"Cannot write overrides to {self.path}: {exc}") from exc

    def _upsert(self, override: MetadataOverride) -> tuple[MetadataOverride, bool]:
        with _WRITE_LOCK:
            rows = self._read()
            stored = override.model_copy(update={"updated_at": datetime.now(timezone.utc)})
            created = stored.path not in rows
            rows[stored.path] = stored
            self._write(rows)
        return stored, created

    def _delete(self, path: str) -> bool:
        with _WRITE_LOCK:
            rows = self._read()
            if rows.pop(path, None) is None:
                return False
            self._write(rows)
        return True

    async def find_override_by_path(self, path: str) -> MetadataOverride | None:
        rows = await asyncio.to_thread(self._read)
        return rows.get(path)

    async def list_overrides(self) -> list[MetadataOverride]:
        rows = await asyncio.to_thread(self._read)
        return [rows[path] for path in sorted(rows)]

    async def upsert_override(self, override: MetadataOverride) -> MetadataOverride:
        """Insert or replace the row for override.path, stamping updated_at."""
        stored, created = await asyncio.to_thread(self._upsert, override)
        logger.info("%s SEO override for %s", "Created" if created else "Updated", stored.path)
        return stored

    async def delete_override(self, path: str) -> bool:
        deleted = await asyncio.to_thread(self._delete, path)
        if deleted:
            logger.info("Deleted SEO override for %s", path)
        return deleted


class JsonProductCatalog:
    def __init__(self, products_dir: Path, categories_file: Path) -> None:
        self.products_dir = products_dir
        self.categories_file = categories_file

    def _product_path(self, product_id: str) -> Path | None:
        # Ids map to file names; anything that could escape the directory is unknown.
        if not product_id or "/" in product_id or "\\" in product_id or product_id.startswith("."):
            return None
        return self.products_dir / f"{product_id}.json"

    def _load_product(self, product_id: str) -> ProductSummary | None:
        path = self._product_path(product_id)
        if path is None or not path.exists():
            return None
        try:
            payload = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Cannot read product {product_id}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StoreError(f"Malformed product {product_id}: expected a JSON object")
        payload["id"] = product_id
        try:
            return ProductSummary.model_validate(payload)
        except ValidationError as exc:
            raise StoreError(f"Malformed product {product_id}: {exc}") from exc

    def _product_ids(self) -> list[str]:
        if not self.products_dir.exists():
            return []
        return [path.stem for path in sorted(self.products_dir.glob("*.json"))]

    def _load_categories(self) -> list[Category]:
        if not self.categories_file.exists():
            return []
        try:
            return _CATEGORIES.validate_json(self.categories_file.read_text())
        except (OSError, ValidationError) as exc:
            raise StoreError(f"Cannot read categories from {self.categories_file}: {exc}") from exc

    async def find_product_by_id(self, product_id: str) -> ProductSummary | None:
        return await asyncio.to_thread(self._load_product, product_id)

    async def list_product_ids(self) -> list[str]:
        return await asyncio.to_thread(self._product_ids)

    async def list_categories(self) -> list[Category]:
        return await asyncio.to_thread(self._load_categories)
