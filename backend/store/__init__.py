from .json_store import JsonMetadataStore, JsonProductCatalog, StoreError

__all__ = ["JsonMetadataStore", "JsonProductCatalog", "StoreError"]
