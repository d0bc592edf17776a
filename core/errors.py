"""Error hierarchy for the catalog store.

Every failure the store can surface derives from CatalogError so callers
can catch one type. Request handlers deliberately collapse both subclasses
into the same generic failure outcome; the distinction is kept here for
logging and for the store's own contract.
"""

from typing import Any


class CatalogError(Exception):
    """Base exception for all catalog store errors."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    def to_log_extra(self) -> dict[str, Any]:
        return {"error_code": self.code}


class RecordNotFoundError(CatalogError):
    """Requested identifier is absent from its collection."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} '{record_id}' not found", "RECORD_NOT_FOUND")
        self.kind = kind
        self.record_id = record_id

    def to_log_extra(self) -> dict[str, Any]:
        return {
            "error_code": self.code,
            "kind": self.kind,
            "record_id": self.record_id,
        }


class StoreError(CatalogError):
    """Connectivity, persistence or constraint failure in the store."""

    def __init__(self, message: str, operation: str):
        super().__init__(f"Store {operation} failed: {message}", "STORE_ERROR")
        self.operation = operation
