from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Protocol, Sequence

FilterOp = Literal["==", "array_contains"]


class DocumentNotFound(Exception):
    """Raised by `update`/`array_union` when the target document does not exist."""

    def __init__(self, collection: str, doc_id: str):
        super().__init__(f"{collection}/{doc_id} not found")
        self.collection = collection
        self.doc_id = doc_id


class _DeleteField:
    def __repr__(self) -> str:
        return "DELETE_FIELD"


# Sentinel value for `update`: removes the field from the document.
DELETE_FIELD = _DeleteField()


@dataclass(frozen=True)
class FieldFilter:
    field: str
    op: FilterOp
    value: Any


class DocumentStorePort(Protocol):
    """
    Outbound port to the hosted document database.
    Documents are plain dicts; the id is returned alongside under the `id` key and is not stored in the body.
    """

    async def add(self, collection: str, data: Dict[str, Any]) -> str: ...

    async def set(self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False) -> None: ...

    async def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]: ...

    async def update(self, collection: str, doc_id: str, fields: Dict[str, Any]) -> None: ...

    async def delete(self, collection: str, doc_id: str) -> bool: ...

    async def array_union(self, collection: str, doc_id: str, field: str, values: Sequence[Any]) -> None: ...

    async def query(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]: ...
