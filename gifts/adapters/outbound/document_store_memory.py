from __future__ import annotations

import asyncio
import copy
import uuid
from typing import Any, Dict, List, Optional, Sequence

from gifts.ports.outbound.document_store_port import (
    DELETE_FIELD,
    DocumentNotFound,
    DocumentStorePort,
    FieldFilter,
)


def _matches(doc: Dict[str, Any], flt: FieldFilter) -> bool:
    if flt.field not in doc:
        return False
    value = doc[flt.field]
    if flt.op == "==":
        return value == flt.value
    if flt.op == "array_contains":
        return isinstance(value, list) and flt.value in value
    raise ValueError(f"unsupported filter op: {flt.op}")


def _sort_key(field: str):
    # documents missing the field sort first, like an absent value in the hosted store
    def key(item):
        _, doc = item
        value = doc.get(field)
        return (value is not None, value)
    return key


class InMemoryDocumentStore(DocumentStorePort):
    """
    Process-local stand-in for the hosted document database.
    Documents are deep-copied on the way in and out so callers never share state with the store.
    """

    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = asyncio.Lock()

    def _col(self, collection: str) -> Dict[str, Dict[str, Any]]:
        return self._collections.setdefault(collection, {})

    @staticmethod
    def _out(doc_id: str, doc: Dict[str, Any]) -> Dict[str, Any]:
        out = copy.deepcopy(doc)
        out["id"] = doc_id
        return out

    @staticmethod
    def _body(data: Dict[str, Any]) -> Dict[str, Any]:
        body = copy.deepcopy(data)
        body.pop("id", None)
        return body

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        async with self._lock:
            self._col(collection)[doc_id] = self._body(data)
        return doc_id

    async def set(self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False) -> None:
        async with self._lock:
            col = self._col(collection)
            body = self._body(data)
            if merge and doc_id in col:
                col[doc_id].update(body)
            else:
                col[doc_id] = body

    async def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        async with self._lock:
            doc = self._col(collection).get(doc_id)
            return self._out(doc_id, doc) if doc is not None else None

    async def update(self, collection: str, doc_id: str, fields: Dict[str, Any]) -> None:
        async with self._lock:
            doc = self._col(collection).get(doc_id)
            if doc is None:
                raise DocumentNotFound(collection, doc_id)
            for name, value in fields.items():
                if value is DELETE_FIELD:
                    doc.pop(name, None)
                else:
                    doc[name] = copy.deepcopy(value)

    async def delete(self, collection: str, doc_id: str) -> bool:
        async with self._lock:
            return self._col(collection).pop(doc_id, None) is not None

    async def array_union(self, collection: str, doc_id: str, field: str, values: Sequence[Any]) -> None:
        async with self._lock:
            doc = self._col(collection).get(doc_id)
            if doc is None:
                raise DocumentNotFound(collection, doc_id)
            current = list(doc.get(field) or [])
            for v in values:
                if v not in current:
                    current.append(v)
            doc[field] = current

    async def query(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        async with self._lock:
            rows = [
                (doc_id, doc)
                for doc_id, doc in self._col(collection).items()
                if all(_matches(doc, f) for f in filters)
            ]
            if order_by:
                rows.sort(key=_sort_key(order_by), reverse=descending)
            if limit is not None:
                rows = rows[:limit]
            return [self._out(doc_id, doc) for doc_id, doc in rows]
