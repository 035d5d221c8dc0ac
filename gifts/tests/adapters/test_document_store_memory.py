from datetime import datetime, timedelta, timezone

import pytest

from gifts.ports.outbound.document_store_port import DELETE_FIELD, DocumentNotFound, FieldFilter

T0 = datetime(2025, 11, 1, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_add_and_get_roundtrip_returns_id(document_store):
    doc_id = await document_store.add("events", {"name": "Party", "member_ids": ["a"]})

    doc = await document_store.get("events", doc_id)

    assert doc == {"id": doc_id, "name": "Party", "member_ids": ["a"]}


@pytest.mark.asyncio
async def test_get_returns_copies(document_store):
    doc_id = await document_store.add("events", {"member_ids": ["a"]})

    doc = await document_store.get("events", doc_id)
    doc["member_ids"].append("mutated")

    assert (await document_store.get("events", doc_id))["member_ids"] == ["a"]


@pytest.mark.asyncio
async def test_set_with_merge_keeps_other_fields(document_store):
    await document_store.set("users", "u1", {"email": "a@example.com", "display_name": "A"})

    await document_store.set("users", "u1", {"display_name": "Alice"}, merge=True)

    assert await document_store.get("users", "u1") == {
        "id": "u1",
        "email": "a@example.com",
        "display_name": "Alice",
    }


@pytest.mark.asyncio
async def test_update_missing_document_raises(document_store):
    with pytest.raises(DocumentNotFound):
        await document_store.update("events", "nope", {"name": "x"})


@pytest.mark.asyncio
async def test_update_can_delete_field(document_store):
    doc_id = await document_store.add("giftSuggestions", {"is_purchased": True, "purchased_by": "u1"})

    await document_store.update("giftSuggestions", doc_id, {"is_purchased": False, "purchased_by": DELETE_FIELD})

    assert await document_store.get("giftSuggestions", doc_id) == {"id": doc_id, "is_purchased": False}


@pytest.mark.asyncio
async def test_array_union_has_set_semantics(document_store):
    doc_id = await document_store.add("events", {"member_ids": ["a"]})

    await document_store.array_union("events", doc_id, "member_ids", ["a", "b", "b"])

    assert (await document_store.get("events", doc_id))["member_ids"] == ["a", "b"]


@pytest.mark.asyncio
async def test_delete_reports_whether_document_existed(document_store):
    doc_id = await document_store.add("events", {})

    assert await document_store.delete("events", doc_id) is True
    assert await document_store.delete("events", doc_id) is False


@pytest.mark.asyncio
async def test_query_filters_orders_and_limits(document_store):
    for i, members in enumerate([["a"], ["a", "b"], ["b"], ["a"]]):
        await document_store.set("events", f"e{i}", {"member_ids": members, "created_at": T0 + timedelta(hours=i)})

    rows = await document_store.query(
        "events",
        [FieldFilter("member_ids", "array_contains", "a")],
        order_by="created_at",
        descending=True,
        limit=2,
    )

    assert [r["id"] for r in rows] == ["e3", "e1"]


@pytest.mark.asyncio
async def test_query_equality_filter(document_store):
    await document_store.set("wishlists", "w1", {"event_id": "e1"})
    await document_store.set("wishlists", "w2", {"event_id": "e2"})

    rows = await document_store.query("wishlists", [FieldFilter("event_id", "==", "e2")])

    assert [r["id"] for r in rows] == ["w2"]
