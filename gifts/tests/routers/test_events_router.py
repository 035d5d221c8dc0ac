import pytest
from httpx import AsyncClient

ALICE = {"X-User-Id": "alice"}
BOB = {"X-User-Id": "bob"}
MALLORY = {"X-User-Id": "mallory"}


async def _create_event(client: AsyncClient, name: str = "Mum's 60th", headers=ALICE) -> dict:
    r = await client.post("/v1/events", json={"name": name}, headers=headers)
    assert r.status_code == 201
    return r.json()


# ==============================================================================
# Auth
# ==============================================================================

@pytest.mark.asyncio
async def test_should_require_user_header(client: AsyncClient):
    r = await client.get("/v1/events")
    assert r.status_code == 401


# ==============================================================================
# Create / list / get
# ==============================================================================

@pytest.mark.asyncio
async def test_should_create_event_with_creator_as_member(client: AsyncClient):
    # WHEN
    body = await _create_event(client)

    # THEN
    assert body["name"] == "Mum's 60th"
    assert body["created_by"] == "alice"
    assert body["member_ids"] == ["alice"]


@pytest.mark.asyncio
async def test_should_list_only_events_the_caller_belongs_to(client: AsyncClient):
    mine = await _create_event(client, "Mine")
    await _create_event(client, "Bob's", headers=BOB)

    r = await client.get("/v1/events", headers=ALICE)

    assert r.status_code == 200
    assert [e["id"] for e in r.json()] == [mine["id"]]


@pytest.mark.asyncio
async def test_should_forbid_non_members(client: AsyncClient):
    event = await _create_event(client)

    r = await client.get(f"/v1/events/{event['id']}", headers=MALLORY)

    assert r.status_code == 403
    assert r.json() == {"detail": "forbidden"}


@pytest.mark.asyncio
async def test_should_404_for_unknown_event(client: AsyncClient):
    r = await client.get("/v1/events/does-not-exist", headers=ALICE)
    assert r.status_code == 404


# ==============================================================================
# Update / delete
# ==============================================================================

@pytest.mark.asyncio
async def test_should_patch_event(client: AsyncClient):
    event = await _create_event(client)

    r = await client.patch(
        f"/v1/events/{event['id']}",
        json={"event_date": "2026-03-14T00:00:00Z"},
        headers=ALICE,
    )

    assert r.status_code == 200
    assert r.json()["name"] == "Mum's 60th"
    assert r.json()["event_date"].startswith("2026-03-14T00:00:00")


@pytest.mark.asyncio
async def test_should_delete_event(client: AsyncClient):
    event = await _create_event(client)

    r = await client.delete(f"/v1/events/{event['id']}", headers=ALICE)
    assert r.status_code == 200
    assert r.json() == {"ok": True}

    r = await client.get(f"/v1/events/{event['id']}", headers=ALICE)
    assert r.status_code == 404


# ==============================================================================
# Members / invites
# ==============================================================================

@pytest.mark.asyncio
async def test_should_invite_registered_user_and_list_members(client: AsyncClient):
    await client.post("/v1/users", json={"email": "alice@example.com", "display_name": "Alice"}, headers=ALICE)
    await client.post("/v1/users", json={"email": "bob@example.com", "display_name": "Bob"}, headers=BOB)
    event = await _create_event(client)

    r = await client.post(f"/v1/events/{event['id']}/invites", json={"email": "bob@example.com"}, headers=ALICE)
    assert r.status_code == 200
    assert r.json()["member_ids"] == ["alice", "bob"]

    # the invitee can now see the event and its members
    r = await client.get(f"/v1/events/{event['id']}/members", headers=BOB)
    assert r.status_code == 200
    assert [u["display_name"] for u in r.json()] == ["Alice", "Bob"]


@pytest.mark.asyncio
async def test_should_404_when_inviting_unknown_email(client: AsyncClient):
    event = await _create_event(client)

    r = await client.post(f"/v1/events/{event['id']}/invites", json={"email": "ghost@example.com"}, headers=ALICE)

    assert r.status_code == 404
    assert r.json() == {"detail": "User not found"}
