"""
Gadget API tests - CRUD, rent/return transitions and error responses.
Challenge: Ensure endpoints return correct status codes, shape and plain-text errors.
"""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, **fields) -> dict:
    body = {"name": "Drill", "pricePerDay": 5, "owner": "alice"}
    body.update(fields)
    response = await client.post("/gadgets", json=body)
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_list_gadgets_empty(client: AsyncClient):
    response = await client.get("/gadgets")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_gadget(client: AsyncClient):
    """POST /gadgets returns the stored record with server-assigned fields."""
    data = await _create(client, type="tool", description="18V cordless")
    assert data["id"]
    assert data["name"] == "Drill"
    assert data["type"] == "tool"
    assert data["description"] == "18V cordless"
    assert data["pricePerDay"] == 5
    assert data["owner"] == "alice"
    assert data["availability"] is True
    assert data["rentedBy"] is None
    assert data["createdAt"] is not None
    assert data["updatedAt"] is None


@pytest.mark.asyncio
async def test_create_gadget_accepts_empty_body(client: AsyncClient):
    response = await client.post("/gadgets", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["name"] is None
    assert data["availability"] is True


@pytest.mark.asyncio
async def test_create_gadget_ignores_server_owned_fields(client: AsyncClient):
    data = await _create(
        client,
        id="chosen-by-caller",
        availability=False,
        rentedBy="mallory",
        updatedAt="2020-01-01T00:00:00Z",
    )
    assert data["id"] != "chosen-by-caller"
    assert data["availability"] is True
    assert data["rentedBy"] is None
    assert data["updatedAt"] is None


@pytest.mark.asyncio
async def test_create_gadget_rejects_wrong_types(client: AsyncClient):
    response = await client.post("/gadgets", json={"name": "Drill", "pricePerDay": "cheap"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_gadget(client: AsyncClient):
    created = await _create(client)
    response = await client.get(f"/gadgets/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_unknown_gadget_returns_plain_404(client: AsyncClient):
    response = await client.get("/gadgets/unknown-id")
    assert response.status_code == 404
    assert response.text == "Gadget with id=unknown-id not found"
    assert response.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_rent_and_return_lifecycle(client: AsyncClient):
    gadget = await _create(client)
    gadget_id = gadget["id"]

    response = await client.post(f"/gadgets/{gadget_id}/rent", json={"renter": "bob"})
    assert response.status_code == 200
    rented = response.json()
    assert rented["availability"] is False
    assert rented["rentedBy"] == "bob"
    assert rented["updatedAt"] is not None
    assert rented["createdAt"] == gadget["createdAt"]

    response = await client.post(f"/gadgets/{gadget_id}/rent", json={"renter": "carol"})
    assert response.status_code == 400
    assert response.text == f"Gadget with id={gadget_id} is not available"
    # Still rented by bob
    assert (await client.get(f"/gadgets/{gadget_id}")).json()["rentedBy"] == "bob"

    response = await client.post(f"/gadgets/{gadget_id}/return")
    assert response.status_code == 200
    returned = response.json()
    assert returned["availability"] is True
    assert returned["rentedBy"] is None
    assert returned["updatedAt"] is not None


@pytest.mark.asyncio
async def test_rent_requires_renter(client: AsyncClient):
    gadget = await _create(client)
    response = await client.post(f"/gadgets/{gadget['id']}/rent", json={})
    assert response.status_code == 422
    assert (await client.get(f"/gadgets/{gadget['id']}")).json()["availability"] is True


@pytest.mark.asyncio
async def test_return_available_gadget_is_rejected(client: AsyncClient):
    gadget = await _create(client)
    response = await client.post(f"/gadgets/{gadget['id']}/return")
    assert response.status_code == 400
    assert response.text == f"Gadget with id={gadget['id']} is not rented"
    assert (await client.get(f"/gadgets/{gadget['id']}")).json()["updatedAt"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, path, body",
    [
        ("POST", "/gadgets/missing/rent", {"renter": "bob"}),
        ("POST", "/gadgets/missing/return", None),
    ],
)
async def test_transitions_on_unknown_gadget_return_404(client: AsyncClient, method, path, body):
    response = await client.request(method, path, json=body)
    assert response.status_code == 404
    assert response.text == "Gadget with id=missing not found"
    assert (await client.get("/gadgets")).json() == []


@pytest.mark.asyncio
async def test_delete_gadget(client: AsyncClient):
    gadget = await _create(client)
    response = await client.delete(f"/gadgets/{gadget['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == gadget["id"]

    response = await client.get(f"/gadgets/{gadget['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_unknown_gadget_returns_400(client: AsyncClient):
    response = await client.delete("/gadgets/missing")
    assert response.status_code == 400
    assert response.text == "Gadget with id=missing not found"


@pytest.mark.asyncio
async def test_list_after_creates_and_deletes(client: AsyncClient):
    ids = [(await _create(client, name=f"Gadget {i}"))["id"] for i in range(5)]
    for gadget_id in ids[:2]:
        assert (await client.delete(f"/gadgets/{gadget_id}")).status_code == 200
    await client.post(f"/gadgets/{ids[2]}/rent", json={"renter": "dave"})

    response = await client.get("/gadgets")
    assert response.status_code == 200
    gadgets = response.json()
    assert [g["id"] for g in gadgets] == sorted(ids[2:])
    by_id = {g["id"]: g for g in gadgets}
    assert by_id[ids[2]]["rentedBy"] == "dave"


@pytest.mark.asyncio
async def test_timestamps_are_utc(client: AsyncClient):
    gadget = await _create(client)
    rented = (await client.post(f"/gadgets/{gadget['id']}/rent", json={"renter": "bob"})).json()
    for value in (gadget["createdAt"], rented["updatedAt"]):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        assert parsed.utcoffset() == timedelta(0)
