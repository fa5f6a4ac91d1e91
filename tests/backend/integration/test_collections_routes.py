import pytest

from taskhub.models.rights import UserRights
from taskhub.models.task import Task


pytestmark = pytest.mark.asyncio


async def test_create_collection(client, register_user):
    user = await register_user()

    resp = await client.post("/collections", json={"name": "  Groceries "}, headers=user["headers"])
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Collection was created successfully"
    assert isinstance(body["collection"]["id"], int)

    listing = await client.get("/collections", headers=user["headers"])
    assert listing.json()["collections"][0]["name"] == "Groceries"


async def test_create_collection_name_too_long(client, register_user):
    user = await register_user()

    resp = await client.post("/collections", json={"name": "x" * 51}, headers=user["headers"])
    assert resp.status_code == 400
    assert resp.json()["error"] == "Bad Request"


async def test_list_created_first_then_newest(client, register_user, create_collection, grant):
    alice = await register_user(name="Alice")
    bob = await register_user(name="Bob")

    shared = await create_collection(bob, "Bob's board")
    own_old = await create_collection(alice, "Old")
    own_new = await create_collection(alice, "New")
    await grant(bob, alice, shared, rightToEdit=True)

    resp = await client.get("/collections", headers=alice["headers"])
    assert resp.status_code == 200
    body = resp.json()
    assert body["page"] == 1
    assert body["totalPages"] == 1

    items = body["collections"]
    assert [c["id"] for c in items] == [own_new, own_old, shared]
    assert [c["isCreator"] for c in items] == [True, True, False]
    assert items[0]["userRights"] is None
    assert items[2]["userRights"] == {
        "rightToCreate": False,
        "rightToEdit": True,
        "rightToDelete": False,
        "rightToChangeStatus": False,
    }


async def test_list_excludes_unrelated_collections(client, register_user, create_collection):
    alice = await register_user()
    bob = await register_user()
    await create_collection(bob, "Private")

    resp = await client.get("/collections", headers=alice["headers"])
    assert resp.json()["collections"] == []
    assert resp.json()["totalPages"] == 0


async def test_list_pagination(client, register_user, create_collection):
    user = await register_user()
    for i in range(5):
        await create_collection(user, f"C{i}")

    first = await client.get("/collections", params={"limit": 2, "page": 1}, headers=user["headers"])
    last = await client.get("/collections", params={"limit": 2, "page": 3}, headers=user["headers"])

    assert first.json()["totalPages"] == 3
    assert len(first.json()["collections"]) == 2
    assert len(last.json()["collections"]) == 1


async def test_delete_collection_errors(client, register_user, create_collection, grant):
    owner = await register_user()
    member = await register_user()
    cid = await create_collection(owner)
    await grant(owner, member, cid, rightToCreate=True, rightToEdit=True,
                rightToDelete=True, rightToChangeStatus=True)

    bad = await client.delete("/collections/abc", headers=owner["headers"])
    assert bad.status_code == 400
    assert bad.json()["message"] == "'collectionId' must be a number"

    missing = await client.delete("/collections/999999", headers=owner["headers"])
    assert missing.status_code == 404
    assert missing.json()["message"] == "Collection not found"

    # Full rights still do not allow deleting the collection
    forbidden = await client.delete(f"/collections/{cid}", headers=member["headers"])
    assert forbidden.status_code == 403
    assert forbidden.json()["message"] == "Only the creator can delete the collection"


async def test_delete_collection_removes_tasks_and_rights(client, register_user, create_collection, grant):
    owner = await register_user()
    member = await register_user()
    cid = await create_collection(owner)
    await grant(owner, member, cid, rightToCreate=True)
    await client.post(f"/collections/{cid}/tasks", json={"name": "T", "priority": "low"},
                      headers=owner["headers"])

    resp = await client.delete(f"/collections/{cid}", headers=owner["headers"])
    assert resp.status_code == 200
    assert resp.json() == {"message": "Collection was deleted successfully"}

    assert await Task.filter(collection_id=cid).count() == 0
    assert await UserRights.filter(collection_id=cid).count() == 0

    gone = await client.get(f"/collections/{cid}/tasks", headers=member["headers"])
    assert gone.status_code == 404


async def test_create_collection_blank_name(client, register_user):
    user = await register_user()

    resp = await client.post("/collections", json={"name": "   "}, headers=user["headers"])
    assert resp.status_code == 400
    assert resp.json()["error"] == "Bad Request"

    listing = await client.get("/collections", headers=user["headers"])
    assert listing.json()["collections"] == []
