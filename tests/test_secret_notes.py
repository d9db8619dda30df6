"""Secret note tests."""


def test_add_and_read_secret_note(client, family):
    alice, bob = family["alice"], family["bob"]
    item = client.post("/api/wishlist-items", headers=alice, json={"name": "Bike"}).json()

    response = client.post(
        "/api/secret-notes",
        headers=bob,
        json={"wishlistItemId": item["id"], "note": "Grandma chips in 500"},
    )
    assert response.status_code == 200
    note = response.json()
    assert note["userId"] == bob.user_id
    assert note["wishlistItemId"] == item["id"]

    notes = client.get(f"/api/secret-notes/{item['id']}", headers=bob).json()
    assert [n["note"] for n in notes] == ["Grandma chips in 500"]


def test_notes_are_private_to_their_author(client, family):
    alice, bob, carol = family["alice"], family["bob"], family["carol"]
    item = client.post("/api/wishlist-items", headers=alice, json={"name": "Bike"}).json()
    client.post("/api/secret-notes", headers=bob, json={"wishlistItemId": item["id"], "note": "B"})
    client.post("/api/secret-notes", headers=carol, json={"wishlistItemId": item["id"], "note": "C"})

    assert [n["note"] for n in client.get(f"/api/secret-notes/{item['id']}", headers=carol).json()] == ["C"]


def test_owner_cannot_read_notes(client, family):
    alice, bob = family["alice"], family["bob"]
    item = client.post("/api/wishlist-items", headers=alice, json={"name": "Bike"}).json()
    client.post("/api/secret-notes", headers=bob, json={"wishlistItemId": item["id"], "note": "B"})

    assert client.get(f"/api/secret-notes/{item['id']}", headers=alice).status_code == 400


def test_note_on_missing_item(client, auth_headers):
    response = client.post(
        "/api/secret-notes", headers=auth_headers, json={"wishlistItemId": 999, "note": "x"}
    )
    assert response.status_code == 404
    assert client.get("/api/secret-notes/999", headers=auth_headers).status_code == 404


def test_note_requires_text(client, family):
    item = client.post("/api/wishlist-items", headers=family["alice"], json={"name": "Bike"}).json()
    response = client.post(
        "/api/secret-notes", headers=family["bob"], json={"wishlistItemId": item["id"]}
    )
    assert response.status_code == 400
