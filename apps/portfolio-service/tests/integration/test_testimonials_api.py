import uuid


def _create(client, headers, **overrides):
    body = {"name": "Grace Hopper", "content": "Shipped on time and then some.", "rating": 5}
    body.update(overrides)
    r = client.post("/api/testimonials", json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_new_testimonials_are_hidden_from_public(client, admin_headers):
    created = _create(client, admin_headers)
    assert created["isVisible"] is False
    assert client.get("/api/testimonials").json() == []


def test_visible_testimonials_are_public(client, admin_headers):
    hidden = _create(client, admin_headers, name="Hidden Person")
    shown = _create(client, admin_headers, name="Shown Person", isVisible=True)

    public = client.get("/api/testimonials").json()
    assert [t["id"] for t in public] == [shown["id"]]

    everything = client.get("/api/testimonials", params={"includeHidden": "true"}, headers=admin_headers).json()
    assert {t["id"] for t in everything} == {hidden["id"], shown["id"]}


def test_include_hidden_requires_admin(client):
    r = client.get("/api/testimonials", params={"includeHidden": "true"})
    assert r.status_code == 401


def test_toggle_visibility_shows_up_publicly(client, admin_headers):
    created = _create(client, admin_headers)
    assert client.get("/api/testimonials").json() == []

    r = client.put(f"/api/testimonials/{created['id']}", json={"isVisible": True}, headers=admin_headers)
    assert r.status_code == 200
    assert [t["id"] for t in client.get("/api/testimonials").json()] == [created["id"]]


def test_get_single_testimonial_is_admin_only(client, admin_headers):
    created = _create(client, admin_headers)
    assert client.get(f"/api/testimonials/{created['id']}").status_code == 401
    r = client.get(f"/api/testimonials/{created['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["name"] == "Grace Hopper"


def test_testimonial_validation(client, admin_headers):
    r = client.post(
        "/api/testimonials",
        json={"name": "G", "content": "short", "rating": 9, "avatarUrl": "ftp://x"},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert {f["field"] for f in r.json()["fields"]} == {"name", "content", "rating", "avatarUrl"}


def test_delete_testimonial(client, admin_headers):
    created = _create(client, admin_headers, isVisible=True)
    assert client.delete(f"/api/testimonials/{created['id']}", headers=admin_headers).status_code == 200
    assert client.get("/api/testimonials").json() == []
    missing = client.delete(f"/api/testimonials/{uuid.uuid4()}", headers=admin_headers)
    assert missing.status_code == 404
