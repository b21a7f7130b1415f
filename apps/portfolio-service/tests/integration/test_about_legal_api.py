def test_about_is_seeded(client):
    r = client.get("/api/about")
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Your Name"
    assert body["availableForWork"] is True
    assert body["responseTime"] == "24 hours"
    assert "id" not in body


def test_update_about_partial(client, admin_headers):
    r = client.put(
        "/api/about",
        json={"bio": "Builds things.", "githubUrl": "github.com/me", "completedProjects": 12},
        headers=admin_headers,
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["bio"] == "Builds things."
    assert body["githubUrl"] == "https://github.com/me"
    assert body["completedProjects"] == 12
    assert body["name"] == "Your Name"

    public = client.get("/api/about").json()
    assert public["bio"] == "Builds things."


def test_update_about_validation(client, admin_headers):
    r = client.put(
        "/api/about",
        json={"email": "not-an-email", "totalClients": -1, "name": None},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert {f["field"] for f in r.json()["fields"]} == {"email", "totalClients", "name"}


def test_about_missing_row_is_404(client, db_session):
    from core.db import models

    db_session.query(models.AboutInfo).delete()
    db_session.commit()
    r = client.get("/api/about")
    assert r.status_code == 404
    assert r.json() == {"error": "About info not found"}


def test_legal_docs_seeded(client):
    for doc_type in ("privacy_policy", "terms_of_service"):
        r = client.get(f"/api/legal/{doc_type}")
        assert r.status_code == 200
        assert r.json()["type"] == doc_type
        assert r.json()["content"]


def test_unknown_legal_type_is_404(client, admin_headers):
    assert client.get("/api/legal/cookie_policy").status_code == 404
    r = client.put("/api/legal/cookie_policy", json={"content": "x"}, headers=admin_headers)
    assert r.status_code == 404


def test_update_legal_doc(client, admin_headers):
    r = client.put("/api/legal/privacy_policy", json={"content": "<p>We keep nothing.</p>"}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["content"] == "<p>We keep nothing.</p>"

    after = client.get("/api/legal/privacy_policy").json()
    assert after["content"] == "<p>We keep nothing.</p>"
    assert client.get("/api/legal/terms_of_service").json()["content"] != after["content"]


def test_update_legal_requires_content(client, admin_headers):
    r = client.put("/api/legal/terms_of_service", json={}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["fields"] == [{"field": "content", "message": "Field required"}]


def test_singleton_writes_require_admin(client):
    assert client.put("/api/about", json={"bio": "x"}).status_code == 401
    assert client.put("/api/legal/privacy_policy", json={"content": "x"}).status_code == 401


def test_singleton_timestamps_are_utc(client):
    for path in ("/api/about", "/api/legal/privacy_policy"):
        stamp = client.get(path).json()["updatedAt"]
        assert stamp.endswith("Z") or stamp.endswith("+00:00")
