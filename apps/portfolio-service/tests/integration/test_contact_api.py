import uuid


def _submit(client, **overrides):
    body = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "subject": "Analytical engine site",
        "projectType": "Website",
        "message": "I would like a site for my engine.",
    }
    body.update(overrides)
    return client.post("/api/contact", json=body)


def test_public_submission_is_stored_unread(client, admin_headers):
    r = _submit(client)
    assert r.status_code == 201, r.text
    msg = r.json()
    assert msg["read"] is False
    assert msg["starred"] is False
    assert msg["projectType"] == "Website"

    listed = client.get("/api/contact/messages", headers=admin_headers).json()
    assert [m["id"] for m in listed] == [msg["id"]]


def test_submission_reports_three_field_errors(client):
    r = client.post("/api/contact", json={"name": "Jo", "email": "x", "message": "short"})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Validation failed"
    assert sorted(f["field"] for f in body["fields"]) == ["email", "message", "subject"]


def test_submission_rejects_digits_in_name(client):
    r = _submit(client, name="Agent 47")
    assert r.status_code == 400
    assert r.json()["fields"] == [{"field": "name", "message": "Name can only contain letters and spaces"}]


def test_submission_ignores_client_flags(client, admin_headers):
    r = _submit(client, read=True, starred=True)
    assert r.status_code == 201
    assert r.json()["read"] is False
    assert r.json()["starred"] is False


def test_messages_are_admin_only(client):
    assert client.get("/api/contact/messages").status_code == 401


def test_messages_listed_oldest_first(client, admin_headers):
    first = _submit(client, subject="first").json()
    second = _submit(client, subject="second").json()
    listed = client.get("/api/contact/messages", headers=admin_headers).json()
    assert [m["id"] for m in listed] == [first["id"], second["id"]]


def test_mark_read_and_star(client, admin_headers):
    msg = _submit(client).json()

    r = client.put(f"/api/contact/messages/{msg['id']}/read", headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["read"] is True

    r = client.put(f"/api/contact/messages/{msg['id']}/starred", json={"starred": True}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["starred"] is True

    r = client.put(f"/api/contact/messages/{msg['id']}/starred", json={"starred": False}, headers=admin_headers)
    assert r.json()["starred"] is False

    fetched = client.get(f"/api/contact/messages/{msg['id']}", headers=admin_headers).json()
    assert (fetched["read"], fetched["starred"]) == (True, False)


def test_starred_requires_boolean(client, admin_headers):
    msg = _submit(client).json()
    r = client.put(f"/api/contact/messages/{msg['id']}/starred", json={}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["fields"][0]["field"] == "starred"


def test_flags_on_missing_message_are_404(client, admin_headers):
    missing = uuid.uuid4()
    r = client.put(f"/api/contact/messages/{missing}/read", headers=admin_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Message not found"}


def test_delete_message(client, admin_headers):
    msg = _submit(client).json()
    r = client.delete(f"/api/contact/messages/{msg['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Message deleted successfully"}
    assert client.get("/api/contact/messages", headers=admin_headers).json() == []
    assert client.delete(f"/api/contact/messages/{msg['id']}", headers=admin_headers).status_code == 404
