import uuid


def _create(client, headers, **overrides):
    body = {"name": "Python", "category": "Backend", "proficiency": 90}
    body.update(overrides)
    r = client.post("/api/skills", json=body, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_and_list_skills(client, admin_headers):
    _create(client, admin_headers, name="React", category="Frontend", order=2)
    _create(client, admin_headers, name="Blender", category="3D/Graphics", order=1)
    _create(client, admin_headers, name="Airflow", category="Tools", order=1)

    skills = client.get("/api/skills").json()
    assert [s["name"] for s in skills] == ["Airflow", "Blender", "React"]
    assert skills[1]["category"] == "3D/Graphics"


def test_skill_validation_errors(client, admin_headers):
    r = client.post(
        "/api/skills",
        json={"name": "Go", "category": "Databases", "proficiency": 0},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert {f["field"] for f in r.json()["fields"]} == {"category", "proficiency"}


def test_update_skill(client, admin_headers):
    skill = _create(client, admin_headers)
    r = client.put(f"/api/skills/{skill['id']}", json={"proficiency": 100}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["proficiency"] == 100
    assert r.json()["name"] == "Python"

    r = client.put(f"/api/skills/{skill['id']}", json={"proficiency": 101}, headers=admin_headers)
    assert r.status_code == 400


def test_delete_skill(client, admin_headers):
    skill = _create(client, admin_headers)
    r = client.delete(f"/api/skills/{skill['id']}", headers=admin_headers)
    assert r.status_code == 200
    assert client.get("/api/skills").json() == []
    r = client.delete(f"/api/skills/{skill['id']}", headers=admin_headers)
    assert r.status_code == 404
    assert r.json() == {"error": "Skill not found"}


def test_reorder_skills(client, admin_headers):
    a = _create(client, admin_headers, name="A", order=0)
    b = _create(client, admin_headers, name="B", order=1)
    assert [s["name"] for s in client.get("/api/skills").json()] == ["A", "B"]

    r = client.post(
        "/api/skills/reorder",
        json={"skills": [
            {"id": a["id"], "category": "Tools", "order": 5},
            {"id": b["id"], "category": "Backend", "order": 0},
        ]},
        headers=admin_headers,
    )
    assert r.status_code == 200, r.text
    assert [s["name"] for s in r.json()] == ["B", "A"]

    public = client.get("/api/skills").json()
    assert [(s["name"], s["category"], s["order"]) for s in public] == [
        ("B", "Backend", 0),
        ("A", "Tools", 5),
    ]


def test_reorder_with_unknown_id_changes_nothing(client, admin_headers):
    a = _create(client, admin_headers, name="A", order=0)
    r = client.post(
        "/api/skills/reorder",
        json={"skills": [
            {"id": a["id"], "category": "Tools", "order": 9},
            {"id": str(uuid.uuid4()), "category": "Tools", "order": 1},
        ]},
        headers=admin_headers,
    )
    assert r.status_code == 404
    skill = client.get("/api/skills").json()[0]
    assert (skill["category"], skill["order"]) == ("Backend", 0)


def test_reorder_requires_items(client, admin_headers):
    r = client.post("/api/skills/reorder", json={"skills": []}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json()["fields"][0]["field"] == "skills"


def test_boolean_proficiency_is_rejected(client, admin_headers):
    r = client.post(
        "/api/skills",
        json={"name": "Go", "category": "Backend", "proficiency": True},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert [f["field"] for f in r.json()["fields"]] == ["proficiency"]


def test_reorder_rejects_duplicate_ids(client, admin_headers):
    a = _create(client, admin_headers, name="A", category="Frontend", order=0)
    r = client.post(
        "/api/skills/reorder",
        json={"skills": [
            {"id": a["id"], "category": "Tools", "order": 1},
            {"id": a["id"], "category": "Backend", "order": 2},
        ]},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert [f["field"] for f in r.json()["fields"]] == ["skills"]
    skill = client.get("/api/skills").json()[0]
    assert (skill["category"], skill["order"]) == ("Frontend", 0)
