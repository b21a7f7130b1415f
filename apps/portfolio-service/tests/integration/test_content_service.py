import uuid

import pytest
from sqlalchemy.exc import OperationalError

from core.db.repositories import collections as repo
from core.errors import ContentValidationError, NotFoundError, StorageError
from core.services.content_cache import ContentCache
from core.services.content_service import ContentService


@pytest.fixture
def service(db_session):
    return ContentService(db_session, cache=ContentCache(ttl_seconds=60))


def _project(**overrides):
    body = {"title": "Site", "description": "Desc", "technologies": ["Python"]}
    body.update(overrides)
    return body


def test_create_roundtrip_preserves_fields(service):
    created = service.create("projects", _project(liveUrl="example.com", order=3))
    fetched = service.get("projects", created.id)
    assert fetched == created
    assert fetched.live_url == "https://example.com"
    assert fetched.order == 3


def test_validation_failure_persists_nothing(service, db_session):
    with pytest.raises(ContentValidationError):
        service.create("projects", _project(technologies=[]))
    assert service.list("projects") == []


def test_public_read_is_cached_and_invalidated(service):
    assert service.public_projects() == []
    assert "projects" in service.cache

    created = service.create("projects", _project(featured=True))
    assert "projects" not in service.cache
    assert [p.id for p in service.public_projects()] == [created.id]
    assert [p.id for p in service.public_projects(featured=True)] == [created.id]

    service.update("projects", created.id, {"featured": False})
    assert service.public_projects(featured=True) == []


def test_about_cache_invalidated_on_update(service):
    assert service.public_about().name == "Your Name"
    service.update_about({"name": "Ada"})
    assert service.public_about().name == "Ada"


def test_legal_cache_is_per_type(service):
    service.public_legal("privacy_policy")
    service.public_legal("terms_of_service")
    service.update_legal("privacy_policy", {"content": "new"})
    assert "legal:privacy_policy" not in service.cache
    assert "legal:terms_of_service" in service.cache
    assert service.public_legal("privacy_policy").content == "new"


def test_missing_rows_raise_not_found(service):
    missing = uuid.uuid4()
    with pytest.raises(NotFoundError) as exc:
        service.get("skills", missing)
    assert str(exc.value) == "Skill not found"
    with pytest.raises(NotFoundError):
        service.update("testimonials", missing, {"rating": 4})
    with pytest.raises(NotFoundError):
        service.delete("contact_messages", missing)
    with pytest.raises(NotFoundError):
        service.mark_message_read(missing)
    with pytest.raises(NotFoundError):
        service.get_legal("cookie_policy")


def test_submit_contact_then_mark_read(service):
    msg = service.submit_contact(
        {"name": "Ada", "email": "ada@example.com", "subject": "Hi", "message": "Hello there, friend"}
    )
    assert (msg.read, msg.starred) == (False, False)
    assert service.mark_message_read(msg.id).read is True
    assert service.get("contact_messages", msg.id).read is True


def test_storage_error_rolls_back(service, db_session, monkeypatch):
    rolled_back = []

    def broken_create(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(repo, "create_row", broken_create)
    monkeypatch.setattr(db_session, "rollback", lambda: rolled_back.append(True))

    with pytest.raises(StorageError):
        service.create("projects", _project())
    assert rolled_back == [True]


def test_unknown_collection(service):
    with pytest.raises(ValueError):
        service.list("widgets")
