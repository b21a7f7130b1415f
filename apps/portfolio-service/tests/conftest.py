import os
import tempfile

import pytest

# Must be set before core.* is imported: settings are cached and the app
# mounts the upload directory at import time.
os.environ["AUTO_MIGRATE"] = "false"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="portfolio-uploads-"))
os.environ.setdefault("PUBLIC_CACHE_TTL_SECONDS", "30")

from datetime import timedelta

from fastapi.testclient import TestClient

import core.db.database as db_module
from core.api.health import reset_health_cache_for_tests
from core.api.main import app
from core.db import models
from core.db.repositories import sessions as session_repo
from core.db.repositories import singletons as singleton_repo
from core.db.repositories import users as user_repo
from core.services.content_cache import reset_content_cache_for_tests
from core.utils.token_crypto import hash_password

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="session", autouse=True)
def _schema():
    """Create the schema once on the in-memory engine."""
    models.Base.metadata.create_all(db_module.engine)
    yield
    models.Base.metadata.drop_all(db_module.engine)


@pytest.fixture(autouse=True)
def _clean_tables(_schema):
    reset_content_cache_for_tests()
    reset_health_cache_for_tests()
    yield
    with db_module.engine.begin() as conn:
        for table in reversed(models.Base.metadata.sorted_tables):
            conn.execute(table.delete())
    reset_content_cache_for_tests()


@pytest.fixture
def db_session():
    session = db_module.SessionLocal()
    singleton_repo.seed_singletons(session)
    try:
        yield session
    finally:
        session.close()


# Backwards compatibility: some tests expect a 'db' fixture name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def admin_user(db_session):
    return user_repo.create_user(
        db_session,
        username=ADMIN_USERNAME,
        password_hash=hash_password(ADMIN_PASSWORD),
    )


@pytest.fixture
def admin_token(db_session, admin_user):
    _session, token = session_repo.create_session(
        db_session, user_id=admin_user.id, max_age=timedelta(hours=1)
    )
    return token


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def client(db_session):
    return TestClient(app)


@pytest.fixture
def admin_credentials(admin_user):
    return {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
