"""
App assembly entry point.

Re-exports the FastAPI `app` from `core.api.main` so `uvicorn app:app` works
from the service directory.
"""

from core.api.main import app  # noqa: F401
