# backend/tests/conftest.py
from __future__ import annotations

import os
import tempfile

# Point the app at a throwaway database before houses_api is imported anywhere.
_TMP_DIR = tempfile.mkdtemp(prefix="houses_api_tests_")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP_DIR}/test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from houses_api.main import create_app  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(create_app()) as c:
        yield c
