# tests/conftest.py

from __future__ import annotations

import io

import pytest
from PIL import Image

from tasklist_app.config import Settings
from tasklist_app.models import Task
from tasklist_app.state import TaskScreen
from tasklist_app.store import TaskStore

from .fakes import FakePermissionService


@pytest.fixture()
def settings() -> Settings:
    # Built directly rather than from the environment to keep tests isolated
    return Settings(permission_mode="grant")


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def seeded_store() -> TaskStore:
    return TaskStore([Task("Buy milk"), Task("Call mom", "uri://img1")])


@pytest.fixture()
def permission_service() -> FakePermissionService:
    return FakePermissionService()


@pytest.fixture()
def screen(settings: Settings, permission_service: FakePermissionService) -> TaskScreen:
    return TaskScreen(settings, permission_service=permission_service)


@pytest.fixture()
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()
