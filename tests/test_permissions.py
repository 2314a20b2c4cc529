# tests/test_permissions.py

from __future__ import annotations

import pytest

from tasklist_app.permissions import (
    DENIED_MESSAGE,
    READ_EXTERNAL_STORAGE,
    READ_MEDIA_IMAGES,
    PermissionGate,
    PromptPermissionService,
    StaticPermissionService,
    media_read_permission,
)

from .fakes import FakePermissionService


@pytest.mark.parametrize(
    ("sdk_version", "expected"),
    [(29, READ_EXTERNAL_STORAGE), (32, READ_EXTERNAL_STORAGE), (33, READ_MEDIA_IMAGES), (35, READ_MEDIA_IMAGES)],
)
def test_permission_id_depends_on_sdk_version(sdk_version: int, expected: str) -> None:
    assert media_read_permission(sdk_version) == expected


def test_gate_requests_exactly_once() -> None:
    service = FakePermissionService()
    gate = PermissionGate(service, notify=lambda msg: None, sdk_version=34)

    gate.request_once()
    gate.request_once()

    assert service.requests == [READ_MEDIA_IMAGES]
    assert gate.requested and gate.granted is None


def test_denial_notifies_once_and_does_not_retry() -> None:
    service = FakePermissionService()
    notices = []
    gate = PermissionGate(service, notify=notices.append, sdk_version=30)

    gate.request_once()
    service.resolve(False)
    gate.request_once()

    assert notices == [DENIED_MESSAGE]
    assert gate.denied
    assert service.requests == [READ_EXTERNAL_STORAGE]


def test_grant_is_silent() -> None:
    notices = []
    gate = PermissionGate(StaticPermissionService(granted=True), notices.append, sdk_version=34)

    gate.request_once()

    assert gate.granted is True
    assert notices == []


def test_prompt_service_waits_for_answer() -> None:
    service = PromptPermissionService()
    notices = []
    gate = PermissionGate(service, notices.append, sdk_version=34)

    gate.request_once()
    assert service.pending_permission == READ_MEDIA_IMAGES
    assert gate.granted is None

    service.answer(False)
    service.answer(True)  # nothing pending any more

    assert service.pending is None
    assert gate.granted is False
    assert notices == [DENIED_MESSAGE]
