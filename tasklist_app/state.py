"""Screen-level state: the one place that owns the task list."""

import logging

import streamlit as st

from tasklist_app.forms import AddForm, EditDialog
from tasklist_app.media import MediaLibrary, UploadPicker
from tasklist_app.permissions import (
    PermissionGate,
    PromptPermissionService,
    StaticPermissionService,
)
from tasklist_app.store import TaskStore

logger = logging.getLogger(__name__)

SESSION_KEY = "task_screen"


def make_permission_service(mode):
    if mode == "grant":
        return StaticPermissionService(granted=True)
    if mode == "deny":
        return StaticPermissionService(granted=False)
    return PromptPermissionService()


class TaskScreen:
    """Root of the task list screen.

    Child components only get read access to the store plus the named
    callbacks below; none of them mutates the list directly.
    """

    def __init__(self, settings, permission_service=None, media=None):
        self.settings = settings
        self.store = TaskStore()
        self.media = media or MediaLibrary()
        self.notices = []
        self.permission_service = permission_service or make_permission_service(
            settings.permission_mode
        )
        self.permission_gate = PermissionGate(
            self.permission_service, self.notify, settings.sdk_version
        )
        self.add_form = AddForm(on_add=self.add_task, on_release=self.release_image)
        self.edit_dialog = EditDialog(on_update=self.update_task, on_release=self.release_image)
        self.picker = UploadPicker(
            self.media, settings.image_types, is_allowed=self.picking_allowed
        )
        self.store.subscribe(self._log_change)

    # --- Callbacks handed to child components ---
    def add_task(self, title, image_uri=None):
        return self.store.add(title, image_uri)

    def delete_task(self, task):
        removed = self.store.remove(task)
        if removed:
            self.release_image(task.image_uri)
        return removed

    def update_task(self, task, new_title, new_image_uri=None):
        updated = self.store.update(task, new_title, new_image_uri)
        if updated and task.image_uri != new_image_uri:
            self.release_image(task.image_uri)
        return updated

    def edit_task(self, task):
        self.edit_dialog.open(task)

    # --- Picked images ---
    def image_in_use(self, uri):
        if any(task.image_uri == uri for task in self.store):
            return True
        if self.add_form.image_uri == uri:
            return True
        return self.edit_dialog.is_open and self.edit_dialog.staged_image_uri == uri

    def release_image(self, uri):
        """Drop a picked image from the media library once nothing shows it."""
        if uri is None or uri not in self.media or self.image_in_use(uri):
            return
        self.media.revoke(uri)

    # --- Permission and notices ---
    def mount(self):
        self.permission_gate.request_once()

    def permission_prompt_pending(self):
        return getattr(self.permission_service, "pending", None) is not None

    def picking_allowed(self):
        if not self.settings.picker_requires_permission:
            return True
        return not self.permission_gate.denied

    def notify(self, message):
        self.notices.append(message)

    def drain_notices(self):
        notices, self.notices = self.notices, []
        return notices

    def _log_change(self, change):
        logger.info("Task %s at position %d, %d task(s) total", change.kind, change.index, len(change.snapshot))


def get_screen(settings):
    """Return this session's screen, creating it on the first run."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = TaskScreen(settings)
    return st.session_state[SESSION_KEY]
