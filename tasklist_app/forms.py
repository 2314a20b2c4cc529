"""Staging state for the add form and the edit dialog.

Both hold uncommitted values and only touch the task list through the
callback they were given. ``generation`` changes whenever the staged values
are cleared, so the Streamlit widgets bound to them can be keyed on it and
start out empty again.

Whenever a staged image is dropped (replaced by a new pick, or cleared on
reset) its URI is handed to ``on_release``. The owner decides whether the
image is still used somewhere else.
"""

import logging

logger = logging.getLogger(__name__)


def _ignore(uri):
    pass


class AddForm:
    """Inline form for composing a new task (Idle -> Composing -> Idle)."""

    def __init__(self, on_add, on_release=None):
        self._on_add = on_add
        self._on_release = on_release or _ignore
        self.title = ""
        self.image_uri = None
        self.generation = 0

    @property
    def state(self):
        if self.title or self.image_uri is not None:
            return "composing"
        return "idle"

    def set_title(self, text):
        self.title = text or ""

    def stage_image(self, uri):
        # A cancelled pick reports None and keeps the previous image
        if uri is None:
            return
        previous, self.image_uri = self.image_uri, uri
        if previous is not None and previous != uri:
            self._on_release(previous)

    def submit(self):
        """Add the staged task. Returns False when there is no title."""
        if not self.title:
            return False
        self._on_add(self.title, self.image_uri)
        self.reset()
        return True

    def reset(self):
        dropped = self.image_uri
        self.title = ""
        self.image_uri = None
        self.generation += 1
        if dropped is not None:
            self._on_release(dropped)


class EditDialog:
    """Modal editor for an existing task (Closed -> Open -> Closed)."""

    def __init__(self, on_update, on_release=None):
        self._on_update = on_update
        self._on_release = on_release or _ignore
        self.is_open = False
        self.edited_task = None
        self.staged_title = ""
        self.staged_image_uri = None
        self.generation = 0

    def open(self, task):
        self.edited_task = task
        self.staged_title = task.title
        self.staged_image_uri = task.image_uri
        self.is_open = True
        logger.debug("Editing task %r", task.title)

    def set_title(self, text):
        if self.is_open:
            self.staged_title = text or ""

    def stage_image(self, uri):
        if uri is None:
            return
        if not self.is_open:
            # Picked after the dialog closed, nothing will ever show it
            self._on_release(uri)
            return
        previous, self.staged_image_uri = self.staged_image_uri, uri
        if previous is not None and previous != uri:
            self._on_release(previous)

    def confirm(self):
        """Write the staged values back. An empty title keeps the dialog open."""
        if not self.is_open or not self.staged_title:
            return False
        self._on_update(self.edited_task, self.staged_title, self.staged_image_uri)
        self.reset()
        return True

    def cancel(self):
        if self.is_open:
            logger.debug("Edit of %r cancelled", self.edited_task.title)
        self.reset()

    # Clicking outside the dialog is the same as pressing Cancel
    dismiss = cancel

    def reset(self):
        dropped = self.staged_image_uri
        self.is_open = False
        self.edited_task = None
        self.staged_title = ""
        self.staged_image_uri = None
        self.generation += 1
        if dropped is not None:
            self._on_release(dropped)
