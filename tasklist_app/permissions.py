"""Media read permission, requested once when the screen is mounted."""

import logging

logger = logging.getLogger(__name__)

READ_MEDIA_IMAGES = "android.permission.READ_MEDIA_IMAGES"
READ_EXTERNAL_STORAGE = "android.permission.READ_EXTERNAL_STORAGE"

# Android 13 split storage access into per-media-type permissions
TIRAMISU = 33

DENIED_MESSAGE = "Permission denied"

PERMISSION_LABELS = {
    READ_MEDIA_IMAGES: "access photos on this device",
    READ_EXTERNAL_STORAGE: "access files on this device",
}


def media_read_permission(sdk_version):
    """Return the permission id that grants read access to images."""
    if sdk_version >= TIRAMISU:
        return READ_MEDIA_IMAGES
    return READ_EXTERNAL_STORAGE


class StaticPermissionService:
    """Answers every request right away with a fixed result."""

    def __init__(self, granted):
        self.granted = granted
        self.requests = []

    def request(self, permission_id, on_result):
        self.requests.append(permission_id)
        on_result(self.granted)


class PromptPermissionService:
    """Holds a request until the user answers the consent dialog.

    The dialog itself is drawn by ``components.render_permission_prompt``,
    which calls ``answer`` from its button handlers.
    """

    def __init__(self):
        self.pending = None  # (permission_id, on_result)

    @property
    def pending_permission(self):
        if self.pending is None:
            return None
        return self.pending[0]

    def request(self, permission_id, on_result):
        self.pending = (permission_id, on_result)

    def answer(self, granted):
        if self.pending is None:
            return
        permission_id, on_result = self.pending
        self.pending = None
        logger.info("Permission %s %s", permission_id, "granted" if granted else "denied")
        on_result(granted)


class PermissionGate:
    """Fire-and-forget permission request made once per screen."""

    def __init__(self, service, notify, sdk_version):
        self._service = service
        self._notify = notify
        self.permission_id = media_read_permission(sdk_version)
        self.requested = False
        self.granted = None

    @property
    def denied(self):
        return self.granted is False

    def request_once(self):
        if self.requested:
            return
        self.requested = True
        logger.debug("Requesting %s", self.permission_id)
        self._service.request(self.permission_id, self._on_result)

    def _on_result(self, granted):
        self.granted = bool(granted)
        if not self.granted:
            # No retry; picking images stays available and may still work
            logger.warning("%s was not granted", self.permission_id)
            self._notify(DENIED_MESSAGE)
