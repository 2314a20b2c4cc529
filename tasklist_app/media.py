"""Picked images: an in-memory content provider plus the upload picker."""

import io
import itertools
import logging
from dataclasses import dataclass

import streamlit as st
from PIL import Image

logger = logging.getLogger(__name__)

URI_PREFIX = "content://media/images/"


class MediaNotFoundError(LookupError):
    """The URI does not point at any content, or access was revoked."""


@dataclass(frozen=True)
class MediaItem:
    uri: str
    name: str
    mime_type: str
    data: bytes


class MediaLibrary:
    """Session-scoped store of picked images, addressed by opaque URIs.

    Nothing is written to disk: content lives as long as the session does.
    """

    def __init__(self):
        self._items = {}
        self._ids = itertools.count(1)

    def __contains__(self, uri):
        return uri in self._items

    def __len__(self):
        return len(self._items)

    def register(self, name, mime_type, data):
        uri = f"{URI_PREFIX}{next(self._ids)}"
        self._items[uri] = MediaItem(uri=uri, name=name, mime_type=mime_type, data=bytes(data))
        logger.debug("Registered %s (%s, %d bytes) as %s", name, mime_type, len(data), uri)
        return uri

    def open(self, uri):
        try:
            return self._items[uri]
        except KeyError:
            raise MediaNotFoundError(uri) from None

    def revoke(self, uri):
        if self._items.pop(uri, None) is not None:
            logger.debug("Released %s", uri)


def load_image(media, uri):
    """Load the image behind a URI for display, or None if it can't be read."""
    try:
        item = media.open(uri)
        image = Image.open(io.BytesIO(item.data))
        image.load()
        return image
    except MediaNotFoundError:
        logger.warning("Image %s is no longer available", uri)
    except OSError as e:
        # PIL raises UnidentifiedImageError (an OSError) for non-image data
        logger.warning("Could not decode image %s: %s", uri, e)
    return None


class UploadPicker:
    """Image picker backed by ``st.file_uploader``.

    ``launch`` draws the uploader; when the user picks a file its URI is
    passed to ``on_result``. Clearing the uploader counts as a cancelled
    pick and leaves the caller's selection alone.
    """

    def __init__(self, media, image_types, is_allowed=None):
        self.media = media
        self.image_types = list(image_types)
        self._is_allowed = is_allowed or (lambda: True)

    def launch(self, on_result, key, label="Pick Image"):
        st.file_uploader(
            label,
            type=self.image_types,
            key=key,
            on_change=self._on_change,
            args=(key, on_result),
        )

    def _on_change(self, key, on_result):
        self.deliver(st.session_state.get(key), on_result)

    def deliver(self, uploaded, on_result):
        if uploaded is None:
            logger.debug("Image pick cancelled")
            return None
        if not self._is_allowed():
            logger.info("Image pick blocked, media permission was denied")
            return None
        uri = self.media.register(uploaded.name, uploaded.type, uploaded.getvalue())
        on_result(uri)
        return uri
