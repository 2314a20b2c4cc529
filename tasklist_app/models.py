from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Task:
    """A task title plus an optional reference to a picked image.

    Tasks carry no id: two tasks with the same title and image are equal
    and the store treats them as interchangeable.
    """

    title: str
    image_uri: Optional[str] = None

    @property
    def has_image(self):
        return self.image_uri is not None

    def with_changes(self, title, image_uri=None):
        # Editing never mutates a task, it produces the replacement value
        return replace(self, title=title, image_uri=image_uri)
