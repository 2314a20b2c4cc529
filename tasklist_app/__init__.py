"""Single-screen task list app built on Streamlit."""

from tasklist_app.models import Task
from tasklist_app.store import TaskStore

__all__ = ["Task", "TaskStore"]
