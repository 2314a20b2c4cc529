"""Streamlit entry point for the task list.

Run with ``tasklist-app`` or ``streamlit run tasklist_app/app.py``.
"""

import streamlit as st

from tasklist_app.components import (
    render_add_form,
    render_edit_dialog,
    render_notices,
    render_permission_prompt,
    render_summary,
    render_task_list,
)
from tasklist_app.config import Settings
from tasklist_app.logging_setup import setup_logging
from tasklist_app.state import get_screen


def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    st.set_page_config(page_title=settings.page_title, page_icon="📝", layout="centered")

    screen = get_screen(settings)
    # Only the first run of a session actually asks for the permission
    screen.mount()

    st.title(f"📝 {settings.page_title}")

    render_permission_prompt(screen)
    render_notices(screen)

    render_add_form(screen)

    st.subheader("Current Tasks")
    render_task_list(screen)

    # Only one dialog can be shown at a time
    if not screen.permission_prompt_pending():
        render_edit_dialog(screen)

    render_summary(screen)


if __name__ == "__main__":
    main()
