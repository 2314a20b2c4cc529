"""Streamlit rendering for the task list screen.

Every function here draws from the current ``TaskScreen`` and reports user
actions back through the screen's callbacks.
"""

import functools
import re

import streamlit as st

from tasklist_app.media import load_image
from tasklist_app.permissions import PERMISSION_LABELS, PromptPermissionService

ITEM_IMAGE_WIDTH = 85
PREVIEW_IMAGE_WIDTH = 64

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|>~<$:])")


def escape_markdown(text):
    """Backslash-escape Markdown syntax so a title shows exactly as typed."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def render_image(media, uri, width, caption=None):
    image = load_image(media, uri)
    if image is None:
        st.caption("Image unavailable")
        return
    st.image(image, width=width, caption=caption)


def render_notices(screen):
    # Toasts disappear on their own, nothing to acknowledge
    for message in screen.drain_notices():
        st.toast(message, icon="⚠️")


def render_permission_prompt(screen):
    service = screen.permission_service
    if not isinstance(service, PromptPermissionService) or service.pending is None:
        return

    permission_id = service.pending_permission
    deny = functools.partial(service.answer, False)

    @st.dialog("Allow access?", on_dismiss=deny)
    def permission_dialog():
        purpose = PERMISSION_LABELS.get(permission_id, "access media on this device")
        st.write(f"Allow **{screen.settings.page_title}** to {purpose}?")
        st.caption(permission_id)
        allow_col, deny_col = st.columns(2)
        if allow_col.button("Allow", key="permission_allow", type="primary"):
            service.answer(True)
            st.rerun()
        if deny_col.button("Deny", key="permission_deny"):
            deny()
            st.rerun()

    permission_dialog()


# --- Add Form ---
def _submit_add_form(form, title_key):
    # Button callbacks run before the script, so read the widget value directly
    form.set_title(st.session_state.get(title_key, ""))
    form.submit()


def render_add_form(screen):
    form = screen.add_form
    title_key = f"new_task_title_{form.generation}"
    form.set_title(
        st.text_input("Task Title", key=title_key, placeholder="What needs to be done?")
    )

    picker_col, preview_col, add_col = st.columns([0.55, 0.2, 0.25])
    with picker_col:
        screen.picker.launch(form.stage_image, key=f"new_task_image_{form.generation}")
    with preview_col:
        if form.image_uri is not None:
            render_image(screen.media, form.image_uri, PREVIEW_IMAGE_WIDTH, caption="Selected Image")
    with add_col:
        st.button(
            "Add Task",
            key="add_task",
            type="primary",
            on_click=_submit_add_form,
            args=(form, title_key),
        )


# --- Edit Dialog ---
def render_edit_dialog(screen):
    dialog = screen.edit_dialog
    if not dialog.is_open:
        return

    @st.dialog("Edit Task", on_dismiss=dialog.dismiss)
    def edit_task_dialog():
        title = st.text_input(
            "Task Title", value=dialog.staged_title, key=f"edit_task_title_{dialog.generation}"
        )
        dialog.set_title(title)

        picker_col, preview_col = st.columns([0.7, 0.3])
        with picker_col:
            screen.picker.launch(dialog.stage_image, key=f"edit_task_image_{dialog.generation}")
        with preview_col:
            if dialog.staged_image_uri is not None:
                render_image(screen.media, dialog.staged_image_uri, PREVIEW_IMAGE_WIDTH)

        save_col, cancel_col = st.columns(2)
        if save_col.button("Save Changes", key="save_edit", type="primary"):
            # An empty title leaves the dialog open
            if dialog.confirm():
                st.rerun()
        if cancel_col.button("Cancel", key="cancel_edit"):
            dialog.cancel()
            st.rerun()

    edit_task_dialog()


# --- Task List ---
def render_task_item(screen, index, task):
    image_col, title_col, edit_col, delete_col = st.columns([0.2, 0.6, 0.1, 0.1])
    with image_col:
        if task.image_uri is not None:
            render_image(screen.media, task.image_uri, ITEM_IMAGE_WIDTH)
    with title_col:
        st.markdown(escape_markdown(task.title))
    with edit_col:
        st.button(
            "✏️",
            key=f"edit_{index}",
            on_click=screen.edit_task,
            args=(task,),
            help="Edit Task",
        )
    with delete_col:
        # Deleting is immediate, there is no confirmation step
        st.button(
            "🗑️",
            key=f"delete_{index}",
            on_click=screen.delete_task,
            args=(task,),
            help="Delete Task",
        )


def render_task_list(screen):
    tasks = screen.store.snapshot()
    if not tasks:
        st.info("You have no tasks yet. Add some above! 🎉")
        return
    for i, task in enumerate(tasks):
        render_task_item(screen, i, task)
        st.divider()


def render_summary(screen):
    tasks = screen.store.snapshot()
    st.sidebar.header("Task Summary")
    st.sidebar.metric("Total Tasks", len(tasks))
    st.sidebar.metric("With Images 🖼️", sum(1 for task in tasks if task.has_image))
