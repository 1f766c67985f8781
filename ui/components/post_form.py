import streamlit as st
from typing import Dict, Optional
from domain.constants import POST_STATUSES, FIELD_LABELS, REQUIRED_POST_FIELDS
from domain.models import FormDraft


def _label(field: str) -> str:
    label = FIELD_LABELS.get(field, field)
    return f"{label} *" if field in REQUIRED_POST_FIELDS else label


def render(draft: FormDraft, key_prefix: str) -> Optional[Dict[str, str]]:
    """
    Renders the new-post form pre-filled from the draft.

    Field errors and the last submit failure stored on the draft are shown
    under the form.

    Args:
        draft (FormDraft): Current draft values and errors.
        key_prefix (str): A unique prefix for Streamlit widget keys.

    Returns:
        Dict[str, str]: The entered values when submitted, otherwise None.
    """
    values = draft.values
    with st.form(f"form_{key_prefix}"):
        title = st.text_input(_label("title"), value=values.get('title', ''), key=f"{key_prefix}_title")
        excerpt = st.text_area(_label("excerpt"), value=values.get('excerpt', ''), height=80, key=f"{key_prefix}_excerpt")
        content = st.text_area(_label("content"), value=values.get('content', ''), height=240, key=f"{key_prefix}_content",
                               help="HTML is allowed; WordPress stores it as-is.")

        status_idx = POST_STATUSES.index(values['status']) if values.get('status') in POST_STATUSES else 0
        status = st.selectbox(_label("status"), POST_STATUSES, index=status_idx, key=f"{key_prefix}_status")

        submitted = st.form_submit_button("Create post")

    for field, message in draft.errors.items():
        st.error(f"{FIELD_LABELS.get(field, field)}: {message}")
    if draft.submit_error:
        st.error(f"Could not create the post: {draft.submit_error}")

    if submitted:
        return {
            'title': title,
            'excerpt': excerpt,
            'content': content,
            'status': status,
        }
    return None
