import streamlit as st

from domain.constants import (
    POSTS_ENDPOINT, POSTS_SLOT, POSTS_PATH, NEW_POST_DRAFT, POST_FIELDS, REQUIRED_POST_FIELDS,
)
from domain.models import FormDraft
from services import fetch, forms
from services.config import default_client, get_settings
from services.routing import NavContext
from ui.components import post_form

FORM_KEY = "new_post"


def _draft() -> FormDraft:
    draft = st.session_state.get(NEW_POST_DRAFT)
    if not isinstance(draft, FormDraft):
        draft = forms.new_draft(POST_FIELDS)
        st.session_state[NEW_POST_DRAFT] = draft
    return draft


def _clear_widgets():
    # Widget state outlives the draft; drop it so the form shows empty inputs
    for field in POST_FIELDS:
        st.session_state.pop(f"{FORM_KEY}_{field}", None)


def view(ctx: NavContext):
    st.header("New post")

    if not get_settings().has_credentials:
        st.caption("WP_USERNAME / WP_APP_PASSWORD are not set; "
                   "most sites reject unauthenticated writes.")

    draft = _draft()
    submitted = post_form.render(draft, key_prefix=FORM_KEY)
    if submitted is None:
        return

    forms.update_draft(draft, submitted)

    def _on_created(record):
        fetch.invalidate(st.session_state, POSTS_SLOT)
        st.session_state.post_created_title = submitted.get('title')

    client = default_client()
    with st.spinner("Creating post…"):
        created = forms.submit(draft, POSTS_ENDPOINT, client.create_record,
                               REQUIRED_POST_FIELDS, on_success=_on_created)
    if created is None:
        # Errors are stored on the draft; rerun so the form shows them
        st.rerun()
    _clear_widgets()
    ctx.navigate(POSTS_PATH)
