import streamlit as st

from domain.constants import USERS_ENDPOINT, AUTHORS_SLOT
from services import fetch
from services.config import default_client
from services.routing import NavContext
from ui.components import author_card, render_list


def view(ctx: NavContext):
    st.header("Authors")

    if st.button("🔄 Refresh", key="authors_refresh"):
        fetch.invalidate(st.session_state, AUTHORS_SLOT)

    client = default_client()
    with st.spinner("Loading authors…"):
        state = fetch.use_api_data(
            USERS_ENDPOINT, st.session_state, client.get_collection, key=AUTHORS_SLOT)

    if state.error:
        st.error(f"Could not load authors: {state.error}")

    render_list(state.records, author_card, key_prefix="author",
                empty_message="No authors with published posts.")
