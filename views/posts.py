import streamlit as st
from io import StringIO

from domain.constants import POSTS_ENDPOINT, POSTS_SLOT, NEW_POST_PATH
from services import fetch
from services.config import default_client
from services.routing import NavContext
from ui.components import post_card, render_list, posts_frame, dataframe_with_status


def view(ctx: NavContext):
    st.header("Posts")

    created_title = st.session_state.pop('post_created_title', None)
    if created_title:
        st.success(f"Created “{created_title}”.")

    action_cols = st.columns([1, 1, 4])
    if action_cols[0].button("🔄 Refresh", key="posts_refresh"):
        fetch.invalidate(st.session_state, POSTS_SLOT)
    if action_cols[1].button("✏️ New post", key="posts_new"):
        ctx.navigate(NEW_POST_PATH)

    client = default_client()
    with st.spinner("Loading posts…"):
        state = fetch.use_api_data(
            POSTS_ENDPOINT, st.session_state, client.get_collection, key=POSTS_SLOT)

    if state.error:
        st.error(f"Could not load posts: {state.error}")

    layout = st.radio("Layout", ["Cards", "Table"], horizontal=True, key="posts_layout")
    if layout == "Table":
        df = posts_frame(state.records)
        dataframe_with_status(df, status_col="status")
        if not df.empty:
            csv_buf = StringIO()
            df.to_csv(csv_buf, index=False)
            st.download_button("Download CSV", csv_buf.getvalue(),
                               file_name="posts.csv", mime="text/csv")
        return

    render_list(state.records, post_card, key_prefix="post",
                empty_message="No posts yet.")
