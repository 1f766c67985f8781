import logging
import datetime as dt
import streamlit as st
from services.config import get_settings
from services import fetch
from services.routing import NavContext, resolve_route, path_for_label, slots_left_behind
from domain.constants import (
    POSTS_PATH, NEW_POST_PATH, AUTHORS_PATH, ABOUT_PATH, DEFAULT_PATH, POSTS_SLOT, AUTHORS_SLOT,
)

# Import the page rendering functions from the view modules
from views import posts, new_post, authors, about

logger = logging.getLogger(__name__)

# --- Page Registry ---
# Maps a page key to its sidebar label, route path, rendering function and the
# fetch slots the page owns (dropped when the user leaves the page).
PAGE_REGISTRY = {
    "posts": {
        "label": "📰 Posts",
        "path": POSTS_PATH,
        "render_func": posts.view,
        "slots": [POSTS_SLOT],
    },
    "new_post": {
        "label": "✏️ New post",
        "path": NEW_POST_PATH,
        "render_func": new_post.view,
        "slots": [],
    },
    "authors": {
        "label": "👤 Authors",
        "path": AUTHORS_PATH,
        "render_func": authors.view,
        "slots": [AUTHORS_SLOT],
    },
    "about": {
        "label": "ℹ️ About",
        "path": ABOUT_PATH,
        "render_func": about.view,
        "slots": [],
    },
}


def navigate(path: str):
    """Switch page on the next run; the radio widget is the source of truth."""
    st.session_state.nav_target = path
    st.rerun()


def _configure_logging(level: str):
    if getattr(_configure_logging, "_applied", False):
        return
    _configure_logging._applied = True
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Main application router.

    Renders the static header and sidebar, resolves the current route from the
    `page` query parameter or a pending navigation, and hands the selected
    page an explicit NavContext.
    """
    settings = get_settings()
    _configure_logging(settings.log_level)
    st.set_page_config(page_title="WordPress Content", layout="wide")

    # --- Header ---
    st.markdown(f"""<div style='padding:0.9rem 1.1rem; border-radius:10px; background:linear-gradient(135deg,#1d2327,#2271b1); color:white; margin-bottom:1.0rem;'>
    <div style='font-size:1.05rem; font-weight:600;'>WordPress Content</div>
    <div style='font-size:0.75rem; opacity:0.85;'>{settings.base_url}</div>
    </div>""", unsafe_allow_html=True)

    # --- Sidebar ---
    st.sidebar.title("Navigation")
    page_keys = list(PAGE_REGISTRY.keys())
    page_labels = [v["label"] for v in PAGE_REGISTRY.values()]

    # A pending navigate() call wins over the URL
    if 'nav_target' in st.session_state:
        target_key = resolve_route(st.session_state.nav_target, PAGE_REGISTRY, DEFAULT_PATH)
        st.session_state.navigation_radio = PAGE_REGISTRY[target_key]["label"]
        del st.session_state.nav_target
    elif 'navigation_radio' not in st.session_state:
        raw_param = st.query_params.get('page')
        target_key = resolve_route(raw_param, PAGE_REGISTRY, DEFAULT_PATH)
        st.session_state.navigation_radio = PAGE_REGISTRY[target_key]["label"]

    selected_page_label = st.sidebar.radio(
        "Go to",
        page_labels,
        key="navigation_radio"
    )
    current_path = path_for_label(selected_page_label, PAGE_REGISTRY) or DEFAULT_PATH
    # Keep the URL shareable
    st.query_params['page'] = current_path
    selected_page_key = page_keys[page_labels.index(selected_page_label)]
    logger.debug("Rendering page %s (%s)", selected_page_key, current_path)

    # Leaving a page unmounts it: its collection state goes with it
    previous_key = st.session_state.get('rendered_page')
    for slot in slots_left_behind(previous_key, selected_page_key, PAGE_REGISTRY):
        fetch.discard(st.session_state, slot)
    st.session_state.rendered_page = selected_page_key

    # --- Page Rendering ---
    ctx = NavContext(current_path=current_path, navigate=navigate)
    PAGE_REGISTRY[selected_page_key]["render_func"](ctx)

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"Site: {settings.base_url} | {dt.datetime.now(dt.timezone.utc).strftime('%H:%M:%S')}Z"
    )


if __name__ == "__main__":
    main()
