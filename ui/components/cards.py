import streamlit as st
from typing import Dict, Any

from .base import inject_base_css, status_badge
from domain.models import post_from_dict, author_from_dict
from utils.text import strip_html, truncate


def post_card(record: Dict[str, Any], key: str):
    """Render a single post with title, status, date and excerpt.

    Remote HTML is never rendered; the full text is shown as plain text and
    the title links to the post on the site.
    """
    inject_base_css()
    post = post_from_dict(record)
    title = strip_html(post.title) or "(no title)"
    excerpt = strip_html(post.excerpt) or truncate(strip_html(post.content))
    with st.container(border=True):
        top_cols = st.columns([6, 2])
        with top_cols[0]:
            if post.link:
                st.markdown(f"#### [{title}]({post.link})")
            else:
                st.markdown(f"#### {title}")
        with top_cols[1]:
            st.markdown(status_badge(post.status), unsafe_allow_html=True)
        if post.date:
            st.caption(f"#{post.id} | {post.date[:10]}")
        if excerpt:
            st.write(excerpt)
        if post.content:
            with st.expander("Full content", expanded=False):
                st.write(strip_html(post.content))


def author_card(record: Dict[str, Any], key: str):
    author = author_from_dict(record)
    with st.container(border=True):
        cols = st.columns([1, 6])
        with cols[0]:
            if author.avatar_url:
                st.image(author.avatar_url, width=64)
        with cols[1]:
            st.markdown(f"**{author.name or author.slug or author.id}**")
            if author.slug:
                st.caption(f"@{author.slug}")
            if author.description:
                st.write(strip_html(author.description))
            if author.link:
                st.markdown(f"[Profile]({author.link})")
