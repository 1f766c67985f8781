import html

import streamlit as st
import pandas as pd
from typing import Any, Dict, Optional, Sequence

from .base import inject_base_css, status_badge
from domain.models import post_from_dict
from utils.text import strip_html

POST_COLUMNS = ["id", "date", "status", "title", "link"]


def posts_frame(records: Sequence[Dict[str, Any]]) -> pd.DataFrame:
    """Tabular view of post records; unreadable records are left out."""
    rows = []
    for record in records:
        try:
            post = post_from_dict(record)
        except ValueError:
            continue
        rows.append({
            "id": post.id,
            "date": (post.date or "")[:10],
            "status": post.status,
            "title": strip_html(post.title),
            "link": post.link or "",
        })
    return pd.DataFrame(rows, columns=POST_COLUMNS)


def dataframe_with_status(df: Optional[pd.DataFrame], status_col: Optional[str] = None):
    inject_base_css()
    if df is None or df.empty:
        st.caption("No rows to show.")
        return
    df = df.copy()
    # Cells are written as raw HTML, so everything but the badge is escaped
    for col in df.columns:
        if col == status_col:
            df[col] = df[col].apply(status_badge)
        else:
            df[col] = df[col].astype(str).map(html.escape)
    st.write(df.to_html(escape=False, index=False), unsafe_allow_html=True)
