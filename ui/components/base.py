import html

import streamlit as st

PRIMARY_ACCENT = "#2271B1"  # wp-admin blue
GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
GRAY = "#6B7280"  # gray-500
CHIP_BG = "#374151"

# Post status -> badge color class
STATUS_CLASSES = {
    "publish": "green",
    "draft": "gray",
    "pending": "yellow",
    "private": "gray",
    "future": "blue",
}


def inject_base_css():
    if getattr(inject_base_css, "_applied", False):
        return
    inject_base_css._applied = True
    st.markdown(
        f"""
        <style>
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.yellow {{background:{YELLOW};}}
        .badge.gray {{background:{GRAY};}}
        .badge.blue {{background:{PRIMARY_ACCENT};}}
        .wp-excerpt p {{margin:0 0 .4rem;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_badge(status: str) -> str:
    cls = STATUS_CLASSES.get((status or "").lower(), "gray")
    return f'<span class="badge {cls}">{html.escape(str(status))}</span>'
