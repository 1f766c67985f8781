"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: Basic, general-purpose components like the CSS injector and status badges.
- `cards`: Presentational cards for a single post or author.
- `list_view`: Keyed list rendering shared by every collection page.
- `post_form`: The new-post form widget.
- `tables`: Pandas table view of posts.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui.components import ...`).
"""

from .base import (
    inject_base_css,
    status_badge,
)

from .cards import (
    post_card,
    author_card,
)

from .list_view import (
    keyed_items,
    render_list,
)

from .tables import (
    posts_frame,
    dataframe_with_status,
)

from . import post_form

__all__ = [
    "inject_base_css",
    "status_badge",
    "post_card",
    "author_card",
    "keyed_items",
    "render_list",
    "posts_frame",
    "dataframe_with_status",
    "post_form",
]
