import streamlit as st

from domain.constants import POSTS_ENDPOINT, USERS_ENDPOINT
from services.config import get_settings
from services.routing import NavContext


def view(ctx: NavContext):
    """Static page describing the connected site."""
    settings = get_settings()
    st.header("About")
    st.markdown(
        f"""
        This app reads and writes content through the WordPress REST API.

        | | |
        |---|---|
        | Site | `{settings.base_url}` |
        | Posts | `{POSTS_ENDPOINT}` |
        | Authors | `{USERS_ENDPOINT}` |
        | Items per page | {settings.per_page} |
        | Authenticated | {"yes" if settings.has_credentials else "no"} |

        Set `WP_BASE_URL`, `WP_USERNAME` and `WP_APP_PASSWORD` in `.env` to point
        the app at another site. Creating posts needs an Application Password
        (Users → Profile → Application Passwords in wp-admin).
        """
    )
