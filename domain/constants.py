"""
This module contains centralized constants used throughout the application,
ensuring a single source of truth for API endpoints, form fields and routes.
"""

# WordPress core REST routes (relative to the site URL)
API_ROOT = "/wp-json/wp/v2"
POSTS_ENDPOINT = f"{API_ROOT}/posts"
USERS_ENDPOINT = f"{API_ROOT}/users"

# Statuses a post can be created with from the form
POST_STATUSES = ["draft", "publish", "pending", "private"]

# Create-form fields in display order; only `title` must be filled in
POST_FIELDS = ["title", "excerpt", "content", "status"]
REQUIRED_POST_FIELDS = ["title"]

FIELD_LABELS = {
    "title": "Title",
    "excerpt": "Excerpt",
    "content": "Content",
    "status": "Status",
}

# Session-state slots used by the fetch hook
POSTS_SLOT = "api_posts"
AUTHORS_SLOT = "api_authors"

# Session-state key of the new-post draft
NEW_POST_DRAFT = "new_post_draft"

# Route paths
POSTS_PATH = "/posts"
NEW_POST_PATH = "/posts/new"
AUTHORS_PATH = "/authors"
ABOUT_PATH = "/about"
DEFAULT_PATH = POSTS_PATH
