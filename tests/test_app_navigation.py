from unittest.mock import MagicMock, patch

from streamlit.testing.v1 import AppTest

from domain.constants import POSTS_ENDPOINT, USERS_ENDPOINT

POSTS_LABEL = "📰 Posts"
AUTHORS_LABEL = "👤 Authors"
ABOUT_LABEL = "ℹ️ About"


def make_client(records=None):
    client = MagicMock()
    client.get_collection.return_value = records if records is not None else [
        {"id": 1, "title": {"rendered": "Hello"}, "status": "publish"}]
    return client


def run_app():
    at = AppTest.from_file("../app.py", default_timeout=30)
    at.run()
    return at


def endpoint_calls(client, endpoint):
    return [c for c in client.get_collection.call_args_list if c.args == (endpoint,)]


def test_returning_to_posts_loads_them_again():
    client = make_client()
    with patch("views.posts.default_client", return_value=client), \
            patch("views.authors.default_client", return_value=client):
        at = run_app()
        assert not at.exception
        assert len(endpoint_calls(client, POSTS_ENDPOINT)) == 1

        at.radio(key="navigation_radio").set_value(ABOUT_LABEL).run()
        assert not at.exception
        assert "api_posts" not in at.session_state

        at.radio(key="navigation_radio").set_value(POSTS_LABEL).run()
        assert not at.exception
        assert len(endpoint_calls(client, POSTS_ENDPOINT)) == 2


def test_reruns_on_the_same_page_do_not_refetch():
    client = make_client()
    with patch("views.posts.default_client", return_value=client), \
            patch("views.authors.default_client", return_value=client):
        at = run_app()
        at.radio(key="posts_layout").set_value("Table").run()
        at.radio(key="posts_layout").set_value("Cards").run()
        assert not at.exception
        assert len(endpoint_calls(client, POSTS_ENDPOINT)) == 1


def test_authors_reload_after_visiting_another_page():
    client = make_client([{"id": 7, "name": "admin", "slug": "admin"}])
    with patch("views.posts.default_client", return_value=client), \
            patch("views.authors.default_client", return_value=client):
        at = run_app()
        at.radio(key="navigation_radio").set_value(AUTHORS_LABEL).run()
        at.radio(key="navigation_radio").set_value(ABOUT_LABEL).run()
        at.radio(key="navigation_radio").set_value(AUTHORS_LABEL).run()
        assert not at.exception
        assert len(endpoint_calls(client, USERS_ENDPOINT)) == 2


def test_record_without_id_warns_and_other_posts_render():
    client = make_client([
        {"id": 1, "title": {"rendered": "Hello"}, "status": "publish"},
        {"title": {"rendered": "Broken"}},
    ])
    with patch("views.posts.default_client", return_value=client), \
            patch("views.authors.default_client", return_value=client):
        at = run_app()
    assert not at.exception
    assert [w.value for w in at.warning] == ["Skipped record #2 without id."]
    assert any("Hello" in m.value for m in at.markdown)
