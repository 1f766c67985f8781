from unittest.mock import MagicMock

from domain.models import CollectionState
from services import fetch
from services.wp_client import FetchError

POSTS = '/wp-json/wp/v2/posts'


def test_successful_fetch_replaces_records():
    store = {}
    fetcher = MagicMock(return_value=[{"id": 1, "title": "Hello"}])
    state = fetch.use_api_data(POSTS, store, fetcher)
    fetcher.assert_called_once_with(POSTS)
    assert state.loading is False
    assert state.records == [{"id": 1, "title": "Hello"}]
    assert state.error is None
    assert store[fetch.DEFAULT_SLOT] is state


def test_loading_is_true_while_request_is_pending():
    store = {}
    seen = {}

    def fetcher(endpoint):
        slot = store[fetch.DEFAULT_SLOT]
        seen['loading'] = slot.loading
        seen['records'] = list(slot.records)
        return [{"id": 5}]

    fetch.use_api_data(POSTS, store, fetcher)
    assert seen == {'loading': True, 'records': []}
    assert store[fetch.DEFAULT_SLOT].loading is False


def test_same_endpoint_does_not_refetch():
    store = {}
    fetcher = MagicMock(return_value=[{"id": 1}])
    fetch.use_api_data(POSTS, store, fetcher)
    fetch.use_api_data(POSTS, store, fetcher)
    fetch.use_api_data(POSTS, store, fetcher)
    assert fetcher.call_count == 1


def test_new_endpoint_fetches_once_more():
    store = {}
    fetcher = MagicMock(side_effect=[[{"id": 1}], [{"id": 9}]])
    fetch.use_api_data(POSTS, store, fetcher)
    state = fetch.use_api_data('/wp-json/wp/v2/pages', store, fetcher)
    assert fetcher.call_count == 2
    assert state.endpoint == '/wp-json/wp/v2/pages'
    assert state.records == [{"id": 9}]


def test_failure_keeps_previous_records_and_sets_error():
    store = {}
    fetcher = MagicMock(return_value=[{"id": 1}])
    fetch.use_api_data(POSTS, store, fetcher)
    fetch.invalidate(store)
    failing = MagicMock(side_effect=FetchError("HTTP 500: Internal Server Error", status=500))
    state = fetch.use_api_data(POSTS, store, failing)
    assert state.loading is False
    assert state.records == [{"id": 1}]
    assert state.error == "HTTP 500: Internal Server Error"


def test_failure_before_any_success_leaves_empty_result():
    store = {}
    failing = MagicMock(side_effect=FetchError("Request failed: boom"))
    state = fetch.use_api_data(POSTS, store, failing)
    assert state.records == []
    assert state.loading is False
    assert state.error == "Request failed: boom"


def test_unexpected_errors_propagate_without_leaving_slot_loading():
    store = {}
    broken = MagicMock(side_effect=TypeError("bug"))
    try:
        fetch.use_api_data(POSTS, store, broken)
    except TypeError:
        pass
    else:
        assert False, "Expected programming errors to propagate"
    state = store[fetch.DEFAULT_SLOT]
    assert state.loading is False
    assert state.error

    working = MagicMock(return_value=[{"id": 1}])
    state = fetch.use_api_data(POSTS, store, working)
    working.assert_called_once_with(POSTS)
    assert state.loading is False
    assert state.error is None
    assert state.records == [{"id": 1}]


def test_invalidate_triggers_one_refetch_and_clears_error():
    store = {}
    fetcher = MagicMock(side_effect=[FetchError("down"), [{"id": 3}]])
    state = fetch.use_api_data(POSTS, store, fetcher)
    assert state.error == "down"
    fetch.invalidate(store)
    state = fetch.use_api_data(POSTS, store, fetcher)
    fetch.use_api_data(POSTS, store, fetcher)
    assert fetcher.call_count == 2
    assert state.error is None
    assert state.records == [{"id": 3}]


def test_stale_resolution_is_dropped():
    state = CollectionState(endpoint=POSTS)
    first = fetch.begin_fetch(state)
    second = fetch.begin_fetch(state)
    assert fetch.resolve_success(state, first, [{"id": "old"}]) is False
    assert state.loading is True
    assert fetch.resolve_success(state, second, [{"id": "new"}]) is True
    assert state.records == [{"id": "new"}]
    assert state.loading is False
    # A late failure for the superseded request changes nothing
    assert fetch.resolve_failure(state, first, "late") is False
    assert state.error is None


def test_discard_drops_slot_and_next_use_refetches():
    store = {}
    fetcher = MagicMock(return_value=[{"id": 1}])
    fetch.use_api_data(POSTS, store, fetcher, key='posts')
    fetch.discard(store, 'posts')
    assert 'posts' not in store
    fetch.discard(store, 'posts')
    fetch.use_api_data(POSTS, store, fetcher, key='posts')
    assert fetcher.call_count == 2


def test_slots_are_independent():
    store = {}
    posts = MagicMock(return_value=[{"id": 1}])
    users = MagicMock(return_value=[{"id": 7, "name": "admin"}])
    a = fetch.use_api_data(POSTS, store, posts, key='posts')
    b = fetch.use_api_data('/wp-json/wp/v2/users', store, users, key='users')
    assert a.records == [{"id": 1}]
    assert b.records == [{"id": 7, "name": "admin"}]
