"""Data-fetch hook backed by a session-state mapping.

Streamlit reruns the page script on every interaction, so "one request per
distinct endpoint" means: the first run that sees a new endpoint for a slot
fetches, later runs with the same endpoint reuse the stored state. Each slot
has at most one outstanding request; a resolution carrying an older token is
dropped (last write wins).
"""
import logging
from typing import Any, Callable, Dict, List, MutableMapping

from domain.models import CollectionState
from services.wp_client import WordPressError

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], List[Dict[str, Any]]]

DEFAULT_SLOT = 'api_data'


def begin_fetch(state: CollectionState) -> int:
    state.request_id += 1
    state.loading = True
    state.error = None
    state.stale = False
    return state.request_id


def resolve_success(state: CollectionState, token: int, body: List[Dict[str, Any]]) -> bool:
    if token != state.request_id:
        logger.debug("Dropping stale response %s for %s (current %s)",
                     token, state.endpoint, state.request_id)
        return False
    state.records = list(body)
    state.loading = False
    state.error = None
    return True


def resolve_failure(state: CollectionState, token: int, message: str) -> bool:
    if token != state.request_id:
        logger.debug("Dropping stale failure %s for %s", token, state.endpoint)
        return False
    state.loading = False
    state.error = message
    return True


def _needs_fetch(state: CollectionState, endpoint: str) -> bool:
    if state.endpoint != endpoint or state.stale:
        return True
    # Never dispatched yet
    return state.request_id == 0


def use_api_data(endpoint: str, store: MutableMapping[str, Any], fetcher: Fetcher,
                 key: str = DEFAULT_SLOT) -> CollectionState:
    """Return the collection state for `endpoint`, fetching when it is new.

    Fetch failures are recorded on the returned state and never raised.
    """
    state = store.get(key)
    if not isinstance(state, CollectionState):
        state = CollectionState(endpoint=endpoint)
        store[key] = state
    if not _needs_fetch(state, endpoint):
        return state

    # Records from the previous endpoint stay visible until this one resolves
    state.endpoint = endpoint
    token = begin_fetch(state)
    try:
        body = fetcher(endpoint)
    except WordPressError as e:
        resolve_failure(state, token, e.message)
    except Exception:
        # Never leave the slot mid-flight; the next use retries
        resolve_failure(state, token, "Unexpected error while loading.")
        state.stale = True
        raise
    else:
        resolve_success(state, token, body)
    return state


def invalidate(store: MutableMapping[str, Any], key: str = DEFAULT_SLOT) -> None:
    """Mark a slot stale so its next use refetches (the list refresh signal)."""
    state = store.get(key)
    if isinstance(state, CollectionState):
        state.stale = True


def discard(store: MutableMapping[str, Any], key: str = DEFAULT_SLOT) -> None:
    store.pop(key, None)
