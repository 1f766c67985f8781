import streamlit as st
from typing import Any, Callable, Dict, List, Sequence, Tuple


def keyed_items(records: Sequence[Dict[str, Any]],
                key_prefix: str) -> Tuple[List[Tuple[str, Dict[str, Any]]], List[str]]:
    """Pair each record with a widget key derived from its id.

    Keys must be unique for Streamlit to keep widget identity across reruns,
    so records with a missing or repeated id are left out and reported in the
    second list instead.
    """
    items = []
    skipped = []
    seen = set()
    for position, record in enumerate(records):
        rid = record.get('id')
        if rid is None or rid == '':
            skipped.append(f"Skipped record #{position + 1} without id.")
            continue
        key = f"{key_prefix}_{rid}"
        if key in seen:
            skipped.append(f"Skipped duplicate record id {rid!r}.")
            continue
        seen.add(key)
        items.append((key, record))
    return items, skipped


def render_list(records: Sequence[Dict[str, Any]],
                render_item: Callable[[Dict[str, Any], str], None],
                key_prefix: str,
                empty_message: str = "Nothing to show yet.") -> int:
    """Render one child per record. Returns the number of children rendered."""
    items, skipped = keyed_items(records, key_prefix)
    for message in skipped:
        st.warning(message)
    if not items:
        st.info(empty_message)
        return 0
    for key, record in items:
        render_item(record, key)
    return len(items)
