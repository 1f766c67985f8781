"""Route resolution and the navigation context handed to each page.

Pages never read the router themselves; they get a NavContext carrying the
current path and a `navigate` callable, so they can be rendered in isolation.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import unquote


@dataclass(frozen=True)
class NavContext:
    current_path: str
    navigate: Callable[[str], None]


def normalize_path(path: Optional[str]) -> str:
    if not path:
        return ''
    path = unquote(path).strip()
    if not path.startswith('/'):
        path = '/' + path
    if len(path) > 1:
        path = path.rstrip('/')
    return path


def resolve_route(path: Optional[str], registry: Mapping[str, Dict[str, Any]], default: str) -> str:
    """Map a URL path to a page key, falling back to the page at `default`."""
    wanted = normalize_path(path)
    default_key = None
    for key, page in registry.items():
        if page['path'] == wanted:
            return key
        if page['path'] == default:
            default_key = key
    if default_key is None:
        raise KeyError(f"No page registered for default path {default}")
    return default_key


def path_for_label(label: str, registry: Mapping[str, Dict[str, Any]]) -> Optional[str]:
    for page in registry.values():
        if page['label'] == label:
            return page['path']
    return None


def slots_left_behind(previous_key: Optional[str], current_key: str,
                      registry: Mapping[str, Dict[str, Any]]) -> List[str]:
    """Fetch slots owned by the page being left; empty when the page did not change."""
    if previous_key is None or previous_key == current_key or previous_key not in registry:
        return []
    return list(registry[previous_key].get('slots', []))
