from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Union

RecordId = Union[int, str]


def _rendered(value: Any) -> str:
    """WordPress sends text fields either as plain strings or {"rendered": "..."}."""
    if isinstance(value, dict):
        value = value.get('rendered', value.get('raw', ''))
    if value is None:
        return ''
    return str(value)


def _require_id(d: Dict[str, Any], kind: str) -> RecordId:
    rid = d.get('id')
    if rid is None or rid == '':
        raise ValueError(f"{kind} record has no id")
    return rid


@dataclass
class Post:
    id: RecordId
    title: str = ''
    excerpt: str = ''
    content: str = ''
    status: str = 'publish'  # publish | draft | pending | private | future
    date: Optional[str] = None
    link: Optional[str] = None
    author: Optional[RecordId] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


def post_from_dict(d: Dict[str, Any]) -> Post:
    """Build a Post from an API record, dropping keys we do not model."""
    return Post(
        id=_require_id(d, 'post'),
        title=_rendered(d.get('title')),
        excerpt=_rendered(d.get('excerpt')),
        content=_rendered(d.get('content')),
        status=d.get('status') or 'publish',
        date=d.get('date'),
        link=d.get('link'),
        author=d.get('author'),
        raw=dict(d),
    )


@dataclass
class Author:
    id: RecordId
    name: str = ''
    slug: str = ''
    description: str = ''
    link: Optional[str] = None
    avatar_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


def _largest_avatar(avatar_urls: Any) -> Optional[str]:
    # avatar_urls is keyed by pixel size ("24", "48", "96")
    if not isinstance(avatar_urls, dict) or not avatar_urls:
        return None
    sizes = []
    for size, url in avatar_urls.items():
        try:
            sizes.append((int(size), url))
        except (TypeError, ValueError):
            continue
    if not sizes:
        return None
    return max(sizes)[1]


def author_from_dict(d: Dict[str, Any]) -> Author:
    return Author(
        id=_require_id(d, 'author'),
        name=d.get('name') or '',
        slug=d.get('slug') or '',
        description=d.get('description') or '',
        link=d.get('link'),
        avatar_url=_largest_avatar(d.get('avatar_urls')),
        raw=dict(d),
    )


@dataclass
class CollectionState:
    """Latest result of one data-fetch slot.

    `records` only ever holds the body of the most recently resolved successful
    response; `loading` is true between dispatch and the first resolution.
    """
    endpoint: str
    records: List[Dict[str, Any]] = field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    request_id: int = 0
    stale: bool = False


@dataclass
class FormDraft:
    values: Dict[str, str] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)
    submit_error: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
