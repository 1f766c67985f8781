import html
import re

_TAG_RE = re.compile(r'<[^>]+>')
_WS_RE = re.compile(r'\s+')


def strip_html(value: str) -> str:
    """Plain text from a WordPress `rendered` field (tags removed, entities decoded)."""
    if not value:
        return ''
    text = _TAG_RE.sub(' ', value)
    text = html.unescape(text)
    return _WS_RE.sub(' ', text).strip()


def truncate(text: str, limit: int = 200) -> str:
    if len(text) <= limit:
        return text
    cut = text[:limit].rsplit(' ', 1)[0] or text[:limit]
    return cut.rstrip(' ,.;:') + '…'
