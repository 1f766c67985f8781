"""Create-form logic: draft handling, required-field validation and submit."""
import logging
from typing import Any, Callable, Dict, Iterable, Optional

from domain.models import FormDraft
from services.wp_client import WordPressError

logger = logging.getLogger(__name__)

Writer = Callable[[str, Dict[str, Any]], Dict[str, Any]]


def new_draft(fields: Iterable[str]) -> FormDraft:
    return FormDraft(values={f: '' for f in fields})


def update_draft(draft: FormDraft, values: Dict[str, Any]) -> FormDraft:
    for name, value in values.items():
        draft.values[name] = '' if value is None else str(value)
    return draft


def reset_draft(draft: FormDraft) -> FormDraft:
    draft.values = {f: '' for f in draft.values}
    draft.errors = {}
    draft.submit_error = None
    return draft


def validate(draft: FormDraft, required: Iterable[str]) -> Dict[str, str]:
    """One message per required field that is empty or whitespace only."""
    errors: Dict[str, str] = {}
    for name in required:
        if not (draft.values.get(name) or '').strip():
            errors[name] = f"{name} required"
    return errors


def payload_from_draft(draft: FormDraft) -> Dict[str, str]:
    # Blank optional fields are left out so WordPress applies its defaults
    return {k: v.strip() for k, v in draft.values.items() if v and v.strip()}


def submit(draft: FormDraft, endpoint: str, writer: Writer, required: Iterable[str],
           on_success: Optional[Callable[[Dict[str, Any]], None]] = None) -> Optional[Dict[str, Any]]:
    """Validate and write the draft.

    Returns the created record, or None when validation or the write failed.
    The write is skipped entirely while any field is invalid; a failed write
    keeps the values so the user can correct and resubmit.
    """
    draft.errors = validate(draft, required)
    draft.submit_error = None
    if draft.errors:
        return None

    try:
        created = writer(endpoint, payload_from_draft(draft))
    except WordPressError as e:
        logger.warning("Submit to %s failed: %s", endpoint, e.message)
        draft.submit_error = e.message
        return None

    reset_draft(draft)
    if on_success is not None:
        on_success(created)
    return created
