"""
WordPress REST API client.

Reads:  GET  {base_url}{endpoint}          -> JSON array of records
Writes: POST {base_url}{endpoint} (JSON)   -> created record

Every failure surfaces as a WordPressError subclass: FetchError for reads,
SubmitError for writes. Callers decide how to show it.
"""
import logging
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import HTTPError

logger = logging.getLogger(__name__)


class WordPressError(Exception):
    """Request to the WordPress API did not produce a usable response."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class FetchError(WordPressError):
    pass


class SubmitError(WordPressError):
    pass


def _error_message(response: requests.Response) -> str:
    """Prefer the message from a WordPress error payload ({code, message, data})."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get('message'):
        return str(payload['message'])
    if response.status_code in (401, 403):
        return "Not authorized. Check WP_USERNAME and WP_APP_PASSWORD."
    if response.status_code == 429:
        return "Rate limit exceeded. Wait before retrying."
    return f"HTTP {response.status_code}: {response.reason or 'request failed'}"


class WordPressClient:
    def __init__(self, base_url: str, username: Optional[str] = None,
                 app_password: Optional[str] = None, timeout: float = 10.0,
                 per_page: Optional[int] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.per_page = per_page
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        if username and app_password:
            # Application Passwords are sent with HTTP Basic auth
            self.session.auth = (username, app_password)

    def url(self, endpoint: str) -> str:
        if endpoint.startswith(('http://', 'https://')):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _request(self, method: str, endpoint: str, error_cls, **kwargs) -> Any:
        url = self.url(endpoint)
        logger.info("%s %s", method, url)
        try:
            response = self.session.request(
                method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise error_cls(f"Request failed: {e}") from e

        try:
            response.raise_for_status()
        except HTTPError as e:
            message = _error_message(response)
            logger.warning("%s %s -> HTTP %s: %s", method, url,
                           response.status_code, message)
            raise error_cls(message, status=response.status_code) from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning("%s %s returned non-JSON body", method, url)
            raise error_cls("Response was not valid JSON.",
                            status=response.status_code) from e

    def get_collection(self, endpoint: str,
                       params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        query = dict(params or {})
        if self.per_page and 'per_page' not in query:
            query['per_page'] = self.per_page
        data = self._request('GET', endpoint, FetchError, params=query)
        if not isinstance(data, list):
            raise FetchError("Expected a JSON array of records.")
        logger.info("Fetched %d records from %s", len(data), endpoint)
        return data

    def create_record(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        data = self._request('POST', endpoint, SubmitError, json=payload)
        if not isinstance(data, dict):
            raise SubmitError("Expected the created record as a JSON object.")
        logger.info("Created record %s at %s", data.get('id'), endpoint)
        return data
