"""
HTTP client for the event admin REST API.

All requests share one `requests.Session` with JSON headers and a fixed
timeout. Every failure (transport error, non-2xx status, body that is not
JSON) surfaces as `ApiError`; callers never see a `requests` exception.
"""
import logging
import time

import requests

from core.config import API_BASE_URL, API_TIMEOUT
from core.errors import ApiError, normalize_field_errors

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin wrapper around a `requests.Session` bound to one base URL."""

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = API_TIMEOUT):
        if not base_url:
            raise ValueError("API base URL is required")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json",
        })

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, params: dict = None) -> dict:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: dict) -> dict:
        return self._request("POST", path, json=payload)

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = self.url_for(path)
        started = time.monotonic()

        try:
            response = self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            logger.error("API %s %s timed out after %.1fs: %s", method, url, self.timeout, e)
            raise ApiError("The server took too long to respond") from e
        except requests.exceptions.ConnectionError as e:
            logger.error("API %s %s connection error: %s", method, url, e)
            raise ApiError("Could not connect to the server") from e
        except requests.RequestException as e:
            logger.error("API %s %s failed: %s", method, url, e)
            raise ApiError(f"Request failed: {e}") from e

        duration_ms = int((time.monotonic() - started) * 1000)

        if not response.ok:
            body = self._json_or_none(response)
            errors = normalize_field_errors(body.get("errors")) if isinstance(body, dict) else {}
            message = body.get("message") if isinstance(body, dict) else None
            logger.error(
                "API %s %s status=%d duration_ms=%d body=%s",
                method, url, response.status_code, duration_ms, response.text[:200],
            )
            raise ApiError(
                message or f"Server responded with HTTP {response.status_code}",
                status_code=response.status_code,
                errors=errors,
            )

        body = self._json_or_none(response)
        if body is None:
            logger.error("API %s %s returned a non-JSON body", method, url)
            raise ApiError("Server returned an unreadable response", status_code=response.status_code)

        logger.debug("API %s %s status=%d duration_ms=%d", method, url, response.status_code, duration_ms)
        return body

    @staticmethod
    def _json_or_none(response):
        try:
            return response.json()
        except ValueError:
            return None
