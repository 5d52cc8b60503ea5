"""
Unit tests for the API client.

Uses a mocked requests.Session (no network calls).
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from core.api_client import ApiClient
from core.errors import ApiError


def _response(ok=True, status=200, body=None, text=""):
    response = MagicMock()
    response.ok = ok
    response.status_code = status
    response.text = text
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


class TestApiClientInit:

    def test_strips_trailing_slash(self):
        client = ApiClient(base_url="https://example.test/api/")
        assert client.base_url == "https://example.test/api"
        assert client.url_for("/brands") == "https://example.test/api/brands"

    def test_requires_base_url(self):
        with pytest.raises(ValueError, match="base URL is required"):
            ApiClient(base_url="")


@patch("core.api_client.requests.Session")
class TestApiClientRequests:

    def test_get_returns_json_body(self, mock_session_class):
        session = MagicMock()
        mock_session_class.return_value = session
        session.request.return_value = _response(body={"data": []})

        client = ApiClient(base_url="https://example.test/api", timeout=5)
        body = client.get("/brands/search", params={"hall": "A"})

        assert body == {"data": []}
        session.request.assert_called_once_with(
            "GET", "https://example.test/api/brands/search", timeout=5, params={"hall": "A"}
        )

    def test_post_sends_json(self, mock_session_class):
        session = MagicMock()
        mock_session_class.return_value = session
        session.request.return_value = _response(body={"message": "ok"})

        client = ApiClient(base_url="https://example.test/api", timeout=5)
        client.post("/brands/add", {"brand_name": "Lego"})

        args, kwargs = session.request.call_args
        assert args == ("POST", "https://example.test/api/brands/add")
        assert kwargs["json"] == {"brand_name": "Lego"}

    def test_non_2xx_raises_with_field_errors(self, mock_session_class):
        session = MagicMock()
        mock_session_class.return_value = session
        session.request.return_value = _response(
            ok=False,
            status=422,
            body={"message": "The given data was invalid.", "errors": {"brand_name": ["Required."]}},
            text="invalid",
        )

        client = ApiClient(base_url="https://example.test/api")
        with pytest.raises(ApiError) as exc_info:
            client.post("/brands/add", {})

        assert exc_info.value.status_code == 422
        assert exc_info.value.errors == {"brand_name": "Required."}
        assert exc_info.value.message == "The given data was invalid."

    def test_non_2xx_without_json_body(self, mock_session_class):
        session = MagicMock()
        mock_session_class.return_value = session
        session.request.return_value = _response(ok=False, status=500, body=ValueError("no json"), text="oops")

        client = ApiClient(base_url="https://example.test/api")
        with pytest.raises(ApiError, match="HTTP 500") as exc_info:
            client.get("/brands")
        assert exc_info.value.errors == {}

    def test_transport_error_is_wrapped(self, mock_session_class):
        session = MagicMock()
        mock_session_class.return_value = session
        session.request.side_effect = requests.ConnectionError("refused")

        client = ApiClient(base_url="https://example.test/api")
        with pytest.raises(ApiError, match="Could not connect"):
            client.get("/brands")

    def test_timeout_is_wrapped(self, mock_session_class):
        session = MagicMock()
        mock_session_class.return_value = session
        session.request.side_effect = requests.Timeout("slow")

        client = ApiClient(base_url="https://example.test/api")
        with pytest.raises(ApiError, match="too long"):
            client.get("/brands")

    def test_unreadable_success_body(self, mock_session_class):
        session = MagicMock()
        mock_session_class.return_value = session
        session.request.return_value = _response(body=ValueError("html"))

        client = ApiClient(base_url="https://example.test/api")
        with pytest.raises(ApiError, match="unreadable"):
            client.get("/brands")
