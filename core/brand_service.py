"""
Brand endpoints of the admin API.

Each call validates the response against its endpoint's envelope and maps
every failure to an `ApiError` with a fixed, user-facing message. Server
field errors travel along on `ApiError.errors` so forms can show them.
"""
import logging
from typing import List

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from core.api_client import ApiClient
from core.errors import ApiError, ValidationError
from models.brand import Brand
from models.envelopes import BrandListEnvelope, BrandSearchEnvelope, RecordEnvelope
from models.search_filter import SearchFilter

logger = logging.getLogger(__name__)


def as_payload_dict(payload) -> dict:
    """Accept a pydantic payload or a plain dict."""
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    return dict(payload)


def unwrap(envelope_cls, body, failure_message: str):
    """Validate `body` against `envelope_cls`, raising ApiError when it does not fit."""
    try:
        return envelope_cls.model_validate(body)
    except SchemaError as e:
        logger.error("%s: unexpected response shape: %s", envelope_cls.__name__, e)
        raise ApiError(failure_message) from e


class BrandService:
    """list / search / add / edit for brands."""

    def __init__(self, client: ApiClient):
        self.client = client

    def list_brands(self) -> List[Brand]:
        message = "Failed to fetch brands"
        try:
            body = self.client.get("/brands")
        except ApiError as e:
            logger.error("Error fetching brands: %s", e)
            raise ApiError(message, status_code=e.status_code) from e
        return unwrap(BrandListEnvelope, body, message).data

    def search_brands(self, search_filter: SearchFilter) -> List[Brand]:
        if search_filter is None:
            raise ValidationError("Search parameters are required")

        message = "Failed to search brands"
        try:
            body = self.client.get("/brands/search", params=search_filter.to_request_params())
        except ApiError as e:
            logger.error("Error searching brands: %s", e)
            raise ApiError(message, status_code=e.status_code) from e
        return unwrap(BrandSearchEnvelope, body, message).brands

    def add_brand(self, payload) -> RecordEnvelope:
        if not payload:
            raise ValidationError("Brand data is required")

        message = "Failed to add brand"
        try:
            body = self.client.post("/brands/add", as_payload_dict(payload))
        except ApiError as e:
            logger.error("Error adding brand: %s", e)
            raise ApiError(message, status_code=e.status_code, errors=e.errors) from e
        return unwrap(RecordEnvelope, body, message)

    def edit_brand(self, brand_id, payload) -> RecordEnvelope:
        if brand_id in (None, "") or not payload:
            raise ValidationError("Brand ID and data are required")

        message = "Failed to edit brand"
        try:
            body = self.client.post(f"/brands/edit/{brand_id}", as_payload_dict(payload))
        except ApiError as e:
            logger.error("Error editing brand %s: %s", brand_id, e)
            raise ApiError(message, status_code=e.status_code, errors=e.errors) from e
        return unwrap(RecordEnvelope, body, message)
