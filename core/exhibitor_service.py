"""Exhibitor endpoints of the admin API."""
import logging

from core.api_client import ApiClient
from core.brand_service import as_payload_dict, unwrap
from core.errors import ApiError, ValidationError
from models.envelopes import ExhibitorListEnvelope, RecordEnvelope

logger = logging.getLogger(__name__)


class ExhibitorService:

    def __init__(self, client: ApiClient):
        self.client = client

    def list_exhibitors(self) -> ExhibitorListEnvelope:
        """Return the envelope; the exhibitors are under `.data`."""
        message = "Failed to fetch exhibitors"
        try:
            body = self.client.get("/brands/exhibitor/display")
        except ApiError as e:
            logger.error("Error fetching exhibitors: %s", e)
            raise ApiError(message, status_code=e.status_code) from e
        return unwrap(ExhibitorListEnvelope, body, message)

    def add_exhibitor(self, payload) -> RecordEnvelope:
        if not payload:
            raise ValidationError("Exhibitor data is required")

        message = "Failed to add exhibitor"
        try:
            body = self.client.post("/brands/exhibitor/add", as_payload_dict(payload))
        except ApiError as e:
            logger.error("Error adding exhibitor: %s", e)
            raise ApiError(message, status_code=e.status_code, errors=e.errors) from e
        return unwrap(RecordEnvelope, body, message)
