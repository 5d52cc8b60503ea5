"""
State behind the brand and exhibitor dialogs.

The Flet dialogs only mirror this state into controls; every rule about
required fields, error placement and the submit lifecycle lives here.
"""
import logging
from typing import Callable, List, Optional, Tuple

from pydantic import ValidationError as SchemaError

from core.errors import ApiError
from models.brand import BRAND_FIELDS, Brand, BrandPayload
from models.exhibitor import ExhibitorPayload

logger = logging.getLogger(__name__)

GENERAL_ERROR = "general"
EXHIBITOR_LOAD_ERROR = "Failed to load exhibitors"


class FormState:
    """Field values, field errors and the submitting flag of one dialog."""

    fields: Tuple[str, ...] = ()
    required: Tuple[str, ...] = ()
    payload_cls = None

    def __init__(self):
        self.values = {field: "" for field in self.fields}
        self.errors = {}
        self.submitting = False

    def set_value(self, field: str, value):
        if field not in self.values:
            raise KeyError(field)
        self.values[field] = value or ""

    def validate(self) -> dict:
        """Local required-field check; returns {field: message}."""
        return {
            field: "This field is required"
            for field in self.required
            if not str(self.values.get(field, "")).strip()
        }

    def build_payload(self):
        return self.payload_cls(**self.values)

    def apply_error(self, error: Exception):
        """Spread server field errors onto known inputs, else one general error."""
        field_errors = getattr(error, "errors", None) or {}
        known = {field: msg for field, msg in field_errors.items() if field in self.values}
        if known:
            self.errors = dict(known)
            leftover = [msg for field, msg in field_errors.items() if field not in self.values]
            if leftover:
                self.errors[GENERAL_ERROR] = leftover[0]
        else:
            self.errors = {GENERAL_ERROR: str(getattr(error, "message", None) or error)}

    def submit(self, mutation: Callable) -> bool:
        """
        Validate, then call `mutation(payload)`.

        Returns True on success (caller closes the dialog). On failure the
        errors are recorded on the form and False is returned, leaving the
        dialog open with the action enabled again.
        """
        self.submitting = True
        self.errors = {}
        try:
            missing = self.validate()
            if missing:
                self.errors = missing
                return False
            try:
                payload = self.build_payload()
            except SchemaError as e:
                logger.warning("Form payload rejected: %s", e)
                self.errors = {GENERAL_ERROR: "Please check the highlighted fields"}
                return False
            try:
                mutation(payload)
            except ApiError as e:
                self.apply_error(e)
                return False
            return True
        finally:
            self.submitting = False


class BrandFormState(FormState):
    """Add/edit brand dialog state, including the exhibitor select options."""

    fields = BRAND_FIELDS
    required = ("brand_name", "exhibitor_id")
    payload_cls = BrandPayload

    def __init__(self, brand: Optional[Brand] = None):
        super().__init__()
        self.brand = None
        self.exhibitor_options: List[Tuple[str, str]] = []
        self.loading_exhibitors = False
        if brand is not None:
            self.seed(brand)

    def seed(self, brand: Optional[Brand]):
        """Reload every field from `brand` when a different record is passed in."""
        if brand is None or brand is self.brand:
            return
        self.brand = brand
        self.values = brand.form_values()

    def load_exhibitors(self, exhibitor_service) -> bool:
        self.loading_exhibitors = True
        try:
            envelope = exhibitor_service.list_exhibitors()
        except ApiError as e:
            logger.error("Failed to fetch exhibitors: %s", e)
            self.errors = {**self.errors, "exhibitor_id": EXHIBITOR_LOAD_ERROR}
            return False
        finally:
            self.loading_exhibitors = False
        self.exhibitor_options = [
            (str(exhibitor.exhibitor_id), exhibitor.display_label)
            for exhibitor in envelope.data
            if exhibitor.exhibitor_id is not None
        ]
        return True


class ExhibitorFormState(FormState):
    fields = ("name", "position", "company", "profile_picture")
    required = ("name",)
    payload_cls = ExhibitorPayload
