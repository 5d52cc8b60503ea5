"""
Response envelopes, one per endpoint.

The backend wraps collections differently per route (``data`` for lists,
``brands`` for search). Each endpoint gets its own schema so unwrapping happens
once, inside the client.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from models.brand import Brand
from models.exhibitor import Exhibitor


class BrandListEnvelope(BaseModel):
    """GET /brands"""

    model_config = ConfigDict(extra="ignore")

    data: List[Brand] = []

    @field_validator("data", mode="before")
    @classmethod
    def null_data_is_empty(cls, value):
        return [] if value is None else value


class BrandSearchEnvelope(BaseModel):
    """GET /brands/search"""

    model_config = ConfigDict(extra="ignore")

    brands: List[Brand] = []

    @field_validator("brands", mode="before")
    @classmethod
    def null_brands_is_empty(cls, value):
        return [] if value is None else value


class ExhibitorListEnvelope(BaseModel):
    """GET /brands/exhibitor/display"""

    model_config = ConfigDict(extra="ignore")

    data: List[Exhibitor] = []

    @field_validator("data", mode="before")
    @classmethod
    def null_data_is_empty(cls, value):
        return [] if value is None else value


class RecordEnvelope(BaseModel):
    """POST add/edit routes. The created or updated record sits under ``data``."""

    model_config = ConfigDict(extra="allow")

    message: Optional[str] = None
    data: Optional[Any] = None
