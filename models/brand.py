# models/brand.py
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models.exhibitor import ExhibitorSummary

# Fields the add/edit forms send, in display order
BRAND_FIELDS = (
    "brand_name",
    "image_url",
    "description",
    "location",
    "hall",
    "stand_number",
    "product_tag",
    "exhibitor_id",
)


class Brand(BaseModel):
    """A brand record as returned by the brands endpoints."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    brand_id: Optional[Union[int, str]] = Field(
        default=None,
        validation_alias=AliasChoices("BrandID", "brand_id", "id"),
        serialization_alias="BrandID",
    )
    brand_name: Optional[str] = ""
    image_url: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    hall: Optional[str] = None
    stand_number: Optional[str] = None
    product_tag: Optional[str] = None
    exhibitor_id: Optional[str] = None
    exhibitor: Optional[ExhibitorSummary] = None

    @field_validator("brand_name", mode="before")
    @classmethod
    def null_name_is_empty(cls, value):
        return "" if value is None else value

    @property
    def tags(self) -> list:
        """Split the comma-separated tag string into trimmed, non-empty tags."""
        if not self.product_tag:
            return []
        return [t.strip() for t in self.product_tag.split(",") if t.strip()]

    @property
    def exhibitor_company(self) -> str:
        if not self.exhibitor:
            return ""
        return self.exhibitor.company or self.exhibitor.company_name or ""

    def form_values(self) -> dict:
        """Field values used to seed the edit form; missing values become ""."""
        return {field: getattr(self, field) or "" for field in BRAND_FIELDS}


class BrandPayload(BaseModel):
    """Body sent to /brands/add and /brands/edit/{id}."""

    brand_name: str
    image_url: str = ""
    description: str = ""
    location: str = ""
    hall: str = ""
    stand_number: str = ""
    product_tag: str = ""
    exhibitor_id: str
