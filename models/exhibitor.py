# models/exhibitor.py
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Exhibitor(BaseModel):
    """An exhibitor as returned by /brands/exhibitor/display."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    exhibitor_id: Optional[Union[int, str]] = Field(
        default=None,
        validation_alias=AliasChoices("ExhibitorID", "exhibitor_id", "id"),
        serialization_alias="ExhibitorID",
    )
    name: Optional[str] = None
    position: Optional[str] = None
    company: Optional[str] = None
    company_name: Optional[str] = None
    profile_picture: Optional[str] = None

    @property
    def company_label(self) -> str:
        return self.company or self.company_name or ""

    @property
    def display_label(self) -> str:
        """Label used in the exhibitor select: name first, company as fallback."""
        return self.name or self.company_label


class ExhibitorSummary(BaseModel):
    """Exhibitor fields embedded in a brand record."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True, extra="ignore")

    company: Optional[str] = None
    company_name: Optional[str] = None
    name: Optional[str] = None


class ExhibitorPayload(BaseModel):
    """Body sent to /brands/exhibitor/add."""

    name: str
    position: str = ""
    company: str = ""
    profile_picture: str = ""
