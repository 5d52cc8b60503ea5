# models/search_filter.py
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Union

# URL query parameter names, also the search endpoint's parameter names
FILTER_PARAMS = ("name", "location", "hall", "product_tag")


@dataclass(frozen=True)
class SearchFilter:
    """The four optional search constraints. None or "" means no constraint."""

    name: Optional[str] = None
    location: Optional[str] = None
    hall: Optional[str] = None
    product_tag: Optional[str] = None

    @classmethod
    def from_params(cls, params: Mapping) -> "SearchFilter":
        """Build a filter from URL query parameters; unknown keys are ignored."""
        return cls(**{key: params.get(key) for key in FILTER_PARAMS})

    def values(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def is_active(self) -> bool:
        """True when at least one field is non-null and non-empty."""
        return any(value is not None and value != "" for value in self.values().values())

    def to_query(self) -> dict:
        """Parameters worth writing to the URL: values that are not blank once trimmed."""
        return {key: value for key, value in self.values().items() if value and value.strip() != ""}

    def to_request_params(self) -> dict:
        """Parameters for GET /brands/search; None values are left out."""
        return {key: value for key, value in self.values().items() if value is not None}


@dataclass(frozen=True)
class FetchAll:
    pass


@dataclass(frozen=True)
class Search:
    filter: SearchFilter


FetchMode = Union[FetchAll, Search]


def derive_fetch_mode(search_filter: Optional[SearchFilter]) -> FetchMode:
    """Pick the retrieval mode for a list view from its current filter."""
    if search_filter is None or not search_filter.is_active():
        return FetchAll()
    return Search(search_filter)
