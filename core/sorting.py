# core/sorting.py
import re
from dataclasses import dataclass, replace

SORT_FIELDS = {
    "brand_name": "Name",
    "location": "Location",
    "hall": "Hall",
    "stand_number": "Stand",
    "exhibitor": "Exhibitor",
}
DEFAULT_SORT_KEY = "brand_name"

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class SortConfig:
    key: str = DEFAULT_SORT_KEY
    ascending: bool = True

    def __post_init__(self):
        if self.key not in SORT_FIELDS:
            raise ValueError(f"Unknown sort key: {self.key}")

    def toggle(self, key: str) -> "SortConfig":
        """Same key flips direction; a different key starts ascending."""
        if key == self.key:
            return replace(self, ascending=not self.ascending)
        return SortConfig(key=key, ascending=True)


def stand_number_value(value) -> int:
    """Integer formed by the digits of a stand number ("A10" -> 10, "B" -> 0)."""
    digits = _NON_DIGITS.sub("", str(value or ""))
    return int(digits) if digits else 0


def sort_value(brand, key: str):
    if key == "stand_number":
        return stand_number_value(brand.stand_number)
    if key == "exhibitor":
        return brand.exhibitor_company.casefold()
    return (getattr(brand, key) or "").casefold()


def sort_brands(brands, config: SortConfig) -> list:
    """Return a new, stably sorted list; `brands` is left untouched."""
    return sorted(brands, key=lambda b: sort_value(b, config.key), reverse=not config.ascending)
