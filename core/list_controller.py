"""
List view controllers for the Brands and Exhibitors screens.

A controller owns the in-memory collection of one list view. It is plain
synchronous Python: the Flet views call it from worker threads and re-render
through the `on_change` callback. Fetches are tagged with a request token so
that when two requests overlap, only the most recently issued one may write
the collection.
"""
import logging
import threading
from typing import Callable, List, Optional

from core.errors import ApiError, ValidationError
from core.notifier import Notifier
from core.sorting import SortConfig, sort_brands
from models.brand import Brand
from models.search_filter import FetchAll, SearchFilter, derive_fetch_mode

logger = logging.getLogger(__name__)


class ListController:
    """Collection, loading flag and last-write-wins bookkeeping shared by both lists."""

    def __init__(
        self,
        notifier: Notifier = None,
        on_change: Callable[[], None] = None,
        audit: Callable[[str], None] = None,
    ):
        self.notifier = notifier or Notifier()
        self.on_change = on_change
        self.audit = audit
        self.items = []
        self.loading = False
        self._latest_token = 0
        self._lock = threading.Lock()

    def _changed(self):
        if self.on_change:
            self.on_change()

    def _record(self, action: str):
        if self.audit:
            self.audit(action)

    def _begin(self) -> int:
        with self._lock:
            self._latest_token += 1
            token = self._latest_token
            self.loading = True
        self._changed()
        return token

    def _is_latest(self, token: int) -> bool:
        return token == self._latest_token

    def _load(self, fetch: Callable[[], list], failure_message: str):
        """
        Run `fetch` and replace the collection with its result.

        On failure the previous collection stays, the error is logged and a
        notification is shown. Returns True when the collection was replaced.
        """
        token = self._begin()
        replaced = False
        try:
            result = fetch()
        except ApiError as e:
            logger.error("%s: %s", failure_message, e)
            with self._lock:
                stale = not self._is_latest(token)
            if not stale:
                self.notifier.error(e.message or failure_message)
        else:
            with self._lock:
                if self._is_latest(token):
                    self.items = list(result or [])
                    replaced = True
                else:
                    logger.debug("Dropping stale response for request %d", token)
        finally:
            with self._lock:
                if self._is_latest(token):
                    self.loading = False
        self._changed()
        return replaced


class BrandListController(ListController):
    """
    Brands list: fetch-all vs search by filter, add/edit with full refresh,
    local sort and local drag-and-drop reorder.
    """

    def __init__(self, service, notifier: Notifier = None, on_change=None, audit=None):
        super().__init__(notifier=notifier, on_change=on_change, audit=audit)
        self.service = service
        self.filter = SearchFilter()
        self.selected: Optional[Brand] = None

    # ---- retrieval ----

    def fetch_all(self) -> bool:
        return self._load(self.service.list_brands, "Failed to load brands")

    def run_search(self, search_filter: SearchFilter) -> bool:
        return self._load(lambda: self.service.search_brands(search_filter), "Search failed")

    def search(self, search_filter: Optional[SearchFilter]) -> bool:
        """Entry point for submit/clear and URL changes alike."""
        self.filter = search_filter or SearchFilter()
        mode = derive_fetch_mode(search_filter)
        if isinstance(mode, FetchAll):
            return self.fetch_all()
        return self.run_search(mode.filter)

    handle_navigation = search

    # ---- mutations ----

    def select(self, brand: Optional[Brand]):
        self.selected = brand

    def add_brand(self, payload):
        try:
            result = self.service.add_brand(payload)
        except ApiError as e:
            self.notifier.error(e.message or "Failed to add brand")
            raise
        self.fetch_all()
        self._record(f"Added brand: {getattr(payload, 'brand_name', '')}")
        self.notifier.success("Brand added successfully")
        return result

    def edit_brand(self, payload):
        brand = self.selected
        if brand is None or brand.brand_id in (None, ""):
            error = ValidationError("No brand selected for editing")
            self.notifier.error(error.message)
            raise error
        try:
            result = self.service.edit_brand(brand.brand_id, payload)
        except ApiError as e:
            self.notifier.error(e.message or "Failed to update brand")
            raise
        self.fetch_all()
        self._record(f"Updated brand #{brand.brand_id}: {getattr(payload, 'brand_name', '')}")
        self.notifier.success("Brand updated successfully")
        self.selected = None
        return result

    # ---- local presentation ----

    def sorted_items(self, config: SortConfig) -> List[Brand]:
        return sort_brands(self.items, config)

    def reorder(self, old_index: int, new_index: int):
        """Move one brand within the local list. Not sent to the server."""
        if old_index == new_index:
            return
        if not (0 <= old_index < len(self.items)) or not (0 <= new_index < len(self.items)):
            raise IndexError("reorder index out of range")
        with self._lock:
            items = list(self.items)
            items.insert(new_index, items.pop(old_index))
            self.items = items
        self._changed()


class ExhibitorListController(ListController):
    """Exhibitors list: fetch-all and add with full refresh."""

    def __init__(self, service, notifier: Notifier = None, on_change=None, audit=None):
        super().__init__(notifier=notifier, on_change=on_change, audit=audit)
        self.service = service

    def fetch_all(self) -> bool:
        return self._load(lambda: self.service.list_exhibitors().data, "Failed to load exhibitors")

    def add_exhibitor(self, payload):
        try:
            result = self.service.add_exhibitor(payload)
        except ApiError as e:
            self.notifier.error(e.message or "Failed to add exhibitor")
            raise
        self.fetch_all()
        self._record(f"Added exhibitor: {getattr(payload, 'name', '')}")
        self.notifier.success("Exhibitor added successfully")
        return result
